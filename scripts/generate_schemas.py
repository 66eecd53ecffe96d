#!/usr/bin/env python3
"""
Write JSON Schemas for the saved cam design format.

CamDesign and its parts are Pydantic models; their schemas are what host
integrations validate saved designs against.

Usage:
    python scripts/generate_schemas.py [output_dir]
"""

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pydantic import __version__ as PYDANTIC_VERSION

from hypocam.io.loaders import CamDesign, CamParameters, PressureLimits
from hypocam.io.schema import SCHEMA_VERSION
from hypocam.enums import CorrectionMode, SizeMode

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"
SCHEMA_BASE_ID = "https://hypocam.invalid/schemas"

MODELS = {
    "cam-design": (CamDesign, "Complete hypocycloid cam design written by the calculator"),
    "cam-parameters": (CamParameters, "Inputs for one cam generation run"),
    "pressure-limits": (PressureLimits, "Pressure angle limit circles"),
}


def _with_header(name: str, schema: dict) -> dict:
    # Field names, not aliases, to match model_dump()
    return {
        "$schema": JSON_SCHEMA_DIALECT,
        "$id": f"{SCHEMA_BASE_ID}/{name}-v{SCHEMA_VERSION}.json",
        **schema,
    }


def enums_schema() -> dict:
    return _with_header("enums", {
        "title": "HypocamEnums",
        "description": "String values accepted for hypocam enums",
        "definitions": {
            "SizeMode": {
                "type": "string",
                "enum": [m.value for m in SizeMode],
                "description": "Dimension that drives the cam size",
            },
            "CorrectionMode": {
                "type": "string",
                "enum": [m.value for m in CorrectionMode],
                "description": "Radial correction of out-of-limit samples",
            },
        },
    })


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    output_dir = Path(argv[0]) if argv else Path(__file__).parent.parent / "schemas"
    output_dir.mkdir(parents=True, exist_ok=True)

    print(f"Writing hypocam schemas v{SCHEMA_VERSION} (pydantic {PYDANTIC_VERSION})")

    schemas = {}
    for name, (model, description) in MODELS.items():
        schema = _with_header(name, model.model_json_schema(by_alias=False))
        schema.setdefault("description", description)
        schemas[name] = schema
    schemas["enums"] = enums_schema()

    for name, schema in schemas.items():
        path = output_dir / f"{name}-v{SCHEMA_VERSION}.json"
        path.write_text(json.dumps(schema, indent=2))
        print(f"  {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
