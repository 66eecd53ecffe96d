"""
JSON schema checks for saved cam designs.

This defines the contract between the calculator (which writes designs) and
host integrations (which read them back to rebuild or annotate geometry).

Note: The full JSON Schema is generated from the Pydantic models via
scripts/generate_schemas.py. This module provides runtime validation helpers.
"""

from typing import Any, Dict, List

SCHEMA_VERSION = "1.0"

PARAMETER_FIELDS = {
    "pitch": (int, float),
    "pin_diameter": (int, float),
    "eccentricity": (int, float),
    "num_teeth": (int,),
    "num_samples": (int,),
    "pressure_angle_limit_deg": (int, float),
    "pressure_angle_offset": (int, float),
    "circle_segments": (int,),
}

PRESSURE_LIMIT_FIELDS = ["pa_min_deg", "pa_max_deg", "pa_rad_min", "pa_rad_max"]


def validate_json_schema(data: Dict) -> Dict[str, Any]:
    """
    Validate saved design data against the schema.

    Args:
        data: Parsed JSON data

    Returns:
        {
            "valid": bool,
            "errors": List[str],
            "warnings": List[str],
            "schema_version": str
        }

    Example:
        >>> data = json.loads(Path("cam.json").read_text())
        >>> result = validate_json_schema(data)
        >>> if not result["valid"]:
        ...     print(f"Errors: {result['errors']}")
    """
    errors: List[str] = []
    warnings: List[str] = []

    if not isinstance(data, dict):
        return {
            "valid": False,
            "errors": ["Root must be a JSON object"],
            "warnings": warnings,
            "schema_version": "unknown",
        }

    schema_version = data.get("schema_version", "unknown")
    if schema_version == "unknown":
        warnings.append("Missing 'schema_version' field")
    elif schema_version != SCHEMA_VERSION:
        warnings.append(f"Schema version {schema_version} != current {SCHEMA_VERSION}")

    params = data.get("parameters")
    if not isinstance(params, dict):
        errors.append("Missing required section: 'parameters'")
    else:
        for name, types in PARAMETER_FIELDS.items():
            if name not in params:
                warnings.append(f"parameters.{name} missing, default will be used")
            elif isinstance(params[name], bool) or not isinstance(params[name], types):
                errors.append(
                    f"parameters.{name} must be {'an integer' if types == (int,) else 'numeric'}, "
                    f"got {type(params[name]).__name__}"
                )

    limits = data.get("pressure_limits")
    if limits is None:
        warnings.append("Missing 'pressure_limits' section")
    elif not isinstance(limits, dict):
        errors.append("pressure_limits must be an object")
    else:
        for name in PRESSURE_LIMIT_FIELDS:
            value = limits.get(name)
            if value is not None and not isinstance(value, (int, float)):
                errors.append(f"pressure_limits.{name} must be numeric, got {type(value).__name__}")

    for section in ("profile", "pins"):
        points = data.get(section)
        if points is None:
            continue
        if not isinstance(points, list):
            errors.append(f"'{section}' must be a list of [x, y] pairs")
            continue
        for i, point in enumerate(points):
            if not isinstance(point, (list, tuple)) or len(point) != 2:
                errors.append(f"{section}[{i}] must be an [x, y] pair")
                break

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
        "schema_version": schema_version,
    }
