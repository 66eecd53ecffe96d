"""Output formatters for hypocycloid cam designs.

Converts CamDesign models to JSON, Markdown and plain-text output.

Uses Pydantic's model_dump(mode='json') for serialization so tuples become
lists and the output is plain JSON.
"""

import json
from typing import Optional, TYPE_CHECKING

from ..io import CamDesign

if TYPE_CHECKING:
    from .validation import ValidationResult


def _model_to_dict(model) -> dict:
    """Convert Pydantic model to dict with JSON-compatible types."""
    return model.model_dump(mode='json')


def _validation_to_dict(validation: "ValidationResult") -> dict:
    def messages(items):
        return [
            {
                'severity': msg.severity.value,
                'code': msg.code,
                'message': msg.message,
                'suggestion': msg.suggestion
            }
            for msg in items
        ]

    return {
        'valid': validation.valid,
        'errors': messages(validation.errors),
        'warnings': messages(validation.warnings),
        'infos': messages(validation.infos),
    }


def _fmt_bound(deg: float, radius: Optional[float]) -> str:
    if deg < 0 or radius is None:
        return "not found"
    return f"{deg:.0f}° (radius {radius:.6f})"


def to_json(
    design: CamDesign,
    validation: Optional["ValidationResult"] = None,
    indent: int = 2,
    include_points: bool = True
) -> str:
    """Convert CamDesign to JSON string.

    Args:
        design: CamDesign from design_from_*() functions
        validation: Optional validation results to include in output
        indent: JSON indentation level (default: 2)
        include_points: If False, omit the profile and pin point lists

    Returns:
        JSON string with schema version, parameters, pressure limits and points
    """
    design_dict = _model_to_dict(design)

    # Derived value hosts store alongside the inputs
    design_dict['parameters']['bolt_circle_diameter'] = design.parameters.bolt_circle_diameter

    if not include_points:
        design_dict.pop('profile', None)
        design_dict.pop('pins', None)

    if validation:
        design_dict['validation'] = _validation_to_dict(validation)

    return json.dumps(design_dict, indent=indent)


def to_markdown(
    design: CamDesign,
    validation: Optional["ValidationResult"] = None
) -> str:
    """Convert CamDesign to a markdown specification sheet.

    Args:
        design: CamDesign from design_from_*() functions
        validation: Optional validation results to include

    Returns:
        Markdown specification string
    """
    params = design.parameters
    limits = design.pressure_limits

    md = "# Hypocycloid Cam Specification\n\n"

    md += "## Parameters\n\n"
    md += "| Parameter | Value |\n"
    md += "|-----------|-------|\n"
    md += f"| Tooth Pitch | {params.pitch:.6g} |\n"
    md += f"| Pin Bolt Circle Diameter | {params.bolt_circle_diameter:.6g} |\n"
    md += f"| Pin Diameter | {params.pin_diameter:.6g} |\n"
    md += f"| Eccentricity | {params.eccentricity:.6g} |\n"
    md += f"| Number of Teeth | {params.num_teeth} |\n"
    md += f"| Number of Pins | {params.num_teeth + 1} |\n"
    md += f"| Profile Segments | {params.num_samples} |\n"
    md += f"| Pressure Angle Limit | {params.pressure_angle_limit_deg:.1f}° |\n"
    md += f"| Pressure Angle Offset | {params.pressure_angle_offset:.6g} |\n"
    md += f"| Radial Correction | {design.correction_mode} |\n\n"

    md += "## Pressure Angle Limits\n\n"
    if limits is None:
        md += "Not computed.\n\n"
    else:
        md += "| Bound | Roll Angle | Radius |\n"
        md += "|-------|------------|--------|\n"
        for label, deg, radius in (
            ("Minimum", limits.pa_min_deg, limits.pa_rad_min),
            ("Maximum", limits.pa_max_deg, limits.pa_rad_max),
        ):
            if deg < 0 or radius is None:
                md += f"| {label} | not found | - |\n"
            else:
                md += f"| {label} | {deg:.0f}° | {radius:.6f} |\n"
        md += "\n"

        if not limits.bound_found:
            md += "**Note:** No radial correction was applied to the profile.\n\n"

    md += "## Geometry\n\n"
    md += f"- **Profile points:** {len(design.profile)}\n"
    md += f"- **Pin centres:** {max(len(design.pins) - 1, 0)} (plus closing point)\n"
    md += f"- **Cam centre:** ({-params.eccentricity:.6g}, 0)\n"

    if validation:
        md += "\n## Validation\n\n"

        if validation.valid:
            md += "**Status:** ✅ Parameters are valid\n\n"
        else:
            md += "**Status:** ❌ Parameters have errors\n\n"

        if validation.errors:
            md += "### Errors\n\n"
            for msg in validation.errors:
                md += f"- **{msg.code}**: {msg.message}\n"
                if msg.suggestion:
                    md += f"  - *Suggestion*: {msg.suggestion}\n"
            md += "\n"

        if validation.warnings:
            md += "### Warnings\n\n"
            for msg in validation.warnings:
                md += f"- **{msg.code}**: {msg.message}\n"
                if msg.suggestion:
                    md += f"  - *Suggestion*: {msg.suggestion}\n"
            md += "\n"

        if validation.infos:
            md += "### Information\n\n"
            for msg in validation.infos:
                md += f"- {msg.message}\n"
            md += "\n"

    md += "\n## Notes\n\n"
    md += "- All lengths are in the unit of the tooth pitch\n"
    md += "- The profile is shifted in -x by the eccentricity\n"
    md += "- Mechanical feasibility (eccentricity vs. pin radius) is not checked\n"
    md += "\n---\n"
    md += "*Generated by Hypocam Calculator*\n"

    return md


def to_summary(design: CamDesign) -> str:
    """Convert CamDesign to a short text summary.

    Returns:
        Multi-line formatted summary string
    """
    params = design.parameters
    limits = design.pressure_limits

    lines = [
        "═══ Hypocycloid Cam ═══",
        f"Teeth: {params.num_teeth} | Pins: {params.num_teeth + 1}",
        f"Pitch: {params.pitch:.6g}",
        f"Bolt circle: {params.bolt_circle_diameter:.6g}",
        f"Pin diameter: {params.pin_diameter:.6g}",
        f"Eccentricity: {params.eccentricity:.6g}",
        "",
        f"Pressure angle limit: {params.pressure_angle_limit_deg:.1f}°",
        f"  Min bound: {_fmt_bound(limits.pa_min_deg, limits.pa_rad_min) if limits is not None else 'not computed'}",
        f"  Max bound: {_fmt_bound(limits.pa_max_deg, limits.pa_rad_max) if limits is not None else 'not computed'}",
        f"  Offset:    {params.pressure_angle_offset:.6g} ({design.correction_mode})",
        "",
        f"Profile points: {len(design.profile)}",
    ]

    return "\n".join(lines)
