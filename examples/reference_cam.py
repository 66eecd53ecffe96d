"""
Generate the reference cam and compare the two radial correction modes.

Pitch 0.08, pin diameter 0.15, eccentricity 0.05, 10 teeth: the defaults of
the SketchUp hypocycloid cam plug-in.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from hypocam.calculator import design_from_pitch, to_summary, CorrectionMode
from hypocam.core import to_polar
from hypocam.io import save_design_json

print("=" * 70)
print("REFERENCE HYPOCYCLOID CAM")
print("=" * 70)
print()

for mode, offset in ((CorrectionMode.OFFSET, 0.01), (CorrectionMode.CLAMP, 0.0)):
    design = design_from_pitch(
        pitch=0.08,
        pin_diameter=0.15,
        eccentricity=0.05,
        num_teeth=10,
        num_samples=1000,
        pressure_angle_offset=offset,
        mode=mode,
    )

    print("-" * 70)
    print(f"{mode.value.upper()} correction (offset {offset})")
    print("-" * 70)
    print(to_summary(design))

    # Radii measured from the cam centre, which sits at (-e, 0)
    e = design.parameters.eccentricity
    radii = [to_polar(x + e, y)[0] for x, y in design.profile]
    print(f"  Radius range: {min(radii):.6f} .. {max(radii):.6f}")
    print()

    save_design_json(design, f"reference_cam_{mode.value}.json")
    print(f"Saved reference_cam_{mode.value}.json")
    print()
