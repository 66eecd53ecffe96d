"""
Command-line interface for hypocycloid cam generation.
"""

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from ..calculator.core import design_from_parameters
from ..calculator.output import to_json, to_markdown, to_summary
from ..calculator.validation import validate_design
from ..constants import (
    DEFAULT_PITCH,
    DEFAULT_PIN_DIAMETER,
    DEFAULT_ECCENTRICITY,
    DEFAULT_NUM_TEETH,
    DEFAULT_NUM_SAMPLES,
    DEFAULT_PRESSURE_ANGLE_LIMIT_DEG,
    DEFAULT_PRESSURE_ANGLE_OFFSET,
    DEFAULT_CIRCLE_SEGMENTS,
)
from ..enums import CorrectionMode
from ..exceptions import InvalidParameterError
from ..io.loaders import CamParameters, load_design_json, save_design_json


def get_version_string() -> str:
    """Installed package version, or the source version if not installed."""
    from importlib.metadata import version, PackageNotFoundError

    try:
        return version("hypocam")
    except PackageNotFoundError:
        from .. import __version__
        return __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hypocam",
        description="Generate hypocycloid cam profiles and pin layouts for cycloidal drives",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Reference cam (pitch 0.08, pin 0.15, eccentricity 0.05, 10 teeth)
  hypocam

  # Size by pin bolt circle instead of tooth pitch
  hypocam --bolt-circle 40 --pin-diameter 5 --eccentricity 1.5 --teeth 12

  # Markdown specification sheet
  hypocam --pitch 3 --pin-diameter 5 --eccentricity 1.5 --format markdown

  # Pull out-of-limit samples in by 0.2 instead of the default 0
  hypocam --pressure-offset 0.2

  # Snap out-of-limit samples onto the limit circles
  hypocam --pressure-offset 0 --correction-mode clamp

  # Save the complete design (parameters, limits, profile, pins)
  hypocam --teeth 15 --samples 1500 --save-json cam.json

  # Recompute from a saved design
  hypocam --from-json cam.json --format summary
        """
    )

    size = parser.add_mutually_exclusive_group()
    size.add_argument(
        '--pitch',
        type=float,
        default=None,
        help=f'Tooth (lobe) pitch (default: {DEFAULT_PITCH})'
    )
    size.add_argument(
        '--bolt-circle',
        type=float,
        default=None,
        help='Pin bolt circle diameter; overrides pitch (pitch = bolt circle / teeth)'
    )
    size.add_argument(
        '--from-json',
        type=str,
        default=None,
        help='Read parameters from a saved design JSON file'
    )

    parser.add_argument(
        '--pin-diameter',
        type=float,
        default=DEFAULT_PIN_DIAMETER,
        help=f'Pin (roller) diameter (default: {DEFAULT_PIN_DIAMETER})'
    )

    parser.add_argument(
        '--eccentricity',
        type=float,
        default=DEFAULT_ECCENTRICITY,
        help=f'Eccentricity (default: {DEFAULT_ECCENTRICITY})'
    )

    parser.add_argument(
        '--teeth',
        type=int,
        default=DEFAULT_NUM_TEETH,
        help=f'Number of teeth in cam, min 4 (default: {DEFAULT_NUM_TEETH})'
    )

    parser.add_argument(
        '--samples',
        type=int,
        default=DEFAULT_NUM_SAMPLES,
        help=f'Line segments in cam, at least 10 x teeth (default: {DEFAULT_NUM_SAMPLES})'
    )

    parser.add_argument(
        '--pressure-angle',
        type=float,
        default=DEFAULT_PRESSURE_ANGLE_LIMIT_DEG,
        help=f'Pressure angle limit in degrees (default: {DEFAULT_PRESSURE_ANGLE_LIMIT_DEG})'
    )

    parser.add_argument(
        '--pressure-offset',
        type=float,
        default=DEFAULT_PRESSURE_ANGLE_OFFSET,
        help=f'Radial offset for samples outside the limit circles (default: {DEFAULT_PRESSURE_ANGLE_OFFSET})'
    )

    parser.add_argument(
        '--circle-segments',
        type=int,
        default=DEFAULT_CIRCLE_SEGMENTS,
        help=f'Segments for host-drawn circles, stored with the design (default: {DEFAULT_CIRCLE_SEGMENTS})'
    )

    parser.add_argument(
        '--correction-mode',
        choices=[m.value for m in CorrectionMode],
        default=None,
        help='How samples outside the limit circles are corrected (default: offset, or the mode saved in --from-json)'
    )

    parser.add_argument(
        '--format',
        choices=['summary', 'markdown', 'json'],
        default='summary',
        help='Output format on stdout (default: summary)'
    )

    parser.add_argument(
        '--no-points',
        action='store_true',
        help='Leave profile and pin points out of JSON output'
    )

    parser.add_argument(
        '--save-json',
        type=str,
        default=None,
        help='Save the complete design to a JSON file'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {get_version_string()}'
    )

    return parser


def _parameters_from_args(args) -> CamParameters:
    common = dict(
        pin_diameter=args.pin_diameter,
        eccentricity=args.eccentricity,
        num_samples=args.samples,
        pressure_angle_limit_deg=args.pressure_angle,
        pressure_angle_offset=args.pressure_offset,
        circle_segments=args.circle_segments,
    )
    if args.bolt_circle is not None:
        return CamParameters.from_bolt_circle(args.bolt_circle, num_teeth=args.teeth, **common)
    pitch = args.pitch if args.pitch is not None else DEFAULT_PITCH
    return CamParameters(pitch=pitch, num_teeth=args.teeth, **common)


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    mode = args.correction_mode
    try:
        if args.from_json:
            loaded = load_design_json(args.from_json)
            params = loaded.parameters
            if mode is None:
                mode = CorrectionMode(loaded.correction_mode)
        else:
            params = _parameters_from_args(args)
    except (OSError, ValueError, ValidationError) as e:
        print(f"Error loading parameters: {e}", file=sys.stderr)
        return 1

    try:
        design = design_from_parameters(params, mode=mode or CorrectionMode.OFFSET)
    except InvalidParameterError as e:
        print(f"Error: {e}", file=sys.stderr)
        for msg in e.messages:
            if msg.suggestion:
                print(f"  {msg.code}: {msg.suggestion}", file=sys.stderr)
        return 1

    validation = validate_design(design.parameters, design.pressure_limits)

    if args.format == 'json':
        print(to_json(design, validation, include_points=not args.no_points))
    elif args.format == 'markdown':
        print(to_markdown(design, validation))
    else:
        print(to_summary(design))
        for msg in validation.warnings:
            print(f"  ⚠️  {msg.code}: {msg.message}")

    if args.save_json:
        output_path = Path(args.save_json)
        save_design_json(design, output_path)
        print(f"\nSaved design JSON: {output_path}", file=sys.stderr)

    return 0


if __name__ == '__main__':
    sys.exit(main())
