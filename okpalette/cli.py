"""Command-line front end for the conversion pipeline and palettes.

Usage:
    okpalette convert "#6495ED" --stages
    okpalette palette "#6495ED" --steps 10
    okpalette reverse 0.65 0.2 250
"""

from __future__ import annotations

import argparse
import logging

from okpalette import defaults
from okpalette.errors import MalformedHex
from okpalette.colorspace import (
    Oklch,
    clamp_to_gamut,
    encode_hex,
    format_oklch,
    format_stage,
    forward,
    generate_palette,
    in_gamut,
    normalize_hue,
    reverse,
)

logger = logging.getLogger(__name__)


def _cmd_convert(args: argparse.Namespace) -> int:
    result = forward(args.hex)
    print(format_oklch(result.oklch))
    if args.stages:
        print(f"rgb     {format_stage(result.rgb, 'RGB')}")
        print(f"linear  {format_stage(result.linear_rgb, 'RGB')}")
        print(f"xyz     {format_stage(result.xyz, 'XYZ')}")
        print(f"lms     {format_stage(result.lms, 'LMS')}")
        print(f"oklab   {format_stage(result.oklab, 'Lab')}")
    return 0


def _cmd_palette(args: argparse.Namespace) -> int:
    L, C, h = forward(args.hex).oklch
    entries = generate_palette(L, C, h, steps=args.steps, method=args.method)
    for entry in entries:
        marker = "*" if entry.is_anchor else " "
        print(f"{marker} {entry.hex}  {format_oklch(entry.oklch)}")
    return 0


def _cmd_reverse(args: argparse.Namespace) -> int:
    raw = reverse(args.L, args.C, args.h)
    if in_gamut(raw):
        print(encode_hex(raw))
        return 0
    rgb, chroma = clamp_to_gamut(args.L, args.C, args.h, method=args.method)
    print(f"{encode_hex(rgb)}  (clamped to {format_oklch(Oklch(args.L, chroma, normalize_hue(args.h)))})")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="okpalette",
        description="Convert hex colors to Oklch and build lightness palettes.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    convert = sub.add_parser("convert", help="Convert a hex color to Oklch")
    convert.add_argument("hex", help="Color as #RGB or #RRGGBB")
    convert.add_argument(
        "--stages",
        action="store_true",
        help="Also print every intermediate color space",
    )
    convert.set_defaults(func=_cmd_convert)

    palette = sub.add_parser("palette", help="Build a lightness palette around a hex color")
    palette.add_argument("hex", help="Anchor color as #RGB or #RRGGBB")
    palette.add_argument(
        "--steps",
        type=int,
        default=defaults.DEFAULT_PALETTE_STEPS,
        help=f"Number of swatches (default: {defaults.DEFAULT_PALETTE_STEPS})",
    )
    palette.add_argument(
        "--method",
        choices=defaults.GAMUT_METHODS,
        default=defaults.DEFAULT_GAMUT_METHOD,
        help="Chroma search used for gamut clamping",
    )
    palette.set_defaults(func=_cmd_palette)

    rev = sub.add_parser("reverse", help="Convert Oklch to hex, clamping into sRGB")
    rev.add_argument("L", type=float, help="Lightness (0-1)")
    rev.add_argument("C", type=float, help="Chroma")
    rev.add_argument("h", type=float, help="Hue in degrees")
    rev.add_argument(
        "--method",
        choices=defaults.GAMUT_METHODS,
        default=defaults.DEFAULT_GAMUT_METHOD,
        help="Chroma search used for gamut clamping",
    )
    rev.set_defaults(func=_cmd_reverse)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except MalformedHex as exc:
        logger.error("%s", exc)
        return 2
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    raise SystemExit(main())
