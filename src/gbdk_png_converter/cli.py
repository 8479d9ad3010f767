"""Command line interface for the Game Boy PNG converter."""

from __future__ import annotations

import argparse
import sys
import warnings
from pathlib import Path

from .converter import ConvertImageResult, ConvertOptions, convert_image
from .errors import ConversionError, UnquantizedInputWarning
from .palette import format_palette_text
from .testimage import save_test_image


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gameboy-convert",
        description=(
            "Convert PNG images of any size to the 4-color Game Boy palette.\n"
            "With --gbdk, the converted image is also packed into 8x8 2bpp tiles and "
            "written as C source for GBDK next to the output PNG.\n"
            f"Palette: {format_palette_text()}"
        ),
        epilog=(
            "examples:\n"
            "  gameboy-convert image.png\n"
            "  gameboy-convert image.png gameboy_image.png\n"
            "  gameboy-convert sprite.png --gbdk --var player_sprite\n"
            "  gameboy-convert image.png output.png --gbdk --quiet"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument("input", nargs="?", help="PNG file to convert")
    parser.add_argument(
        "output",
        nargs="?",
        help="Destination PNG (default: <input>_gameboy.png beside the input)",
    )
    parser.add_argument(
        "--gbdk",
        action="store_true",
        help="Also generate C code for GBDK (<output>.c)",
    )
    parser.add_argument(
        "--var",
        dest="variable_name",
        metavar="NAME",
        help="Custom name for GBDK variables (default: output file name)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail instead of warning when a pixel is not a palette color",
    )
    parser.add_argument(
        "--no-timestamp",
        action="store_true",
        help="Omit the generation timestamp from the C header",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Silent mode (no progress output)",
    )
    parser.add_argument(
        "--make-test-image",
        metavar="PATH",
        help="Write a gradient test PNG to PATH and exit",
    )
    parser.add_argument(
        "--size",
        nargs=2,
        type=int,
        default=(64, 64),
        metavar=("W", "H"),
        help="Test image size for --make-test-image (default: 64 64)",
    )
    return parser


def report(result: ConvertImageResult) -> None:
    conversion = result.conversion
    print(f"Processing {conversion.width}x{conversion.height} pixel image")
    print(f"wrote {conversion.output_path}")
    if result.gbdk is not None:
        gbdk = result.gbdk
        print(f"wrote {gbdk.output_path}")
        print(
            f"Tiles generated: {gbdk.tiles_generated} "
            f"({gbdk.tile_count_x}x{gbdk.tile_count_y}), {gbdk.data_size} bytes"
        )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.make_test_image:
            width, height = args.size
            target = save_test_image(args.make_test_image, width, height)
            if not args.quiet:
                print(f"wrote {target} ({width}x{height})")
            return 0

        if not args.input:
            parser.print_help()
            return 0

        options = ConvertOptions()
        options.output_path = Path(args.output) if args.output else None
        options.generate_gbdk = args.gbdk
        options.variable_name = args.variable_name
        options.strict = args.strict
        options.timestamp = not args.no_timestamp

        if not args.quiet:
            print(f"Converting {args.input} to Game Boy palette...")

        caught: list[warnings.WarningMessage] = []
        try:
            with warnings.catch_warnings(record=True) as caught:
                warnings.simplefilter("always", UnquantizedInputWarning)
                result = convert_image(args.input, options)
        finally:
            for warning in caught:
                if issubclass(warning.category, UnquantizedInputWarning):
                    print(f"Warning: {warning.message}", file=sys.stderr)

        if not args.quiet:
            report(result)
        return 0
    except ConversionError as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
