import argparse
import logging
import sys
from pathlib import Path

from asciiramp.brightness import BrightnessMapping
from asciiramp.converter import MAX_HEIGHT, MAX_WIDTH, image_to_ascii
from asciiramp.render import REPEAT, OutputColour
from asciiramp.terminal import fit_bounds

logger = logging.getLogger("asciiramp")


def setup_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="asciiramp", description="Print an image as ASCII art")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "--output-colour",
        "--output-color",
        dest="output_colour",
        default=OutputColour.DEFAULT.value,
        choices=[OutputColour.MATRIX_GREEN.value, OutputColour.COLOUR.value],
        help="Colour the output: matrix_green or truecolor per pixel (default: plain)",
    )
    parser.add_argument(
        "--brightness-mapping",
        default=BrightnessMapping.AVERAGE.value,
        choices=[m.value for m in BrightnessMapping],
        help="How pixel colour becomes brightness (default: average)",
    )
    parser.add_argument("--invert", action="store_true", default=False, help="Negate the image before conversion")
    parser.add_argument(
        "--max-width", type=_positive_int, default=MAX_WIDTH, help=f"Maximum width in pixels (default: {MAX_WIDTH})"
    )
    parser.add_argument(
        "--max-height",
        type=_positive_int,
        default=MAX_HEIGHT,
        help=f"Maximum height in pixels (default: {MAX_HEIGHT})",
    )
    parser.add_argument(
        "--repeat",
        type=_positive_int,
        default=REPEAT,
        help=f"Times each character is repeated horizontally (default: {REPEAT})",
    )
    parser.add_argument(
        "--fit", action="store_true", default=False, help="Also shrink the image to fit the current terminal"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log progress to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    max_width, max_height = args.max_width, args.max_height
    if args.fit:
        max_width, max_height = fit_bounds(max_width, max_height, args.repeat)
        logger.debug("Fitting to terminal: %dx%d", max_width, max_height)

    image_path = Path(args.image)
    try:
        output = image_to_ascii(
            image_path,
            BrightnessMapping(args.brightness_mapping),
            OutputColour(args.output_colour),
            max_width=max_width,
            max_height=max_height,
            invert=args.invert,
            repeat=args.repeat,
        )
    except FileNotFoundError:
        print(f"File not found: {image_path}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Could not read image: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(output)
    return 0
