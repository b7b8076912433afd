"""Triangle mosaic generator - command-line entry point."""

import argparse
import logging
import math
import sys
from dataclasses import replace
from pathlib import Path

from .config_manager import ConfigManager
from .errors import (
    InvalidNumericArgumentError,
    MissingArgumentError,
    MosaicError,
)
from .image_processing import MosaicProcessor
from .models import (
    CONFIG_FILE,
    DEFAULT_N_VERTICAL,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_TRIANGLE_HEIGHT,
    MosaicConfig,
    RenderStyle,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trimosaic",
        description="Convert a PNG image into a low-poly SVG mosaic of triangles",
    )
    parser.add_argument("image", nargs="?", help="Input PNG path")
    parser.add_argument(
        "n_vertical",
        nargs="?",
        help=f"Number of triangle rows (default: {DEFAULT_N_VERTICAL})",
    )
    parser.add_argument(
        "triangle_height",
        nargs="?",
        help=f"Height of one row in SVG units (default: {DEFAULT_TRIANGLE_HEIGHT})",
    )
    parser.add_argument(
        "output",
        nargs="?",
        help=f"Output SVG path (default: {DEFAULT_OUTPUT_PATH})",
    )
    parser.add_argument(
        "--outline",
        action="store_true",
        help="Draw triangle outlines instead of sampled fills",
    )
    parser.add_argument(
        "--stroke-width",
        help="Stroke width in SVG units (default: from config, 0.001)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"JSON file with default settings (default: {CONFIG_FILE})",
    )
    parser.add_argument(
        "--save-config",
        action="store_true",
        help="Store the effective settings in the config file",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def _positive_int(name: str, text: str) -> int:
    try:
        value = int(text)
    except ValueError as e:
        raise InvalidNumericArgumentError(
            f"{name} must be an integer, got {text!r}"
        ) from e
    if value <= 0:
        raise InvalidNumericArgumentError(f"{name} must be positive, got {value}")
    return value


def _positive_float(name: str, text: str) -> float:
    try:
        value = float(text)
    except ValueError as e:
        raise InvalidNumericArgumentError(
            f"{name} must be a number, got {text!r}"
        ) from e
    if not math.isfinite(value) or value <= 0:
        raise InvalidNumericArgumentError(f"{name} must be positive, got {text}")
    return value


def parse_args(argv: "list[str] | None" = None) -> argparse.Namespace:
    """Parse and validate command-line arguments.

    Numeric arguments are converted here, before any file is touched.

    Raises:
        MissingArgumentError: If no image path is given
        InvalidNumericArgumentError: If a count or height is malformed
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.image is None:
        raise MissingArgumentError("missing image path")

    if args.n_vertical is not None:
        args.n_vertical = _positive_int("number of vertical triangles", args.n_vertical)
    if args.triangle_height is not None:
        args.triangle_height = _positive_float("triangle height", args.triangle_height)
    if args.stroke_width is not None:
        args.stroke_width = _positive_float("stroke width", args.stroke_width)

    return args


def build_config(args: argparse.Namespace, base: MosaicConfig) -> MosaicConfig:
    """Overlay command-line values on stored defaults."""
    overrides = {}
    if args.n_vertical is not None:
        overrides["n_vertical"] = args.n_vertical
    if args.triangle_height is not None:
        overrides["triangle_height"] = args.triangle_height
    if args.output is not None:
        overrides["output_path"] = args.output
    if args.stroke_width is not None:
        overrides["stroke_width"] = args.stroke_width
    if args.outline:
        overrides["render_style"] = RenderStyle.OUTLINE
    return replace(base, **overrides)


def _report(error: MosaicError) -> int:
    print(f"error: {error}", file=sys.stderr)
    print(build_parser().format_usage(), end="", file=sys.stderr)
    return 1


def main(argv: "list[str] | None" = None) -> int:
    """Run the mosaic generator and return the process exit code."""
    try:
        args = parse_args(argv)
    except MosaicError as e:
        return _report(e)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config_manager = ConfigManager(args.config or CONFIG_FILE)
    config = build_config(args, config_manager.load())

    if args.save_config:
        ok, error = config_manager.save(config)
        if not ok:
            logger.warning("Could not save config file: %s", error)

    try:
        result = MosaicProcessor(config).process(args.image)
    except MosaicError as e:
        return _report(e)

    print(
        f"Wrote {result.triangle_count} triangles "
        f"({result.params.n_vertical} x {result.params.n_horizontal + 1}) "
        f"to {result.output_path}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
