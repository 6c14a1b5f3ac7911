"""
Application configuration.

All tunables live in a single immutable AppConfig that is created once at
start-up and handed to the components that need it.
"""
import argparse
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

RGBA = Tuple[int, int, int, int]


@dataclass(frozen=True)
class AppConfig:
    """Settings shared by rendering, drawing and export."""

    # Rendering
    render_scale: float = 1.5
    antialias_level: int = 8
    show_mupdf_errors: bool = False

    # Files
    default_document: str = "assets/sample.pdf"
    output_filename: str = "edited-sample.pdf"

    # Annotation appearance
    highlight_color: RGBA = (255, 255, 0, 128)
    pen_color: RGBA = (0, 0, 0, 255)
    pen_width: float = 1.0
    text_color: RGBA = (0, 0, 255, 255)
    text_font_family: str = "Arial"
    text_font_size: int = 16

    # UI
    dark_mode: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "AppConfig":
        """
        Build a configuration from parsed command-line arguments.

        Args:
            args: Namespace returned by build_arg_parser().parse_args()

        Returns:
            Configuration with the given overrides applied
        """
        config = cls()
        overrides = {}
        if args.scale is not None:
            overrides["render_scale"] = args.scale
        if args.output_name:
            overrides["output_filename"] = args.output_name
        if args.log_level:
            overrides["log_level"] = args.log_level.upper()
        if args.dark:
            overrides["dark_mode"] = True
        return replace(config, **overrides) if overrides else config


def _positive_float(value: str) -> float:
    scale = float(value)
    if scale <= 0:
        raise argparse.ArgumentTypeError("scale must be greater than zero")
    return scale


def build_arg_parser() -> argparse.ArgumentParser:
    """Create the command-line parser for the application."""
    parser = argparse.ArgumentParser(
        prog="inkmark",
        description="Annotate a PDF page and export a flattened copy.",
    )
    parser.add_argument("file", nargs="?", help="PDF file to open")
    parser.add_argument(
        "--scale", type=_positive_float, default=None, help="render scale (default 1.5)"
    )
    parser.add_argument(
        "--output-name", default=None, help="default name of the exported file"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "debug", "info", "warning", "error"],
        help="logging verbosity",
    )
    parser.add_argument("--dark", action="store_true", help="use the dark theme")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> Tuple[AppConfig, Optional[str]]:
    """
    Parse command-line arguments.

    Returns:
        Tuple of (configuration, file path or None)
    """
    args = build_arg_parser().parse_args(argv)
    return AppConfig.from_args(args), args.file
