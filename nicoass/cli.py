"""Command line interface.

Examples:
  # Write live.ass next to the archive
  nicoass live.xml

  # Custom output and rendering overrides
  nicoass live.xml -o subtitles/live.ass --config render.yaml
"""

import argparse
import sys
from pathlib import Path

from nicoass import __version__
from nicoass.core.config import get_config
from nicoass.core.config_loader import load_render_config
from nicoass.core.exceptions import NicoAssError
from nicoass.core.logging import get_logger, setup_logging
from nicoass.i18n import fl
from nicoass.services.converter.pipeline import DanmakuConverter
from nicoass.services.loader import load_comments

logger = get_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with localized help."""
    parser = argparse.ArgumentParser(
        prog="nicoass",
        description=fl("cli-description"),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples:", 1)[1] if __doc__ else None,
    )
    parser.add_argument("input", type=Path, help=fl("cli-input-help"))
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help=fl("cli-output-help"),
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help=fl("cli-config-help"),
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help=fl("cli-log-level-help"),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(input_path: Path, output_path: Path | None = None, config_path: Path | None = None) -> Path:
    """Convert one comment archive to an ASS file.

    Args:
        input_path: Comment archive (XML)
        output_path: Destination (defaults to `input_path` with an .ass suffix)
        config_path: Rendering configuration YAML

    Returns:
        Path of the written file

    Raises:
        NicoAssError: If loading, configuration or conversion fails
    """
    output_path = output_path or input_path.with_suffix(".ass")
    render_config = load_render_config(config_path)

    comments = load_comments(input_path)
    document = DanmakuConverter(render_config).convert(comments)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(document, encoding="utf-8")
    logger.info(fl("cli-converted", count=len(comments), path=str(output_path)))
    return output_path


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Args:
        argv: Arguments (defaults to sys.argv)

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    settings = get_config()
    config_path = args.config
    if config_path is None and settings.render_config_path:
        config_path = Path(settings.render_config_path)

    try:
        run(args.input, args.output, config_path)
    except NicoAssError as e:
        logger.error(fl("cli-failed"), **e.to_dict())
        return 1
    except OSError as e:
        logger.error(fl("cli-failed"), error=str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
