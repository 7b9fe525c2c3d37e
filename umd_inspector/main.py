"""Command-line entry point for the UMD dump inspector.

This module provides:
- Command-line argument parsing
- Configuration and logging setup
- The check and info commands
"""

import argparse
import json
import sys
from pathlib import Path

import structlog

from umd_inspector import __version__
from umd_inspector.models import AppConfig, MediaType, SubmissionInfo
from umd_inspector.services.config import ConfigurationService
from umd_inspector.services.errors import get_error_service
from umd_inspector.services.logging import setup_logging
from umd_inspector.services.submission import UmdImageCreatorOutput

log = structlog.stdlib.get_logger()

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


class ParsedArgs:
    """Type-safe container for parsed command-line arguments."""

    def __init__(
        self,
        command: str,
        base_path: str,
        config: Path | None,
        log_level: str | None,
        log_dir: Path | None,
        media_type: MediaType | None,
        no_checksums: bool,
    ) -> None:
        self.command: str = command
        self.base_path: str = base_path
        self.config: Path | None = config
        self.log_level: str | None = log_level
        self.log_dir: Path | None = log_dir
        self.media_type: MediaType | None = media_type
        self.no_checksums: bool = no_checksums


def _media_type_arg(value: str) -> MediaType:
    try:
        return MediaType.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="umd-inspector",
        description="Validate UmdImageCreator output and extract disc metadata",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  umd-inspector check dumps/game          Verify all output files exist
  umd-inspector info dumps/game           Print submission info as JSON
  umd-inspector info --no-checksums dumps/game
        """,
    )

    _ = parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    _ = parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: ~/.config/umd-inspector/config.json)",
    )
    _ = parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Set the logging level (default: from configuration)",
    )
    _ = parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Directory for log files (default: console only)",
    )
    _ = parser.add_argument(
        "--media-type",
        type=_media_type_arg,
        default=None,
        help="Media type of the dump (default: from configuration, usually umd)",
    )
    _ = parser.add_argument(
        "--no-checksums",
        action="store_true",
        help="Skip hashing the disc image",
    )
    _ = parser.add_argument("command", choices=["check", "info"], help="Command to run")
    _ = parser.add_argument("base_path", help="Base path UmdImageCreator was invoked with")
    return parser


def parse_arguments(argv: list[str] | None = None) -> ParsedArgs:
    """Parse command-line arguments."""
    ns = build_parser().parse_args(argv)
    return ParsedArgs(
        command=str(ns.command),
        base_path=str(ns.base_path),
        config=ns.config,
        log_level=ns.log_level,
        log_dir=ns.log_dir,
        media_type=ns.media_type,
        no_checksums=bool(ns.no_checksums),
    )


def run_check(output: UmdImageCreatorOutput, base_path: str) -> int:
    """Report missing output files; exit code 1 when any are missing."""
    def report(missing: str) -> None:
        print(f"The following files were missing: {missing}", file=sys.stderr)

    if output.check_all_output_files_exist(base_path, on_failure=report):
        print(f"All output files present for {base_path}")
        return EXIT_OK
    return EXIT_FAILURE


def run_info(output: UmdImageCreatorOutput, base_path: str, indent: int) -> int:
    """Print the submission info extracted from a dump as JSON."""
    info = SubmissionInfo()
    output.generate_submission_info(info, base_path)
    print(json.dumps(info.to_dict(), indent=indent or None, ensure_ascii=False))
    return EXIT_OK


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the application."""
    args = parse_arguments(argv)

    # Route config loading messages to stderr; reconfigured once the config is read
    _ = setup_logging(log_level=args.log_level or "INFO", log_dir=args.log_dir)

    config_service = ConfigurationService(config_path=args.config)
    config: AppConfig = config_service.load_config()

    _ = setup_logging(
        log_level=args.log_level or config.log_level,
        log_dir=args.log_dir or config.log_dir,
    )

    media_type = args.media_type or MediaType.parse(config.media_type)
    compute_checksums = config.compute_checksums and not args.no_checksums
    log.info(
        "Starting UMD dump inspector",
        version=__version__,
        command=args.command,
        base_path=args.base_path,
        media_type=media_type.value,
    )

    output = UmdImageCreatorOutput(media_type, compute_checksums=compute_checksums)

    try:
        if args.command == "check":
            exit_code = run_check(output, args.base_path)
        else:
            exit_code = run_info(output, args.base_path, config.json_indent)

    except KeyboardInterrupt:
        log.info("Interrupted by user")
        exit_code = EXIT_INTERRUPTED

    except Exception as e:
        error_service = get_error_service()
        error = error_service.handle_error(
            e,
            operation=args.command,
            component="cli",
            context={"path": args.base_path},
        )
        print(error_service.create_user_message(error), file=sys.stderr)
        exit_code = EXIT_FAILURE

    log.info("Inspector exiting", exit_code=exit_code)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
