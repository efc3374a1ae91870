"""Process entry point for linecli."""

import argparse
import sys
from typing import List, Optional

from linecli import __version__
from linecli.utils.config_manager import ConfigManager
from linecli.utils.console import print_error, print_warning
from linecli.utils.errors import LineCliError
from linecli.utils.log_manager import get_logger, init_logging

from .commands.service import ServiceHandler
from .manager import CliManager

logger = get_logger(__name__)


def setup_argument_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the linecli command."""

    parser = argparse.ArgumentParser(
        prog="linecli",
        description="Interactive line-oriented command dispatcher",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to the JSON configuration file (default: ~/.linecli/config.json)"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="File logging level (overrides the configuration)"
    )
    parser.add_argument(
        "--prompt",
        default=None,
        help="Prompt written before every line (overrides the configuration)"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    return parser


def build_manager(config_manager: ConfigManager, prompt: Optional[str] = None) -> CliManager:
    """Create a manager over stdin/stdout with the default handlers registered."""

    manager = CliManager(prompt=prompt if prompt is not None else config_manager.config.shell.prompt)
    manager.add_handler(ServiceHandler())
    return manager


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, >0 for errors)
    """
    args = setup_argument_parser().parse_args(argv)

    try:
        config_manager = ConfigManager(args.config)
        logging_config = config_manager.config.logging
        init_logging(
            args.log_level or logging_config.log_level,
            console_level=logging_config.console_level,
            max_file_size=logging_config.max_file_size,
            backup_count=logging_config.backup_count,
            force=True,
        )
    except (LineCliError, ValueError) as e:
        print_error(f"Configuration error: {e}")
        return 1

    try:
        manager = build_manager(config_manager, args.prompt)
        manager.start()
        return 0

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        print_warning("\nInterrupted by user")
        return 130  # Standard SIGINT exit code

    except OSError as e:
        logger.error(f"Terminal I/O failed: {e}", exc_info=True)
        print_error(f"Fatal error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
