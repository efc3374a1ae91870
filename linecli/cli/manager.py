"""Manager responsible for command line input and output."""

import sys
from typing import Dict, List, Optional, TextIO

from linecli.utils.errors import CliError, ErrorHandler, format_error_message
from linecli.utils.log_manager import get_logger, log_call, log_event

from .commands.base import CliHandler
from .parser import parse_input
from .shell_builtins import ShellBuiltins

logger = get_logger(__name__)

# The string used to represent the manager is waiting for input.
PROMPT = "> "
# The message displayed when an invalid command is received by the manager.
INVALID_COMMAND = "Invalid command"


class CliManager:
    """Blocking read-eval-print loop routing commands to registered handlers.

    The manager owns its reader and writer for the duration of ``start()``.
    Handler errors are printed and never stop the loop; an ``OSError`` from
    the underlying streams propagates to the caller.
    """

    def __init__(
        self,
        reader: Optional[TextIO] = None,
        writer: Optional[TextIO] = None,
        prompt: str = PROMPT,
    ) -> None:
        """Initialise manager.

        Args:
            reader: Stream to read command lines from (default: stdin)
            writer: Stream to write prompts and output to (default: stdout)
            prompt: String written before every read
        """
        self.reader = reader if reader is not None else sys.stdin
        self.writer = writer if writer is not None else sys.stdout
        self.prompt = prompt
        self.handlers: Dict[str, CliHandler] = {}
        self.builtins = ShellBuiltins(self)

    @log_call
    def add_handler(self, handler: CliHandler) -> None:
        """Add the given handler.

        All commands returned by ``handler.get_commands()`` are forwarded to
        this handler from now on, replacing any earlier registration.
        """
        for cmd in handler.get_commands():
            previous = self.handlers.get(cmd)
            if previous is not None and previous is not handler:
                logger.debug(
                    f"Command '{cmd}' moved from {previous.__class__.__name__} "
                    f"to {handler.__class__.__name__}"
                )
            self.handlers[cmd] = handler

    def get_available_commands(self) -> List[str]:
        """Get registered command names in lexicographic order."""
        return sorted(self.handlers)

    def start(self) -> None:
        """Run the loop until ``exit`` is entered or input ends.

        This is a blocking operation.

        Raises:
            OSError: If reading from or writing to the streams fails
        """
        logger.info(f"Command loop started with {len(self.handlers)} command(s)")

        while True:
            self.writer.write(self.prompt)
            self.writer.flush()

            line = self.reader.readline()
            if not line:
                logger.info("End of input reached, stopping command loop")
                break

            line = line.strip()
            if not line:
                continue

            if not self._dispatch_command(line):
                break

        logger.info("Command loop stopped")

    def _dispatch_command(self, line: str) -> bool:
        """Tokenize and dispatch one non-empty line.

        Returns:
            False if the loop should stop, True otherwise
        """
        command, args = parse_input(line)
        if not command:
            self._write_line(INVALID_COMMAND)
            return True

        if self.builtins.is_builtin(command):
            return self.builtins.handle_builtin(command)

        handler = self.handlers.get(command)
        if handler is None:
            logger.debug(f"Unknown command: {command}")
            self._write_line(INVALID_COMMAND)
            return True

        log_event(
            "command_dispatched",
            f"Dispatching '{command}' to {handler.__class__.__name__}",
            command=command,
            argument_count=len(args),
        )

        output = _OutputStream(self.writer)
        try:
            handler.handle_command(command, args, output)

        except CliError as e:
            output.raise_if_failed()
            logger.debug(f"Command '{command}' failed: {e}")
            self._write_line(str(e))

        except Exception as e:
            output.raise_if_failed()
            ErrorHandler.handle(e, context=f"Command '{command}'")
            self._write_line(format_error_message(e))

        return True

    def _write_line(self, text: str) -> None:
        self.writer.write(f"{text}\n")


class _OutputStream:
    """Writer handed to handlers that remembers failures of the real stream.

    A handler may let an ``OSError`` from its own work escape, which is a
    handler error. Failures of the manager's writer are transport errors
    and must stop the loop, whatever the handler turned them into.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.error: Optional[OSError] = None

    def write(self, text: str) -> int:
        try:
            return self.stream.write(text)
        except OSError as e:
            self.error = e
            raise

    def flush(self) -> None:
        try:
            self.stream.flush()
        except OSError as e:
            self.error = e
            raise

    def raise_if_failed(self) -> None:
        if self.error is not None:
            raise self.error

    def __getattr__(self, name):
        return getattr(self.stream, name)
