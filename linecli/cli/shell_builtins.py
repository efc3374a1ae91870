"""Built-in commands for the interactive loop."""

from typing import TYPE_CHECKING

from linecli.utils.log_manager import get_logger

if TYPE_CHECKING:
    from .manager import CliManager

logger = get_logger(__name__)

# The command used to print all available commands.
HELP = "help"
# The command used to stop the manager.
EXIT = "exit"


class ShellBuiltins:
    """Handler for the loop's own ``help`` and ``exit`` commands.

    Built-ins are matched case-insensitively, unlike handler commands.
    """

    def __init__(self, manager: "CliManager"):
        """Initialise shell builtins.

        Args:
            manager: CliManager whose registry and output stream are used
        """
        self.manager = manager

    def is_builtin(self, command: str) -> bool:
        """Check if command is a built-in.

        Args:
            command: Command name

        Returns:
            True if command is a built-in
        """
        return command.lower() in {HELP, EXIT}

    def handle_builtin(self, command: str) -> bool:
        """Handle a built-in command.

        Args:
            command: Command name

        Returns:
            False if the loop should stop, True otherwise
        """
        command = command.lower()

        if command == EXIT:
            logger.debug("Exit requested")
            return False

        if command == HELP:
            self._print_help()

        return True

    def _print_help(self) -> None:
        """Print every registered command, sorted, one per line."""
        writer = self.manager.writer
        for cmd in self.manager.get_available_commands():
            writer.write(f"{cmd}\n")
