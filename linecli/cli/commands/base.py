"""Base class for command handlers."""

from abc import ABC, abstractmethod
from typing import List, Optional, Set, TextIO

from linecli.utils.errors import InvalidNumberOfArguments
from linecli.utils.log_manager import get_logger

logger = get_logger(__name__)


class CliHandler(ABC):
    """Base class for all command handlers.

    A handler owns a fixed set of command names. The manager routes every
    line whose command is one of those names to ``handle_command``. One
    handler instance may be registered under several names.
    """

    def __init__(self):
        self.logger = logger

    ## Abstract Methods

    @abstractmethod
    def get_commands(self) -> Set[str]:
        """Get the commands this handler is responsible for.

        The returned set must not change over the lifetime of the handler.
        """

    @abstractmethod
    def handle_command(self, command: str, args: List[str], writer: TextIO) -> None:
        """Parse the given arguments and execute the given command.

        Output is written to ``writer``. Returning normally means success.

        Raises:
            CliError: If the command could not be executed
        """

    ## Validation Methods

    def validate_arg_count(
        self, args: List[str], minimum: int, maximum: Optional[int] = None
    ) -> None:
        """Validate the number of arguments given to a command.

        With no maximum the count must equal ``minimum`` exactly.

        Raises:
            InvalidNumberOfArguments: If the count is out of range
        """
        given = len(args)
        upper = minimum if maximum is None else maximum
        if given < minimum or given > upper:
            self.logger.debug(
                f"{self.__class__.__name__}: expected {minimum}-{upper} arguments, got {given}"
            )
            raise InvalidNumberOfArguments(min=minimum, max=maximum, given=given)
