"""Demonstration handler with a start/stop switch and a calculator."""

import re
import threading
from typing import List, Optional, Set, TextIO

from linecli.utils.errors import ArgumentParseFailure, ExecutionError

from .base import CliHandler

# Operands and results are 32-bit signed integers.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_int(value: str) -> int:
    if not value:
        raise ArgumentParseFailure("cannot parse integer from empty string")
    if not _INT_PATTERN.fullmatch(value):
        raise ArgumentParseFailure("invalid digit found in string")

    number = int(value)
    if number > INT_MAX:
        raise ArgumentParseFailure("number too large to fit in target type")
    if number < INT_MIN:
        raise ArgumentParseFailure("number too small to fit in target type")
    return number


def _parse_operator(value: str) -> str:
    if not value:
        raise ArgumentParseFailure("cannot parse char from empty string")
    if len(value) > 1:
        raise ArgumentParseFailure("too many characters in string")
    return value


def _divide(num1: int, num2: int) -> int:
    """Integer division truncating toward zero."""
    if num2 == 0:
        raise ExecutionError("division by zero")
    quotient = abs(num1) // abs(num2)
    return quotient if (num1 < 0) == (num2 < 0) else -quotient


class ServiceHandler(CliHandler):
    """Handler for the ``start``, ``stop``, ``is-running`` and ``calculate`` commands."""

    START_COMMAND = "start"
    CALCULATE_COMMAND = "calculate"
    STOP_COMMAND = "stop"
    IS_RUNNING_COMMAND = "is-running"
    COMMANDS = (START_COMMAND, CALCULATE_COMMAND, STOP_COMMAND, IS_RUNNING_COMMAND)

    def __init__(self):
        super().__init__()
        self._lock = threading.Lock()
        self._on: Optional[bool] = None

    @property
    def on(self) -> Optional[bool]:
        with self._lock:
            return self._on

    def _set_on(self, value: bool) -> None:
        with self._lock:
            self._on = value

    def get_commands(self) -> Set[str]:
        return set(self.COMMANDS)

    def handle_command(self, command: str, args: List[str], writer: TextIO) -> None:
        if command == self.START_COMMAND:
            self._set_on(True)
            print("started", file=writer)
        elif command == self.STOP_COMMAND:
            self._set_on(False)
            print("stopped", file=writer)
        elif command == self.IS_RUNNING_COMMAND:
            print(self.on, file=writer)
        elif command == self.CALCULATE_COMMAND:
            self._calculate(args, writer)
        else:
            raise ExecutionError(f"Unknown command: {command}")

    def _calculate(self, args: List[str], writer: TextIO) -> None:
        """Evaluate ``<name> <int> <operator> <int>`` and print ``<name> is <result>``."""
        self.validate_arg_count(args, 4)

        if not self.on:
            raise ExecutionError(f"{self.__class__.__name__} not started.")

        result_name = args[0]
        num1 = _parse_int(args[1])
        operator = _parse_operator(args[2])
        num2 = _parse_int(args[3])

        if operator == "+":
            result = num1 + num2
        elif operator == "-":
            result = num1 - num2
        elif operator == "/":
            result = _divide(num1, num2)
        elif operator in ("*", "x"):
            result = num1 * num2
        else:
            raise ArgumentParseFailure(f"{operator} is not a valid operator.")

        if not INT_MIN <= result <= INT_MAX:
            raise ExecutionError("arithmetic overflow")

        self.logger.debug(f"calculate {num1} {operator} {num2} = {result}")
        print(f"{result_name} is {result}", file=writer)
