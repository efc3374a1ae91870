"""Line-oriented command dispatcher."""

from .commands.base import CliHandler
from .manager import CliManager
from .parser import parse_input

__all__ = ["CliHandler", "CliManager", "parse_input"]
