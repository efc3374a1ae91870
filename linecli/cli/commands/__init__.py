"""Command handlers for the line dispatcher."""

from .base import CliHandler
from .service import ServiceHandler

__all__ = ["CliHandler", "ServiceHandler"]
