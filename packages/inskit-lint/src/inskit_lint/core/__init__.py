"""Runtime context, logging and filesystem helpers shared by every command."""

from .context import RunContext
from .logging import log_event
from .serialize import dumps_json

__all__ = ["RunContext", "dumps_json", "log_event"]
