"""Simple logging abstraction for recipebox."""

import sys
from contextvars import ContextVar
from typing import Optional

from loguru import logger as _logger

from .profile import Profile

current_command: ContextVar[Optional[str]] = ContextVar('current_command', default=None)


def configure_logging(profile: Optional[Profile] = None) -> None:
    """Install the stderr and file sinks for the given profile.

    Safe to call more than once; each call replaces the previous sinks so a
    new profile (e.g. in tests) gets its own log file.
    """
    profile = profile or Profile.current()
    _logger.remove()
    _logger.enable("recipebox")

    # Stderr handler - ERROR and above unless overridden
    _logger.add(
        sys.stderr,
        level=profile.log_level,
        format="<red>{time:HH:mm:ss}</red> | <level>{level: <8}</level> | <cyan>{extra[component]}</cyan> | <level>{message}</level>",
        colorize=True,
    )

    # File handler - all logs (DEBUG and above)
    _logger.add(
        profile.log_file,
        level="DEBUG",
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[component]} | {message}",
        rotation="10 MB",
        retention="30 days",
        compression="zip",
    )


def get_logger(component: Optional[str] = None):
    """Get a logger instance with optional component context."""
    if component:
        return _logger.bind(component=component)
    return _logger


def set_command(name: Optional[str]) -> None:
    """Tag records without an explicit component with the running command."""
    current_command.set(name)


def _add_context(record):
    """Add context variables to log record."""
    record["extra"].setdefault("component", current_command.get() or "recipebox")


_logger.configure(patcher=_add_context)
# Quiet when used as a library; configure_logging turns output on.
_logger.disable("recipebox")

__all__ = [
    "configure_logging",
    "get_logger",
    "set_command",
]
