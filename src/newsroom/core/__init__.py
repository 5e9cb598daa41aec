"""Core utilities: constants, logging, exceptions."""

from newsroom.core.exceptions import NewsroomError
from newsroom.core.logging import get_logger, setup_logging

__all__ = [
    "NewsroomError",
    "get_logger",
    "setup_logging",
]
