"""Input/output adapters."""

from .log_setup import LoggerManager, setup_logging

__all__ = ["LoggerManager", "setup_logging"]
