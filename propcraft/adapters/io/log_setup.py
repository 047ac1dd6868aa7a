"""
Rich-backed logging setup for propcraft.

Library modules only create ``logging.getLogger(__name__)`` loggers; the
process that drives generation calls ``setup_logging`` once to route records
through a single RichHandler on the root logger.
"""

import logging
import threading

from rich.console import Console
from rich.logging import RichHandler

from ...config.models import LoggingConfig


class LoggerManager:
    """Installs and tracks the root RichHandler."""

    _console: Console | None = None
    _handler: RichHandler | None = None
    _setup_lock: threading.Lock = threading.Lock()

    @classmethod
    def setup_logging(
        cls, config: LoggingConfig | None = None, console: Console | None = None
    ) -> RichHandler:
        """Set up global logging configuration with thread safety.

        Calling it again only updates the root level; the handler is installed once.

        Args:
            config: Logging configuration; defaults are used when omitted
            console: Console to render to; defaults to stderr

        Returns:
            The RichHandler attached to the root logger
        """
        config = config or LoggingConfig()
        level = getattr(logging, config.level)

        with cls._setup_lock:
            root_logger = logging.getLogger()

            if cls._handler is not None and cls._handler in root_logger.handlers:
                root_logger.setLevel(level)
                return cls._handler

            # Remove any RichHandlers that aren't ours, keep other handlers
            for handler in list(root_logger.handlers):
                if isinstance(handler, RichHandler):
                    root_logger.removeHandler(handler)

            cls._console = console or Console(stderr=True)
            rich_handler = RichHandler(
                console=cls._console,
                show_time=config.show_time,
                show_path=False,
                markup=False,
                rich_tracebacks=config.rich_tracebacks,
            )
            rich_handler.setFormatter(logging.Formatter(fmt="%(message)s"))

            root_logger.addHandler(rich_handler)
            root_logger.setLevel(level)

            for module in config.suppress_modules:
                logging.getLogger(module).setLevel(logging.WARNING)

            cls._handler = rich_handler
            return rich_handler

    @classmethod
    def reset(cls) -> None:
        """Detach the installed handler from the root logger."""
        with cls._setup_lock:
            if cls._handler is not None:
                logging.getLogger().removeHandler(cls._handler)
            cls._handler = None
            cls._console = None


def setup_logging(
    config: LoggingConfig | None = None, console: Console | None = None
) -> RichHandler:
    """Set up global logging; see ``LoggerManager.setup_logging``."""
    return LoggerManager.setup_logging(config, console)
