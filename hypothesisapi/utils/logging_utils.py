import logging
from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.traceback import Traceback

_LOGGER = logging.getLogger(__name__)


class ConditionalRichHandler(RichHandler):
    """
    Class that uses 'show_level=True' only if the message level is WARNING or higher.
    """

    def handle(self, record):
        self.show_level = record.levelno >= logging.WARNING
        return super().handle(record)

    def render(self, *, record: logging.LogRecord,
               traceback: Traceback | None,
               message_renderable: ConsoleRenderable) -> ConsoleRenderable:
        self._log_render.show_level = record.levelno >= logging.WARNING
        try:
            return super().render(record=record, traceback=traceback, message_renderable=message_renderable)
        finally:
            self._log_render.show_level = False


def load_cmdline_logging_config(level: int = logging.INFO) -> None:
    """Send the package logs to the terminal through :class:`ConditionalRichHandler`."""
    handler = ConditionalRichHandler(show_time=False, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter('%(message)s'))
    package_logger = logging.getLogger('hypothesisapi')
    package_logger.handlers = [handler]
    package_logger.setLevel(level)
    package_logger.propagate = False
    _LOGGER.debug("Command line logging configured.")
