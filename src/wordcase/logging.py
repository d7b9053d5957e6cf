"""Console output for the conversion loggers.

Every wordcase module logs through a child of the ``wordcase`` logger and
never configures handlers on import. `enable_console_logging` attaches a Rich
handler to that package logger only, so a host application can watch the
conversions without touching the root logger or other libraries' output.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from wordcase import config

# pylint: disable=too-few-public-methods

PACKAGE_LOGGER = "wordcase"


class ModuleTagFilter(logging.Filter):
    """Tag records with the wordcase submodule that emitted them.

    Sets `record.module_tag` to e.g. "[convert]" for the ``wordcase.convert``
    logger, or to an empty string for records logged on ``wordcase`` itself.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        _, _, submodule = record.name.partition(".")
        record.module_tag = f"[{submodule}]" if submodule else ""
        return True


def enable_console_logging(
    level: int | None = None, color: bool = True, console: Console | None = None
) -> RichHandler:
    """Show wordcase log records on the console.

    Attaches a RichHandler to the ``wordcase`` logger and sets that logger's
    level. Any handler attached by an earlier call is replaced, so calling
    this repeatedly never duplicates output.

    Args:
        level: Minimum level to show. Defaults to the level named by
            `WORDCASE_LOG_LEVEL` (WARNING if unset). Use `logging.DEBUG` to
            see every conversion.
        color: Enable color output when True.
        console: Rich console to write to. Defaults to a new stderr console;
            override in tests to capture output.

    Returns:
        RichHandler: The attached handler.

    Raises:
        InvalidLogLevelError: If `level` is None and `WORDCASE_LOG_LEVEL`
            is not a valid level name.
    """
    if level is None:
        level = config.get_log_level()
    if console is None:
        console = Console(color_system="auto" if color else None, stderr=True)

    disable_console_logging()

    handler = RichHandler(
        level=level,
        console=console,
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(module_tag)s %(message)s"))
    handler.addFilter(ModuleTagFilter())

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return handler


def disable_console_logging() -> None:
    """Remove handlers added by `enable_console_logging` and reset the level."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(logging.NOTSET)
