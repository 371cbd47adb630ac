import logging
from typing import Any, Optional, Protocol

import typer
from rich.console import Console

from reg_notify_github import config


class Spinner(Protocol):
    def start(self) -> None:
        ...

    def stop(self) -> None:
        ...


class Colors:
    """ANSI helpers for highlighting values inside log messages."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def _style(self, text: Any, fg: str) -> str:
        if not self.enabled:
            return str(text)
        return typer.style(str(text), fg=fg)

    def red(self, text: Any) -> str:
        return self._style(text, typer.colors.RED)

    def green(self, text: Any) -> str:
        return self._style(text, typer.colors.GREEN)


class PluginLogger:
    """
    Logger handed to the notifier by its host.

    ``verbose`` is emitted at DEBUG level. The spinner is a rich status line
    on stderr, so it never mixes with piped output.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        console: Optional[Console] = None,
        colors: bool = True,
    ):
        self.logger = logger or logging.getLogger("reg_notify_github")
        self.console = console or Console(stderr=True)
        self.colors = Colors(enabled=colors)

    def info(self, msg: str, *args: Any) -> None:
        self.logger.info(msg, *args)

    def verbose(self, msg: str, *args: Any) -> None:
        self.logger.debug(msg, *args)

    def error(self, msg: str, *args: Any) -> None:
        self.logger.error(msg, *args)

    def get_spinner(self, text: str) -> Spinner:
        return self.console.status(text)


def setup_logging(level=None) -> logging.Logger:
    logging.basicConfig(
        format="%(asctime)s %(name)s %(levelname)s - %(message)s", level=logging.INFO
    )
    logger = logging.getLogger("reg_notify_github")
    logger.setLevel(level if level is not None else config.OVERRIDE_LOGGING)
    return logger
