import logging
import sys
from rich.console import Console
from rich.highlighter import RegexHighlighter
from rich.logging import RichHandler
from rich.theme import Theme


class RemoteDataHighlighter(RegexHighlighter):
    """Bold back-ticked text, colour variant names by state."""
    base_style = "remotedata."
    highlights = [
        r"`(?P<code>[^`]*)`",
        r"\b(?P<success>Success)\b",
        r"\b(?P<failure>Failure)\b",
        r"\b(?P<pending>NotAsked|Loading)\b",
    ]


THEME = Theme({
    "remotedata.code": "bold",
    "remotedata.success": "green",
    "remotedata.failure": "bold red",
    "remotedata.pending": "yellow",
})


def logger():
    return logging.getLogger("remotedata")


def configure_logger(debug: bool, rich: bool = True):
    level = logging.DEBUG if debug else logging.INFO
    if rich:
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True, theme=THEME),
            show_path=debug,
            highlighter=RemoteDataHighlighter())
        logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=[handler])
    else:
        logging.basicConfig(level=level, handlers=[logging.StreamHandler(sys.stderr)])
