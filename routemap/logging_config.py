import logging
from rich.logging import RichHandler

from routemap.config import LOG_LEVEL


def configure(level: str = LOG_LEVEL) -> None:
    """Route all ``routemap.*`` loggers through a rich console handler."""
    logging.basicConfig(
        level=level.upper(),
        format="%(name)s: %(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_time=False, show_path=False)],
    )
    logging.getLogger("routemap").setLevel(level.upper())
