import logging

from rich.logging import RichHandler

FORMAT = "%(message)s"

log = logging.getLogger("percolation_sim")


def setup_logging(verbose: bool = False) -> None:
    """Route package log records through a rich console handler."""
    logging.basicConfig(level="WARNING", format=FORMAT, datefmt="[%X]", handlers=[RichHandler()])
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)
