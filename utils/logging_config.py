import logging
from typing import Optional

DEFAULT_FORMAT = '%(levelname)s:%(name)s:%(message)s'


def configure_logging(verbose: bool = False, fmt: Optional[str] = None) -> None:
    """Install a single stderr handler on the root logger.

    ``verbose`` switches to DEBUG, which also reports every skipped line
    and every dropped edge.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
        root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
