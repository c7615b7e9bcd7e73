"""
Shared logging configuration for the harness.
"""

import logging

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
    handlers=[logging.StreamHandler()],
)

logger = logging.getLogger("sfntcheck")


def set_verbose(verbose: bool) -> None:
    """Switch the harness logger between INFO and DEBUG."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
