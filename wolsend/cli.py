from __future__ import annotations

import logging
import sys
from typing import List, Optional

from .config import load_settings
from .wol import SendError, wake

logger = logging.getLogger("wolsend")


def setup_logging(verbose: bool = False) -> None:
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(console)


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings(argv)
    setup_logging(settings.verbose)
    try:
        wake(settings.mac, settings.destination)
    except SendError as e:
        logger.debug("WoL %s stage failed", e.stage, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Wake up packet sent to {settings.mac}")
    return 0
