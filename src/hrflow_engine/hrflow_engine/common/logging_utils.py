from __future__ import annotations

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Basic logging setup for applications embedding the engine.

    Library modules only create named loggers; handlers are installed here.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("hrflow_engine").setLevel(level)
