# START OF FILE: astrosolar/shared/logger.py

import logging
import sys

from astrosolar.shared.config import LOG_LEVEL

logger = logging.getLogger("astrosolar")
logger.setLevel(LOG_LEVEL)

handler = logging.StreamHandler(sys.stdout)
handler.setLevel(LOG_LEVEL)

formatter = logging.Formatter(
    '%(asctime)s - [%(levelname)s] - %(name)s - (%(filename)s).%(funcName)s(%(lineno)d) - %(message)s'
)
handler.setFormatter(formatter)

if not logger.handlers:
    logger.addHandler(handler)


def tail(value: str | None) -> str:
    """Last four characters of an identifier, safe to put in logs."""
    if not value:
        return "<unset>"
    return f"...{value[-4:]}"

# END OF FILE: astrosolar/shared/logger.py
