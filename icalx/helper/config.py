from __future__ import annotations

import logging
from io import StringIO

from ..exceptions import InvalidEncodingError

# ------------------------------------ Logging ---------------------------------
logger = logging.getLogger(__name__)
if not logging.getLogger().handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(filename)s:%(lineno)d %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
logger.setLevel(logging.INFO)  # modify log levels here


def get_buffer(x: str | bytes | StringIO = None) -> StringIO:
    """Wrap calendar text in a stream; streams are returned unchanged."""
    if isinstance(x, bytes):
        try:
            x = x.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise InvalidEncodingError(e.reason) from e
    return StringIO(x) if isinstance(x, str) or x is None else x
