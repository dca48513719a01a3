"""Read whitespace-separated numbers from a text file."""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def read_values(path):
    """Return the numbers at the start of the file at ``path``.

    Reading stops at the first text that is not a number; a number directly
    followed by other characters is kept before stopping. A count that is not
    a multiple of three is logged as an error.
    """
    text = Path(path).read_text()
    values = []
    for token in text.split():
        match = _NUMBER.match(token)
        if match is None:
            break
        values.append(float(match.group()))
        if match.end() != len(token):
            break
    if len(values) % 3 != 0:
        logger.error("num error: %d values is not a multiple of three", len(values))
    return values