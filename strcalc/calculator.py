from __future__ import annotations

import logging
import os
import threading

from .exceptions import ConfigError
from .exceptions import NegativesNotAllowed
from .parser import DelimiterParser


log: logging.Logger = logging.getLogger(__name__)


def _max_value_from_env() -> int:
    raw = os.environ.get("STRCALC_MAX_VALUE", "1000")
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"STRCALC_MAX_VALUE must be an integer, got {raw!r}") from None


MAX_VALUE = _max_value_from_env()


class StringCalculator:
    """
    Adds up the numbers found in a delimited string.

        >>> calc = StringCalculator()
        >>> calc.add("1,2,3")
        6
        >>> calc.add("4\\n5,6")
        15
        >>> calc.add("//;\\n7;8;9")
        24
        >>> calc.get_called_count()
        3

    Numbers greater than `max_value` are ignored, and any negative number in
    the input is an error. Every call to `add` is counted, including the ones
    which raise.
    """

    def __init__(self, max_value: int | None = None) -> None:
        if max_value is None:
            max_value = MAX_VALUE
        self.max_value = max_value
        self.parser = DelimiterParser()
        self._call_count = 0
        self._lock = threading.Lock()

    def __repr__(self):
        return f"<{type(self).__name__} max_value={self.max_value} calls={self.called_count}>"

    def add(self, text: str | None) -> int:
        with self._lock:
            self._call_count += 1
        if not text:
            return 0
        numbers, negatives = self.parser.parse(text)
        if negatives:
            log.info("rejecting input with negatives %s", negatives)
            raise NegativesNotAllowed(negatives)
        kept = [n for n in numbers if n <= self.max_value]
        if len(kept) < len(numbers):
            ignored = [n for n in numbers if n > self.max_value]
            log.debug("ignored numbers greater than %d: %s", self.max_value, ignored)
        return sum(kept)

    @property
    def called_count(self) -> int:
        with self._lock:
            return self._call_count

    def get_called_count(self) -> int:
        """Number of times `add` has been called on this calculator."""
        return self.called_count

    getCalledCount = get_called_count
