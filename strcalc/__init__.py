from __future__ import annotations

import threading

from . import calculator
from . import exceptions
from . import parser
from .calculator import StringCalculator
from .exceptions import NegativesNotAllowed
from .exceptions import StringCalculatorError
from .parser import DelimiterParser
from .parser import ParseResult
from .parser import parse
from .version import __version__

__all__ = [
    "DelimiterParser",
    "NegativesNotAllowed",
    "ParseResult",
    "StringCalculator",
    "StringCalculatorError",
    "__version__",
    "add",
    "calculator",
    "exceptions",
    "get_called_count",
    "parse",
    "parser",
]


_default = None
_default_lock = threading.Lock()


def _get_default() -> StringCalculator:
    # shared calculator behind the module-level add / get_called_count
    global _default
    with _default_lock:
        if _default is None:
            _default = StringCalculator()
        return _default


def add(text: str | None) -> int:
    return _get_default().add(text)


def get_called_count() -> int:
    return _get_default().get_called_count()
