"""
Tokenizer for calculator input strings.

An input may begin with a declaration line which picks the delimiters used
for the rest of the text:

    //;\n1;2;3            a single delimiter, taken verbatim
    //[***][%]\n1***2%3   one or more bracketed delimiters, any length

Without a declaration line, commas and newlines both split tokens.
"""

from __future__ import annotations

import logging
import re
from typing import NamedTuple


__all__ = ["DEFAULT_DELIMITERS", "DelimiterParser", "ParseResult", "parse", "parse_int"]


log = logging.getLogger(__name__)


DEFAULT_DELIMITERS = (",", "\n")
_declaration_pat = re.compile(r"^//(.+)\n")
_bracketed_pat = re.compile(r"\[(.+?)\]")
_leading_int_pat = re.compile(r"\s*([+-]?[0-9]+)")


class ParseResult(NamedTuple):
    numbers: tuple[int, ...]
    negatives: tuple[int, ...]


def parse_int(token: str) -> int | None:
    """
    Integer value at the start of the token, or None if there isn't one.
    Leading whitespace and a sign are accepted, trailing junk is ignored:
    "12abc" -> 12, " -3" -> -3, "abc" -> None, "" -> None.
    """
    match = _leading_int_pat.match(token)
    if match is None:
        return None
    return int(match.group(1))


class DelimiterParser:
    def _split_declaration(self, text: str) -> tuple[tuple[str, ...], str]:
        # returns the literal delimiters and the body which remains to be tokenized
        match = _declaration_pat.match(text)
        if match is None:
            return DEFAULT_DELIMITERS, text
        spec = match.group(1)
        delimiters = _bracketed_pat.findall(spec)
        if not delimiters:
            # no brackets at all, the whole declaration is one delimiter
            delimiters = [spec]
        return tuple(delimiters), text[match.end():]

    def delimiters(self, text: str) -> tuple[str, ...]:
        """The literal (unescaped) delimiters which apply to this input text."""
        delimiters, _body = self._split_declaration(text)
        return delimiters

    def parse(self, text: str) -> ParseResult:
        """
        Split the input on its delimiters and convert the tokens to integers.
        Tokens without a leading integer are dropped, not counted as zero.
        The negatives are also collected separately, in order of appearance.
        """
        delimiters, body = self._split_declaration(text)
        log.debug("splitting on delimiters %r", delimiters)
        pattern = "|".join(re.escape(d) for d in delimiters)
        numbers = []
        for token in re.split(pattern, body):
            n = parse_int(token)
            if n is None:
                if token:
                    log.debug("dropped non-numeric token %r", token)
                continue
            numbers.append(n)
        negatives = [n for n in numbers if n < 0]
        return ParseResult(numbers=tuple(numbers), negatives=tuple(negatives))


_parser = DelimiterParser()


def parse(text: str) -> ParseResult:
    return _parser.parse(text)
