"""Reading and writing JSON documents in the catalogue's own dialect.

Documents map onto plain Python values: ``None``, ``bool``, ``int``,
``float``, ``str``, ``list`` and ``dict``. Output is indented by four
spaces, with dictionary keys in sorted order and floating point numbers
written with six significant digits.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from typing import IO, Any, Union

JsonValue = Union[None, bool, int, float, str, list, dict]

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_INDENT_STEP = 4

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "\\": "\\"}
_OUTPUT_ESCAPES = {"\r": "\\r", "\n": "\\n", "\t": "\\t", '"': '\\"', "\\": "\\\\"}


class ParsingError(ValueError):
    """Raised when a JSON document cannot be parsed."""


class _Parser:
    """Recursive-descent parser over a string."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _next_token(self) -> str | None:
        """Return the next non-whitespace character, or None at the end."""
        while self._pos < len(self._text) and self._text[self._pos] in _WHITESPACE:
            self._pos += 1
        if self._pos >= len(self._text):
            return None
        char = self._text[self._pos]
        self._pos += 1
        return char

    def _putback(self) -> None:
        self._pos -= 1

    def parse_node(self) -> JsonValue:
        char = self._next_token()
        if char is None:
            raise ParsingError("Unexpected end of file")
        if char == "[":
            return self._parse_array()
        if char == "{":
            return self._parse_dict()
        if char == '"':
            return self._parse_string()
        self._putback()
        if char in "tf":
            return self._parse_bool()
        if char == "n":
            return self._parse_null()
        return self._parse_number()

    def _alpha_symbols(self) -> str:
        start = self._pos
        while (char := self._peek()) and char.isascii() and char.isalpha():
            self._pos += 1
        return self._text[start:self._pos]

    def _parse_null(self) -> None:
        word = self._alpha_symbols()
        if word != "null":
            raise ParsingError(f"Failed to convert '{word}' to null")
        return None

    def _parse_bool(self) -> bool:
        word = self._alpha_symbols()
        if word == "true":
            return True
        if word == "false":
            return False
        raise ParsingError(f"Failed to convert '{word}' to bool")

    def _parse_string(self) -> str:
        chars: list[str] = []
        while True:
            if self._pos >= len(self._text):
                raise ParsingError("String parsing error")
            char = self._text[self._pos]
            self._pos += 1
            if char == '"':
                return "".join(chars)
            if char == "\\":
                if self._pos >= len(self._text):
                    raise ParsingError("String parsing error")
                escaped = self._text[self._pos]
                self._pos += 1
                try:
                    chars.append(_ESCAPES[escaped])
                except KeyError:
                    raise ParsingError(f"Unrecognized escape sequence \\{escaped}") from None
            elif char in "\n\r":
                raise ParsingError("Unexpected end of line")
            else:
                chars.append(char)

    def _read_digits(self) -> None:
        if not self._peek() or self._peek() not in _DIGITS:
            raise ParsingError("A digit is expected")
        while self._peek() and self._peek() in _DIGITS:
            self._pos += 1

    def _parse_number(self) -> int | float:
        start = self._pos
        if self._peek() == "-":
            self._pos += 1
        if self._peek() == "0":
            self._pos += 1
        else:
            self._read_digits()

        is_int = True
        if self._peek() == ".":
            self._pos += 1
            self._read_digits()
            is_int = False

        if self._peek() and self._peek() in "eE":
            self._pos += 1
            if self._peek() and self._peek() in "+-":
                self._pos += 1
            self._read_digits()
            is_int = False

        literal = self._text[start:self._pos]
        if is_int:
            number = int(literal)
            if _INT_MIN <= number <= _INT_MAX:
                return number
        result = float(literal)
        if math.isinf(result):
            raise ParsingError(f"Failed to convert {literal} to number")
        return result

    def _parse_array(self) -> list:
        items: list = []
        while True:
            char = self._next_token()
            if char is None:
                raise ParsingError("Failed to convert data to array")
            if char == "]":
                return items
            if char != ",":
                self._putback()
            items.append(self.parse_node())

    def _parse_dict(self) -> dict:
        result: dict = {}
        while True:
            char = self._next_token()
            if char is None:
                raise ParsingError("Dictionary parsing error")
            if char == "}":
                return result
            if char == '"':
                key = self._parse_string()
                separator = self._next_token()
                if separator != ":":
                    raise ParsingError(f": is expected but '{separator or ''}' has been found")
                if key in result:
                    raise ParsingError(f"Duplicate key '{key}' have been found")
                result[key] = self.parse_node()
                continue
            if char != ",":
                raise ParsingError(f"',' is expected but '{char}' has been found")


def loads(text: str) -> JsonValue:
    """Parse the first JSON value in the text."""
    return _Parser(text).parse_node()


def load(stream: IO[str]) -> JsonValue:
    """Parse the first JSON value read from a text stream."""
    return loads(stream.read())


def _quote(text: str) -> str:
    return '"' + "".join(_OUTPUT_ESCAPES.get(char, char) for char in text) + '"'


def _render(value: Any, indent: int) -> Iterator[str]:
    if value is None:
        yield "null"
    elif isinstance(value, bool):
        yield "true" if value else "false"
    elif isinstance(value, int):
        yield str(value)
    elif isinstance(value, float):
        yield format(value, "g")
    elif isinstance(value, str):
        yield _quote(value)
    elif isinstance(value, (list, tuple)):
        inner = indent + _INDENT_STEP
        yield "[\n"
        for position, item in enumerate(value):
            if position:
                yield ",\n"
            yield " " * inner
            yield from _render(item, inner)
        yield "\n" + " " * indent + "]"
    elif isinstance(value, Mapping):
        inner = indent + _INDENT_STEP
        yield "{\n"
        for position, key in enumerate(sorted(value)):
            if position:
                yield ",\n"
            yield " " * inner + _quote(key) + ": "
            yield from _render(value[key], inner)
        yield "\n" + " " * indent + "}"
    else:
        raise TypeError(f"Cannot write value of type {type(value).__name__} as JSON")


def dumps(value: JsonValue) -> str:
    """Return the indented JSON text of a value."""
    return "".join(_render(value, 0))


def dump(value: JsonValue, stream: IO[str]) -> None:
    """Write the indented JSON text of a value to a text stream."""
    for piece in _render(value, 0):
        stream.write(piece)