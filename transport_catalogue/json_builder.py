"""Fluent construction of JSON values with checks on the call order."""

from __future__ import annotations

from typing import Any, Union

from transport_catalogue.jsondoc import JsonValue

_Slot = tuple[Union[list, dict], Any]


class BuilderError(RuntimeError):
    """Raised when a builder method is called in the wrong context."""


class Builder:
    """Builds a JSON value step by step.

    Every method except :meth:`build` returns the builder, so calls chain::

        Builder().start_dict().key("a").value(1).end_dict().build()
    """

    def __init__(self) -> None:
        self._root: list[JsonValue] = [None]
        self._stack: list[_Slot] = [(self._root, 0)]

    def _current(self) -> JsonValue:
        if not self._stack:
            raise BuilderError("Attempt to change finalized JSON")
        container, slot = self._stack[-1]
        return container[slot]

    def _add_object(self, value: JsonValue, one_shot: bool) -> None:
        host = self._current()
        if isinstance(host, list):
            host.append(value)
            if not one_shot:
                self._stack.append((host, len(host) - 1))
            return
        if host is not None:
            raise BuilderError("New object in wrong context")
        container, slot = self._stack[-1]
        container[slot] = value
        if one_shot:
            self._stack.pop()

    def key(self, key: str) -> Builder:
        """Start an entry of the dictionary being built."""
        host = self._current()
        if not isinstance(host, dict):
            raise BuilderError("Key() outside a dict")
        host.setdefault(key, None)
        self._stack.append((host, key))
        return self

    def value(self, value: JsonValue) -> Builder:
        """Set a complete value: the root, a dictionary entry or an array item."""
        self._add_object(value, one_shot=True)
        return self

    def start_dict(self) -> Builder:
        """Open a dictionary."""
        self._add_object({}, one_shot=False)
        return self

    def start_array(self) -> Builder:
        """Open an array."""
        self._add_object([], one_shot=False)
        return self

    def end_dict(self) -> Builder:
        """Close the dictionary being built."""
        if not isinstance(self._current(), dict):
            raise BuilderError("EndDict() outside a dict")
        self._stack.pop()
        return self

    def end_array(self) -> Builder:
        """Close the array being built."""
        if not isinstance(self._current(), list):
            raise BuilderError("EndArray() outside an array")
        self._stack.pop()
        return self

    def build(self) -> JsonValue:
        """Return the finished value."""
        if self._stack:
            raise BuilderError("Attempt to build JSON which isn't finalized")
        return self._root[0]