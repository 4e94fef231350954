"""A scoped symbol table for a small C-like language front end."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, Optional, TextIO

DEFAULT_VALUE = "~"
MAX_VALUE_LENGTH = 32

_HEADER = "Name\tSize\tType\tLineNo\tScope\tValue"


class SymbolType(IntEnum):
    """Types an identifier can be declared with."""

    CHAR = 1
    INT = 2
    FLOAT = 3
    DOUBLE = 4

    @property
    def size(self) -> int:
        """Storage size in bytes for this type."""
        return _SIZES[self]


_SIZES = {
    SymbolType.CHAR: 1,
    SymbolType.INT: 2,
    SymbolType.FLOAT: 4,
    SymbolType.DOUBLE: 8,
}


class SymbolTableError(Exception):
    """Base class for symbol table errors."""


class RedeclarationError(SymbolTableError):
    """A name was declared twice in the same scope."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} cannot be redeclared in scope")
        self.name = name


class UndeclaredError(SymbolTableError):
    """A name was used without a matching declaration."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} has not been declared")
        self.name = name


class DefaultValueError(SymbolTableError):
    """The placeholder value was given where a real value was expected."""

    def __init__(self) -> None:
        super().__init__(f"{DEFAULT_VALUE!r} is the placeholder value and cannot be assigned")


@dataclass
class Symbol:
    """One declared identifier."""

    name: str
    type: SymbolType
    line: int
    scope: int
    value: str = field(default=DEFAULT_VALUE)

    @property
    def size(self) -> int:
        return self.type.size

    def set_value(self, value: str) -> None:
        """Store a value for this symbol."""
        self.value = value


class SymbolTable:
    """Symbols kept in declaration order."""

    def __init__(self) -> None:
        self._symbols: list[Symbol] = []

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def insert(self, name: str, type: int, lineno: int, scope: int) -> Symbol:
        """Declare a name; raise RedeclarationError if it exists in this scope."""
        symbol_type = SymbolType(type)
        if self.lookup(name, scope) is not None:
            raise RedeclarationError(name)
        symbol = Symbol(name=name, type=symbol_type, line=lineno, scope=scope)
        self._symbols.append(symbol)
        return symbol

    def lookup(self, name: str, scope: int) -> Optional[Symbol]:
        """Return the symbol declared with exactly this name and scope, or None."""
        return next(
            (s for s in self._symbols if s.name == name and s.scope == scope),
            None,
        )

    def _find(self, name: str, scope: int) -> tuple[Optional[Symbol], Optional[Symbol]]:
        outer: Optional[Symbol] = None
        for symbol in self._symbols:
            if symbol.name != name:
                continue
            if symbol.scope == scope:
                return symbol, outer
            if symbol.scope < scope:
                outer = symbol
        return None, outer

    def assign_value(self, name: str, value: str, scope: int) -> Symbol:
        """Assign a value to the name declared in this scope.

        Values are truncated to MAX_VALUE_LENGTH characters. When the name is
        only declared in an enclosing scope, that symbol is updated but
        UndeclaredError is still raised.
        """
        if value == DEFAULT_VALUE:
            raise DefaultValueError()
        stored = value[:MAX_VALUE_LENGTH]
        exact, outer = self._find(name, scope)
        if exact is not None:
            exact.set_value(stored)
            return exact
        if outer is not None:
            outer.set_value(stored)
        raise UndeclaredError(name)

    def resolve(self, name: str, scope: int) -> Symbol:
        """Return the symbol in this scope, else the latest one from an enclosing scope."""
        exact, outer = self._find(name, scope)
        if exact is not None:
            return exact
        if outer is None:
            raise UndeclaredError(name)
        return outer

    def render(self) -> str:
        """Return the table as tab-separated text with a header line."""
        lines = [_HEADER]
        lines.extend(
            f"{s.name}\t{s.size}\t{int(s.type)}\t{s.line}\t{s.scope}\t{s.value}"
            for s in self._symbols
        )
        return "\n".join(lines) + "\n"

    def display(self, file: Optional[TextIO] = None) -> None:
        """Write the rendered table to file (standard output by default)."""
        (file or sys.stdout).write(self.render())


def get_type(value: str) -> Optional[SymbolType]:
    """Infer the type of a literal, or None if it is not recognised."""
    if value and value[0] == "'" and value[-1] == "'" and len(value) < 5:
        return SymbolType.CHAR
    if "." in value:
        return SymbolType.FLOAT
    if all("0" <= ch <= "9" for ch in value):
        return SymbolType.INT
    return None