# symtab

A scoped symbol table for the front end of a small C-like compiler. It
records identifiers with their type, storage size, declaration line, scope
and current value. It also resolves names through enclosing scopes.

## Installation

```
pip install .
```

## Usage

```python
from symtab.table import SymbolTable, SymbolType, get_type

table = SymbolTable()
table.insert("a", SymbolType.INT, 3, 1)
table.insert("b", SymbolType.INT, 3, 1)
table.insert("a", SymbolType.INT, 7, 2)   # shadows "a" in an inner scope

table.assign_value("a", "10", 2)          # updates the inner "a"
symbol = table.resolve("b", 2)            # finds "b" in the enclosing scope
symbol.set_value("6")

print(table.render())
```

### `SymbolTable`

- `insert(name, type, lineno, scope)` declares a name and returns the new
  `Symbol`. The `type` argument may be a `SymbolType` or its integer value.
  Declaring the same name twice in the same scope raises `RedeclarationError`.
- `lookup(name, scope)` returns the symbol with exactly that name and scope.
  It returns `None` if there is no such symbol.
- `resolve(name, scope)` returns the symbol declared in `scope`. If the name
  is not declared there, it returns the most recently declared symbol of that
  name from a lower-numbered scope. It raises `UndeclaredError` if neither
  exists.
- `assign_value(name, value, scope)` stores `value` in the symbol declared in
  `scope` and returns that symbol. The value is cut to `MAX_VALUE_LENGTH`
  (32) characters. If the name is only declared in an enclosing scope, that
  symbol is updated but `UndeclaredError` is still raised.
- `render()` returns the table as tab-separated text. The columns are `Name`,
  `Size`, `Type`, `LineNo`, `Scope` and `Value`, and the type is shown as its
  integer value.
- `display(file=None)` writes the same text to a file object, or to standard
  output if no file is given.
- `len(table)` gives the number of symbols. Iterating over the table yields
  the symbols in declaration order.

A symbol that has no value yet shows the placeholder `~`.

### `Symbol`

A dataclass with the fields `name`, `type`, `line`, `scope` and `value`. It
has a `size` property and a `set_value(value)` method. `set_value` stores the
value unchanged, without cutting it to length.

### Types

`SymbolType` has the members `CHAR` (1), `INT` (2), `FLOAT` (3) and
`DOUBLE` (4). Their `size` property gives the storage size in bytes:
`CHAR` 1, `INT` 2, `FLOAT` 4 and `DOUBLE` 8.

`get_type(value)` guesses the type of a literal:

| Literal | Result |
| --- | --- |
| A quoted literal shorter than five characters, such as `"'x'"` | `SymbolType.CHAR` |
| Anything containing a dot, such as `"3.5"` | `SymbolType.FLOAT` |
| Digits only, such as `"42"` | `SymbolType.INT` |
| Anything else | `None` |

`get_type` never returns `SymbolType.DOUBLE`.

## Errors

All errors derive from `SymbolTableError`:

- `RedeclarationError`: a name is declared twice in the same scope.
- `UndeclaredError`: a name is used with no declaration in scope.
- `DefaultValueError`: the placeholder value `~` is passed to
  `assign_value`.

## What this package does not do

This package is only the symbol table. It has no lexer, no parser and no
command-line program. It does not read source files itself. Callers supply
the names, types, line numbers and scope numbers.

Symbols are never removed when a scope closes. Because of this, `resolve`
and `assign_value` can pick up a symbol from a sibling scope that has
already closed, as long as that scope has a lower number.

## Running the tests

```
pip install .[test]
pytest
```