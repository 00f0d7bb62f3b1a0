"""
This module defines a parser for a small, forgiving dialect of the
CREATE TABLE statement. It composes the recognizers of `_lexical` in a
hand-written recursive descent and turns the statement into a
`TableStructure`.

## Functions

- `parse_col`: Parse one `name type` column definition.
- `parse_table`: Parse a CREATE TABLE statement, returning the remaining input.
- `parse_sql`: Parse a CREATE TABLE statement, ignoring any trailing input.

## Grammar

```
"CREATE TABLE "               (case-insensitive, trailing space required)
["IF NOT EXISTS "]            (case-insensitive, optional)
<identifier>                  (up to the next space)
" "
"("
<column>(", " <column>)*      (possibly empty)
")"
```

where `<column>` is `<identifier> <whitespace> ("Date" | "String")`.

## Notes

- Column types are case-sensitive while the keywords are not.
- The table name must be followed by a single space before `(`;
  `CREATE TABLE t(a Date)` is rejected.
- `IF NOT EXISTS` must be followed by a space, so `IF NOT EXISTSfoo` is rejected
  and `IF NOT EXISTS foo (a Date)` is accepted. This reverses the earlier
  grammar, which matched the keyword without the space: it read `foo` as the
  name in `IF NOT EXISTSfoo` and rejected `IF NOT EXISTS foo` with an empty name.
- Input following the closing `)` is not consumed.

## Example

```python
>>> table, rest = parse_table("CREATE TABLE events (happened_on Date, label String);")
>>> table.name, [(c.name, c.col_type.value) for c in table.columns], rest
('events', [('happened_on', 'Date'), ('label', 'String')], ';')
```
"""
from functools import partial
from typing import Final

from ._core import ColumnStructure, ColumnType, TableStructure, SQLParseError
from ._lexical import (
    tag, keyword, whitespace, identifier,
    optional, alternative, separated_list, bracketed
)



CREATE_TABLE: Final = "CREATE TABLE "
"""Leading keyword, including its trailing space"""

IF_NOT_EXISTS: Final = "IF NOT EXISTS "
"""Optional keyword, including its trailing space"""

COLUMN_SEPARATOR: Final = ", "
"""Separator between column definitions"""


def parse_col(sql:str) -> tuple[ColumnStructure, str]:
    """Parse a single column definition.

    Args
    ----
    sql : str
        Input starting with a column definition (e.g. "name Date, ...")

    Returns
    -------
    ColumnStructure
        Parsed column
    str
        Remaining input

    Raises
    ------
    SQLParseError
        If the identifier is empty, no whitespace follows it,
        or the type is neither `Date` nor `String`

    Examples
    --------
    >>> parse_col("name Date")
    (ColumnStructure(name='name', col_type=<ColumnType.DATE: 'Date'>), '')
    """
    name, rest = identifier(sql)
    _, rest = whitespace(rest)
    type_token, rest = alternative(
        [partial(tag, ct.value) for ct in ColumnType], rest,
        expected="column type (" + " or ".join(repr(ct.value) for ct in ColumnType) + ")"
    )
    return ColumnStructure(name=name, col_type=ColumnType(type_token)), rest

def parse_table(sql:str) -> tuple[TableStructure, str]:
    """Parse a CREATE TABLE statement.

    Args
    ----
    sql : str
        CREATE TABLE statement

    Returns
    -------
    TableStructure
        Parsed table
    str
        Input following the closing parenthesis (not validated)

    Raises
    ------
    SQLParseError
        If the statement does not match the grammar
    """
    _, rest = keyword(CREATE_TABLE, sql)
    if_not_exists, rest = optional(partial(keyword, IF_NOT_EXISTS), rest)
    name, rest = identifier(rest)
    _, rest = tag(" ", rest)
    columns, rest = bracketed(
        "(", partial(separated_list, COLUMN_SEPARATOR, parse_col), ")", rest
    )

    table = TableStructure(
        name=name,
        columns=tuple(columns),
        if_not_exists=if_not_exists is not None,
        raw_sql=sql[:len(sql) - len(rest)]
    )
    return table, rest

def parse_sql(sql:str) -> TableStructure:
    """Parse a CREATE TABLE statement into a table structure.

    Same as `parse_table`, but anything after the closing parenthesis
    is dropped.

    Args
    ----
    sql : str
        CREATE TABLE statement

    Returns
    -------
    TableStructure
        Parsed table

    Raises
    ------
    SQLParseError
        If the statement does not match the grammar
    """
    table, _ = parse_table(sql)
    return table
