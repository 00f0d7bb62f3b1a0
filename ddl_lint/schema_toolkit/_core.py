"""
Core data structures for schema toolkit.

This module defines the core data structures produced by the DDL parser
and consumed by the linter.

Classes
-------
- `ColumnType`: Recognized column types
- `ColumnStructure`: Column structure
- `TableStructure`: Table structure
- `SQLParseError`: Raised when the input does not match the grammar
"""
from dataclasses import dataclass, field
from enum import Enum



class ColumnType(Enum):
    """Recognized column types.

    The value of each member is the exact (case-sensitive) token
    accepted by the parser."""
    DATE = "Date"
    STRING = "String"

@dataclass(frozen=True)
class ColumnStructure:
    """Column structure

    Attributes:
    -----------
    name : str
        Column name
    col_type : ColumnType
        Column type (e.g. ColumnType.DATE)
    """
    name: str
    """Column name"""
    col_type: ColumnType
    """Column type"""

@dataclass(frozen=True)
class TableStructure:
    """Table structure

    Attributes:
    -----------
    name : str
        Table name
    columns : tuple[ColumnStructure, ...]
        Column structures, in source order
    if_not_exists : bool
        True if the statement carries `IF NOT EXISTS`
    raw_sql : str
        Part of the source consumed by the parser

    Examples
    --------
    ```sql
    CREATE TABLE IF NOT EXISTS events (happened_on Date, label String)
    ```

    is represented as:

    ```python
    TableStructure(
        name='events',
        columns=(
            ColumnStructure(name='happened_on', col_type=ColumnType.DATE),
            ColumnStructure(name='label', col_type=ColumnType.STRING)
        ),
        if_not_exists=True
    )
    ```
    """
    name: str
    """Table name"""
    columns: tuple[ColumnStructure, ...] = ()
    """Column structures, in source order"""
    if_not_exists: bool = False
    """True if the statement carries `IF NOT EXISTS`"""
    raw_sql: str = field(default="", compare=False)
    """Part of the source consumed by the parser"""

    @property
    def column_names(self) -> list[str]:
        """Column names, in source order"""
        return [column.name for column in self.columns]


class SQLParseError(ValueError):
    """Raised when the input does not match the CREATE TABLE grammar.

    Attributes
    ----------
    residual : str
        The input that could not be recognized
    expected : str
        Description of what the parser was looking for
    """
    def __init__(self, expected:str, residual:str):
        super().__init__(f"Expected {expected} at: {residual[:40]!r}")
        self.expected = expected
        self.residual = residual
