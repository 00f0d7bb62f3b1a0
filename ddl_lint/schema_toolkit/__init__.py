"""Module for analyzing CREATE TABLE statements.

Classes
-------
- Class for representing the parsed statement
  - `ColumnType`: Recognized column types
  - `ColumnStructure`: Column structure
  - `TableStructure`: Table structure
- Exception
  - `SQLParseError`: Raised when the statement does not match the grammar

Functions
---------
- SQL statement analysis functions
  - `parse_col`: Parse a single `name type` column definition.
  - `parse_table`: Parse a CREATE TABLE statement and return the remaining input.
  - `parse_sql`: Parse a CREATE TABLE statement.
"""
from ._core import ColumnType, ColumnStructure, TableStructure, SQLParseError

from .sql_parser import parse_col, parse_table, parse_sql
