"""Lint rules applied to a parsed table.

A rule is a pure function taking a `TableStructure` and returning either
`None` (nothing to report) or a diagnostic message. Rules never modify
the table and never depend on each other.

Classes
-------
- `LintRule`: A named rule

Functions
---------
- `check_duplicate_col_names`: Report column names used more than once.
- `check_table_name_is_not_short`: Report table names shorter than `MIN_LENGTH` bytes.
- `get_rule`: Look up one of the default rules by name.
- `build_rules`: Build the rule list from the default rules and the settings.

Constants
---------
- `MIN_LENGTH`: Default minimum length of a table name (bytes)
- `DEFAULT_RULES`: Rules applied by default, in reporting order
"""
from collections import Counter
from dataclasses import dataclass
from functools import partial
from typing import Callable, Final, Iterable, Optional

from ddl_lint.schema_toolkit import TableStructure



MIN_LENGTH: Final = 5
"""Default minimum length of a table name (bytes)"""

Diagnostic = str
"""Human-readable description of one lint finding"""


@dataclass(frozen=True)
class LintRule:
    """A named lint rule

    Attributes
    ----------
    name : str
        Name used to enable/disable the rule in the configuration
    check : Callable[..., Optional[Diagnostic]]
        The rule itself, called with the table as its first argument
    options : tuple[str, ...], default ()
        Keyword arguments of `check` that can be set from the configuration
    """
    name: str
    check: Callable[..., Optional[Diagnostic]]
    options: tuple[str, ...] = ()

    def __call__(self, table:TableStructure) -> Optional[Diagnostic]:
        return self.check(table)

    def configure(self, **settings) -> "LintRule":
        """Bind the settings listed in `options` to `check`

        Settings the rule does not take are ignored.

        Returns
        -------
        LintRule
            The configured rule, or the rule itself if no setting applies
        """
        if not (kwargs := {k: v for k, v in settings.items() if k in self.options}):
            return self
        return LintRule(self.name, partial(self.check, **kwargs), self.options)


def check_duplicate_col_names(table:TableStructure) -> Optional[Diagnostic]:
    """Report every column name that appears more than once.

    One line is produced per duplicated name, in order of the first
    occurrence of the name in the column list.

    Returns
    -------
    str: One newline-terminated line per duplicated name
    None if all column names are distinct
    """
    counts = Counter(table.column_names)
    errors = "".join(
        f"Duplicated column {name} was encountered {count} times.\n"
        for name, count in counts.items() if count > 1
    )
    return errors or None

def check_table_name_is_not_short(table:TableStructure,
                                  min_length:int=MIN_LENGTH) -> Optional[Diagnostic]:
    """Report a table name shorter than `min_length` bytes (UTF-8)."""
    if len(table.name.encode("utf-8")) < min_length:
        return f"Your table name '{table.name}' is too short. " \
               f"We recommend at least {min_length} characters."
    return None


DEFAULT_RULES: Final = (
    LintRule("duplicate_column_names", check_duplicate_col_names),
    LintRule("short_table_name", check_table_name_is_not_short, ("min_length",)),
)
"""Rules applied by default, in reporting order"""

def get_rule(name:str) -> LintRule:
    """Look up a default rule by name

    Raises
    ------
    KeyError
        If there is no rule named `name`
    """
    for rule in DEFAULT_RULES:
        if rule.name == name:
            return rule
    raise KeyError(f"Unknown lint rule '{name}': " \
                   f"choose from {', '.join(r.name for r in DEFAULT_RULES)}")

def build_rules(min_length:int=MIN_LENGTH,
                disabled:Iterable[str]=()) -> list[LintRule]:
    """Build the rule list from the default rules

    Parameters
    ----------
    min_length : int, default MIN_LENGTH
        Minimum length of a table name, used by `short_table_name`
    disabled : Iterable[str], default ()
        Names of the rules to leave out

    Returns
    -------
    list[LintRule]
        Enabled rules, in the order of `DEFAULT_RULES`

    Raises
    ------
    KeyError
        If `disabled` contains an unknown rule name
    """
    disabled_names = {get_rule(name).name for name in disabled}

    return [rule.configure(min_length=min_length)
            for rule in DEFAULT_RULES if rule.name not in disabled_names]
