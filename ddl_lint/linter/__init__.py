"""Package providing the lint rules and the runner applying them.

Modules
-------
- `rules`: Lint rules (`TableStructure` -> diagnostic or None)
- `runner`: Runs the rules and collects their findings
"""
from .rules import (
    MIN_LENGTH, DEFAULT_RULES, LintRule,
    check_duplicate_col_names, check_table_name_is_not_short,
    get_rule, build_rules
)
from .runner import LintOutcome, LintFinding, LintReport, run_linters
