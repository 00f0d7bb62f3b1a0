"""Module for running lint rules against a parsed table.

Classes
-------
- `LintOutcome`: Overall result of a lint run (clean / dirty)
- `LintFinding`: Diagnostic produced by one rule
- `LintReport`: Findings of a lint run

Functions
---------
- `run_linters`: Run every rule against a table and collect the findings.

Usage
-----
```python
from ddl_lint.schema_toolkit import parse_sql
from ddl_lint.linter import run_linters

report = run_linters(parse_sql("CREATE TABLE t (x Date, x String)"))
print(report.render(), end="")
```
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Final, Sequence

from ddl_lint.schema_toolkit import TableStructure
from .rules import DEFAULT_RULES, Diagnostic, LintRule



ERROR_BANNER: Final = "encountered error:"
"""Line printed before each diagnostic"""

SUCCESS_MESSAGE: Final = "Congrats! Your table looks fine"
"""Line printed when no rule reported anything"""


class LintOutcome(Enum):
    """Overall result of a lint run"""
    CLEAN = auto()
    """No rule reported anything"""
    DIRTY = auto()
    """At least one rule reported a diagnostic"""

@dataclass(frozen=True)
class LintFinding:
    """Diagnostic produced by one rule

    Attributes
    ----------
    rule_name : str
        Name of the rule that produced the diagnostic
    message : str
        Diagnostic message
    """
    rule_name: str
    message: Diagnostic

    def render(self) -> str:
        """Text printed for this finding: banner, blank line, message"""
        return f"{ERROR_BANNER}\n\n{self.message}\n"

@dataclass
class LintReport:
    """Findings of a lint run

    Attributes
    ----------
    table : TableStructure
        Table that was checked
    findings : list[LintFinding]
        Findings, in rule order
    """
    table: TableStructure
    findings: list[LintFinding] = field(default_factory=list)

    @property
    def outcome(self) -> LintOutcome:
        """CLEAN if no rule reported anything, DIRTY otherwise"""
        return LintOutcome.DIRTY if self.findings else LintOutcome.CLEAN

    @property
    def is_clean(self) -> bool:
        """True if no rule reported anything"""
        return self.outcome == LintOutcome.CLEAN

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Diagnostic messages, in rule order"""
        return [f.message for f in self.findings]

    def render(self) -> str:
        """Text to print on the standard output

        Each finding is printed as the banner line, a blank line and the
        diagnostic. The success line is printed only if there are no findings.
        """
        if self.is_clean:
            return f"{SUCCESS_MESSAGE}\n"
        return "".join(f.render() for f in self.findings)


def run_linters(table:TableStructure,
                rules:Sequence[LintRule]=DEFAULT_RULES) -> LintReport:
    """Run every rule against `table`.

    All rules are evaluated, in order; a finding never stops the run.

    Args
    ----
    table : TableStructure
        Table to check
    rules : Sequence[LintRule], default DEFAULT_RULES
        Rules to apply

    Returns
    -------
    LintReport
        Findings of the run
    """
    report = LintReport(table)
    for rule in rules:
        if (message := rule(table)) is not None:
            report.findings.append(LintFinding(rule.name, message))
    return report
