"""Tree Linter Example - Building Tooling on the Visitor API.

This example shows how to use treelang's NodeVisitor to build a small linter
for configuration trees that detects common issues:

- Directives without children or arguments
- Duplicate directive names among siblings
- Empty groups

Leverages Python 3.13+ features:
- Pattern matching for node and item checks
- Frozen dataclasses for lint results

Python 3.13+.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from treelang import NodeVisitor, Origin, SourceMap, TreeParser, TreeSyntaxError
from treelang.diagnostics import DiagnosticFormatter
from treelang.syntax import Directive, Group, Word


@dataclass(frozen=True, slots=True)
class LintIssue:
    """Immutable lint issue result."""

    rule: str
    message: str
    line: int
    column: int


class TreeLinter(NodeVisitor):
    """Collect lint issues while walking a parsed tree."""

    def __init__(self) -> None:
        self.issues: list[LintIssue] = []

    def _report(self, rule: str, message: str, node: Directive | Group) -> None:
        self.issues.append(LintIssue(rule, message, node.span.line, node.span.column))

    def visit_Directive(self, node: Directive) -> None:
        if not node.children and not node.arguments:
            self._report("empty-directive", "Directive has neither arguments nor children", node)

        seen: set[str] = set()
        for child in node.children:
            match child:
                case Directive(signature=(Word(text=name), *_)):
                    if name in seen:
                        self._report("duplicate-name", f"Duplicate directive '{name}'", child)
                    seen.add(name)
        self.generic_visit(node)

    def visit_Group(self, node: Group) -> None:
        if not node.items:
            self._report("empty-group", f"Empty {node.kind.value} group", node)
        self.generic_visit(node)


def lint(path: Path) -> int:
    """Lint one file and print its issues. Returns the number of issues."""
    source_map = SourceMap()
    index = source_map.add(Origin.file(path), path.read_text(encoding="utf-8"))
    try:
        tree = TreeParser(comment="#").parse(source_map.input(index))
    except TreeSyntaxError as error:
        assert error.diagnostic is not None
        print(DiagnosticFormatter().format_with_context(error.diagnostic, source_map))
        return 1

    linter = TreeLinter()
    linter.visit(tree)
    for issue in linter.issues:
        print(f"{path}:{issue.line}:{issue.column}: [{issue.rule}] {issue.message}")
    return len(linter.issues)


if __name__ == "__main__":
    total = sum(lint(Path(arg)) for arg in sys.argv[1:])
    sys.exit(1 if total else 0)
