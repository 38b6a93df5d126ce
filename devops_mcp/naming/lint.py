"""
Naming - Lint Check

Syntax-tree check of operation and field names in tool modules:

- string values of dict literals bound to a name containing ``_TOOLS``
- parameters and attributes annotated with a ``Field(...)`` call,
  either directly (``x: str = Field(...)``) or inside ``Annotated[...]``

Long field names are reported as warnings.
"""

import argparse
import ast
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from devops_mcp.naming.validator import is_long_field_name, validate_name


INVALID_OPERATION_NAME = "invalid-operation-name"
INVALID_FIELD_NAME = "invalid-field-name"
LONG_FIELD_NAME = "long-field-name"


@dataclass(frozen=True)
class LintMessage:
    """One finding, located in the source file."""
    filename: str
    line: int
    column: int
    code: str
    message: str
    severity: str = "error"

    def format(self) -> str:
        return f"{self.filename}:{self.line}:{self.column + 1}: {self.severity}: {self.message} [{self.code}]"


def _is_builder_call(node: Optional[ast.AST], builder: str) -> bool:
    if not isinstance(node, ast.Call):
        return False
    func = node.func
    if isinstance(func, ast.Name):
        return func.id == builder
    if isinstance(func, ast.Attribute):
        return func.attr == builder
    return False


def _annotation_uses_builder(annotation: Optional[ast.AST], builder: str) -> bool:
    # Annotated[str, Field(...)]
    if not isinstance(annotation, ast.Subscript):
        return False
    inner = annotation.slice
    if isinstance(inner, ast.Tuple):
        return any(_is_builder_call(elt, builder) for elt in inner.elts[1:])
    return False


class NameLinter(ast.NodeVisitor):
    """Collects LintMessages while walking a module."""

    def __init__(self, filename: str = "<source>", builder: str = "Field"):
        self.filename = filename
        self.builder = builder
        self.messages: List[LintMessage] = []

    # Operation names

    def visit_Assign(self, node: ast.Assign) -> None:
        for target in node.targets:
            if isinstance(target, ast.Name):
                self._check_tools_mapping(target.id, node.value)
        self.generic_visit(node)

    def visit_AnnAssign(self, node: ast.AnnAssign) -> None:
        if isinstance(node.target, ast.Name):
            self._check_tools_mapping(node.target.id, node.value)
            if _is_builder_call(node.value, self.builder):
                self._check_field(node.target.id, node.target)
        self.generic_visit(node)

    def _check_tools_mapping(self, binding: str, value: Optional[ast.AST]) -> None:
        if "_TOOLS" not in binding or not isinstance(value, ast.Dict):
            return
        for item in value.values:
            if isinstance(item, ast.Constant) and isinstance(item.value, str):
                result = validate_name(item.value)
                if not result.is_valid:
                    self._report(
                        item,
                        INVALID_OPERATION_NAME,
                        f"Operation name '{item.value}' is invalid: {result.reason}",
                    )

    # Field names

    def visit_FunctionDef(self, node: ast.FunctionDef) -> None:
        self._check_arguments(node.args)
        self.generic_visit(node)

    def visit_AsyncFunctionDef(self, node: ast.AsyncFunctionDef) -> None:
        self._check_arguments(node.args)
        self.generic_visit(node)

    def _check_arguments(self, args: ast.arguments) -> None:
        positional = args.posonlyargs + args.args
        defaults = [None] * (len(positional) - len(args.defaults)) + list(args.defaults)
        pairs = list(zip(positional, defaults)) + list(zip(args.kwonlyargs, args.kw_defaults))
        for arg, default in pairs:
            if _annotation_uses_builder(arg.annotation, self.builder) or _is_builder_call(
                default, self.builder
            ):
                self._check_field(arg.arg, arg)

    def _check_field(self, name: str, node: ast.AST) -> None:
        result = validate_name(name)
        if not result.is_valid:
            self._report(
                node,
                INVALID_FIELD_NAME,
                f"Field name '{name}' is invalid: {result.reason}",
            )
        elif is_long_field_name(name):
            self._report(
                node,
                LONG_FIELD_NAME,
                f"Field name '{name}' is {len(name)} characters long, "
                "consider shortening for better readability",
                severity="warning",
            )

    def _report(self, node: ast.AST, code: str, message: str, severity: str = "error") -> None:
        self.messages.append(LintMessage(
            filename=self.filename,
            line=getattr(node, "lineno", 0),
            column=getattr(node, "col_offset", 0),
            code=code,
            message=message,
            severity=severity,
        ))


def lint_source(source: str, filename: str = "<source>", builder: str = "Field") -> List[LintMessage]:
    """
    Lint operation and field names in a module.

    Args:
        source: Python module source
        filename: Used in message locations
        builder: Name of the schema builder callable

    Returns:
        Findings in source order
    """
    linter = NameLinter(filename, builder)
    linter.visit(ast.parse(source, filename=filename))
    return sorted(linter.messages, key=lambda m: (m.line, m.column))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Lint the given modules; exit status 1 when any error is found."""
    parser = argparse.ArgumentParser(description="Lint MCP operation and field names")
    parser.add_argument("paths", nargs="+", type=Path, help="Python modules to lint")
    args = parser.parse_args(argv)

    failed = False
    for path in args.paths:
        for message in lint_source(path.read_text(encoding="utf-8"), str(path)):
            print(message.format(), file=sys.stderr)
            failed = failed or message.severity == "error"
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
