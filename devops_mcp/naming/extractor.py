"""
Naming - Identifier Extractor

Line-oriented scan of tool module source for the two identifier families
that MCP clients see: operation names and field names.

This is a best-effort structural scan, not a parser. Deliberately
obfuscated source (names built at runtime, entries split across lines,
braces inside string values) can be under- or over-matched. The lint
check in ``devops_mcp.naming.lint`` is the syntax-tree counterpart.
"""

import re
from typing import List


# NAME = { ... }   /   NAME: Dict[str, str] = { ... }
_BINDING_PATTERN = re.compile(
    r"\b([A-Za-z_][A-Za-z0-9_]*)\s*(?::[^=\n]+)?(?<![=!<>])=(?!=)\s*\{([^}]*)\}"
)

# key: "value"  with the key bare or quoted, anchored at line start
_ENTRY_PATTERN = re.compile(
    r"""^\s*(?:[A-Za-z_][A-Za-z0-9_]*|"[A-Za-z_][A-Za-z0-9_]*"|'[A-Za-z_][A-Za-z0-9_]*')"""
    r"""\s*:\s*(?:"([^"\n]+)"|'([^'\n]+)')""",
    re.MULTILINE,
)


def extract_operation_names(source: str) -> List[str]:
    """
    Extract operation names from tool-name mapping literals.

    Only bindings whose name contains "tools" (any casing) are scanned.
    Entries whose value is not a quoted string are skipped.

    Args:
        source: Python module source

    Returns:
        String values in declaration order
    """
    names = []
    for binding in _BINDING_PATTERN.finditer(source):
        if "tools" not in binding.group(1).lower():
            continue
        for entry in _ENTRY_PATTERN.finditer(binding.group(2)):
            names.append(entry.group(1) or entry.group(2))
    return names


def extract_field_names(source: str, builder: str = "Field") -> List[str]:
    """
    Extract field names declared with the schema builder.

    Matches ``name: ... Field(`` at the start of a line, which covers both
    ``name: Annotated[str, Field(...)]`` parameters and
    ``name: str = Field(...)`` model attributes.

    Args:
        source: Python module source
        builder: Name of the schema builder callable

    Returns:
        Field names in declaration order
    """
    pattern = re.compile(
        r"^\s*([A-Za-z_][A-Za-z0-9_]*)\s*:[^\n]*?\b" + re.escape(builder) + r"\(",
        re.MULTILINE,
    )
    return [match.group(1) for match in pattern.finditer(source)]
