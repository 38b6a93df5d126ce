"""
Naming - Pre-publish Check

CLI that validates every operation name and field name declared in the
tool modules before a release is published. Exits non-zero on any error.
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from devops_mcp.naming.extractor import extract_field_names, extract_operation_names
from devops_mcp.naming.validator import (
    is_long_field_name,
    validate_field_name,
    validate_operation_name,
)


logger = logging.getLogger(__name__)

DEFAULT_TOOLS_DIR = Path(__file__).resolve().parent.parent / "tools"


@dataclass
class CheckReport:
    """Accumulated results of a check run."""
    operation_names: List[str] = field(default_factory=list)
    field_names: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def check_source(source: str, label: str, report: CheckReport) -> CheckReport:
    """Validate the names found in one module's source."""
    for name in extract_operation_names(source):
        result = validate_operation_name(name)
        if not result.is_valid:
            report.errors.append(f"{label}: {result.error}")
            logger.error(f"{label}: operation name error: {result.error}")
        else:
            report.operation_names.append(name)
            logger.info(f"{label}: operation {name} ({len(name)} chars)")

    for name in extract_field_names(source):
        result = validate_field_name(name)
        if not result.is_valid:
            report.errors.append(f"{label}: {result.error}")
            logger.error(f"{label}: field name error: {result.error}")
            continue
        report.field_names.append(name)
        if is_long_field_name(name):
            report.warnings.append(
                f"{label}: field {name} ({len(name)} chars - consider shortening)"
            )
            logger.warning(f"{label}: field {name} ({len(name)} chars - consider shortening)")

    return report


def check_paths(paths: Sequence[Path]) -> CheckReport:
    """
    Validate names across tool modules.

    Args:
        paths: Files, or directories whose ``*.py`` files are scanned

    Returns:
        CheckReport
    """
    report = CheckReport()
    for path in paths:
        files = sorted(path.glob("*.py")) if path.is_dir() else [path]
        for file_path in files:
            check_source(file_path.read_text(encoding="utf-8"), str(file_path), report)
    return report


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Validate MCP operation and field names"
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Tool modules or directories (default: the bundled tools package)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    report = check_paths(args.paths or [DEFAULT_TOOLS_DIR])
    if not report.ok:
        logger.error("Validation failed! Please fix the errors above.")
        return 1

    logger.info("All operation names and field names are valid!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
