"""
Tool names and registration-time name checks.
"""

import inspect
from typing import Callable

from devops_mcp.naming.validator import require_valid_field_name, require_valid_operation_name


SEARCH_TOOLS = {
    "search_code": "search_code",
    "search_wiki": "search_wiki",
    "search_workitem": "search_workitem",
}


def checked_tool_name(name: str, fn: Callable) -> str:
    """
    Validate a tool's operation name and all of its field names.

    Raises:
        NameValidationError: If any name does not conform
    """
    require_valid_operation_name(name)
    for param in inspect.signature(fn).parameters:
        require_valid_field_name(param)
    return name
