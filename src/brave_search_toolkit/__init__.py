from brave_search_toolkit.function_tool import FunctionTool
from brave_search_toolkit.parameters import NumberParameter, StringParameter
from brave_search_toolkit.snippet import clean_snippet
from brave_search_toolkit.tool import Tool, ToolResult, ToolResultStatus
from brave_search_toolkit.toolkit import BraveSearchToolkit

__all__ = [
    "BraveSearchToolkit",
    "FunctionTool",
    "NumberParameter",
    "StringParameter",
    "Tool",
    "ToolResult",
    "ToolResultStatus",
    "clean_snippet",
]
