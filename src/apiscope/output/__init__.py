"""Text rendering: names, member signatures and hierarchy views."""

from apiscope.output.composer import (
    api_lines,
    api_text,
    chain_lines,
    chain_text,
    static_api_lines,
    static_api_text,
)

__all__ = [
    "api_lines",
    "api_text",
    "chain_lines",
    "chain_text",
    "static_api_lines",
    "static_api_text",
]
