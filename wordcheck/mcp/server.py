from __future__ import annotations

import logging

from wordcheck.api.main import check_service
from wordcheck.common.config import settings

try:
    from fastmcp import FastMCP
except ImportError as exc:  # pragma: no cover - runtime dependency guard
    raise RuntimeError(
        "FastMCP is required to run the MCP server. Install the project dependencies first."
    ) from exc


SERVER_TITLE = "Wrong Word Checker"
SERVER_INSTRUCTIONS = (
    "Use check_text to find disallowed words in a piece of text. "
    "Each result line gives the character span, a message and the suggested replacements."
)
NO_MATCHES = "No wrong words found."

mcp = FastMCP(
    name=SERVER_TITLE,
    instructions=SERVER_INSTRUCTIONS,
    version="1",
)


def check_text(text: str) -> str:
    """Check text against the wrong-word dictionary."""
    response = check_service.check_text(text)
    if not response.matches:
        return NO_MATCHES

    lines = []
    for match in response.matches:
        lines.append(f"{match.start}-{match.end} {match.message} Suggestions: {', '.join(match.suggestions)}")
    return "\n".join(lines)


mcp.tool(name="check_text", description="Find wrong words in text and suggest replacements.")(check_text)


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level)
    mcp.run("http")
