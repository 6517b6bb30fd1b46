from __future__ import annotations

import logging
import sys

from mcp.server.fastmcp import FastMCP

from auto_commit_msg.tools import (
    count_summary,
    describe_named,
    describe_one,
    generate,
    parse_changes,
)

mcp = FastMCP("auto-commit-msg")


@mcp.tool()
def generate_message_tool(lines: list[str], fmt: str = "diff-index") -> dict:
    return generate(lines=lines, fmt=fmt)


@mcp.tool()
def one_change_tool(line: str) -> dict:
    return describe_one(line=line)


@mcp.tool()
def named_files_tool(lines: list[str]) -> dict:
    return describe_named(lines=lines)


@mcp.tool()
def count_message_tool(lines: list[str], fmt: str = "diff-index") -> dict:
    return count_summary(lines=lines, fmt=fmt)


@mcp.tool()
def parse_changes_tool(lines: list[str], fmt: str = "diff-index") -> dict:
    return parse_changes(lines=lines, fmt=fmt)


def main() -> None:
    # stdout carries the stdio transport
    logging.basicConfig(level=logging.WARNING, stream=sys.stderr)
    mcp.run()


if __name__ == "__main__":
    main()
