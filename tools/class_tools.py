#!/usr/bin/env python3
"""
MCP tools for class documentation lookups.

This module provides MCP tool wrappers around the core class documentation functionality.
"""

import os
from pathlib import Path

from fastmcp import FastMCP, Context

from javadoc.core import get_class_docs_impl, get_method_docs_impl
from javadoc.logger import setup_logging

# Configuration
JAVADOC_DIR = Path(os.environ.get("JAVADOC_DIR", "./javadocs"))
LOGS_DIR = Path(os.environ.get("JAVADOC_LOGS_DIR", "./logs"))

logger = setup_logging(LOGS_DIR)


def register_class_tools(mcp: FastMCP):
    """Register class documentation related MCP tools."""

    @mcp.tool
    async def get_class_docs(class_name: str, ctx: Context) -> str:
        """
        Get the Javadoc documentation of a class as markdown.

        Args:
            class_name: Fully-qualified ("java.lang.String") or simple ("String") class name

        Returns:
            The class documentation, or a list of candidates if the name is ambiguous
        """
        return await get_class_docs_impl(class_name, JAVADOC_DIR, logger, ctx)

    @mcp.tool
    async def get_method_docs(class_name: str, method: str, ctx: Context) -> str:
        """
        Get the Javadoc documentation of a method as markdown.

        Args:
            class_name: Fully-qualified or simple class name
            method: Method name, optionally with parameter types (e.g. "substring(int, int)")

        Returns:
            The documentation of every matching method
        """
        return await get_method_docs_impl(class_name, method, JAVADOC_DIR, logger, ctx)
