#!/usr/bin/env python3
"""
MCP tools for library listing operations.

This module provides MCP tool wrappers around the core library functionality.
"""

import os
from pathlib import Path
from typing import Dict, List, Optional

from fastmcp import FastMCP, Context

from javadoc.core import list_libraries_impl, list_library_classes_impl
from javadoc.logger import setup_logging

# Configuration
JAVADOC_DIR = Path(os.environ.get("JAVADOC_DIR", "./javadocs"))
LOGS_DIR = Path(os.environ.get("JAVADOC_LOGS_DIR", "./logs"))

logger = setup_logging(LOGS_DIR)


def register_library_tools(mcp: FastMCP):
    """Register library related MCP tools and resources."""

    @mcp.tool
    async def list_libraries(ctx: Context) -> List[Dict[str, Optional[str]]]:
        """
        Lists the libraries whose Javadocs are available.

        Args:
            ctx: The FastMCP context object.

        Returns:
            One entry per library with its name, version, base_url,
            project_url and the path of its ZIP file.
        """
        return await list_libraries_impl(JAVADOC_DIR, logger, ctx)

    @mcp.tool
    async def list_library_classes(library: str, ctx: Context) -> List[str]:
        """
        Lists the classes documented in a library.

        Args:
            library: The library's name (e.g. "jsoup") or ZIP file name

        Returns:
            Sorted fully-qualified class names
        """
        return await list_library_classes_impl(library, JAVADOC_DIR, logger, ctx)

    @mcp.resource("javadoc://libraries")
    async def list_libraries_resource() -> str:
        """List all available libraries."""
        libraries = await list_libraries_impl(JAVADOC_DIR, logger)
        if not libraries:
            return "No Javadoc libraries found."

        lines = []
        for library in libraries:
            label = library['name'] or Path(library['path']).stem
            if library['version']:
                label += f" v{library['version']}"
            lines.append(f"- {label}")
        return "Javadoc libraries:\n" + "\n".join(lines)
