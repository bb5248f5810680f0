#!/usr/bin/env python3
"""
FastMCP server for Javadoc lookups.

This server provides tools to:
1. List the libraries whose Javadoc ZIP files are available
2. List the classes of a library
3. Look up the documentation of a class or method

Usage:
    python javadoc_stdio_server.py [stdio|sse|http]
"""

from fastmcp import FastMCP

from tools.library_tools import LOGS_DIR, register_library_tools
from tools.class_tools import register_class_tools
from javadoc.logger import setup_logging

HOST = "127.0.0.1"
PORT = 8604

# Initialize the FastMCP server
mcp = FastMCP("Javadoc Server")

# Setup logging
logger = setup_logging(LOGS_DIR)

# Register all tool modules
register_library_tools(mcp)
register_class_tools(mcp)


def main():
    import sys

    logger.info("Javadoc Server starting up")

    transport = sys.argv[1].lower() if len(sys.argv) > 1 else "stdio"

    if transport == "sse":
        logger.info(f"Running with SSE transport on http://{HOST}:{PORT}")
        mcp.run(transport="sse", host=HOST, port=PORT)
    elif transport == "http":
        logger.info(f"Running with HTTP transport on http://{HOST}:{PORT}/mcp")
        mcp.run(transport="http", host=HOST, port=PORT, path="/mcp")
    elif transport == "stdio":
        logger.info("Running with STDIO transport")
        mcp.run(transport="stdio")
    else:
        print("Usage: python javadoc_stdio_server.py [stdio|sse|http]", file=sys.stderr)
        print("Default: stdio", file=sys.stderr)
        logger.info("Running with default STDIO transport")
        mcp.run()


if __name__ == "__main__":
    main()
