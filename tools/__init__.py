"""
MCP tools for the Javadoc server.

This package contains MCP tool wrappers organized by functionality:
- library_tools: Library listing
- class_tools: Class and method documentation lookups
"""
