"""
Core modules for the Javadoc MCP server.

This package contains the core business logic modules:
- logger: Logging infrastructure
- library_zip: Access to Javadoc ZIP files
- parser: Class document parsing
- html_to_markdown: Description HTML conversion
- dao: Class lookup across a directory of ZIP files
- render: Markdown rendering of class documentation
- core: Main business logic functions
"""
