#!/usr/bin/env python3
"""
Core business logic for the Javadoc MCP server.

This module contains the implementation functions behind the MCP tools.
They have no MCP dependencies beyond the optional Context used for user
feedback, making them reusable and testable. Reading ZIP files blocks, so
the work is done in a worker thread.
"""

import asyncio
from pathlib import Path
from typing import Dict, List, Optional

from fastmcp import Context

from .dao import JavadocDao
from .errors import LibraryZipError, MultipleClassesFoundError
from .render import find_methods, render_class, render_method


def _library_metadata(library) -> Dict[str, Optional[str]]:
    return {
        'name': library.name,
        'version': library.version,
        'base_url': library.base_url,
        'project_url': library.project_url,
        'path': str(library.path),
    }


async def load_dao_impl(javadoc_dir: Path, logger, ctx: Optional[Context] = None) -> JavadocDao:
    """
    Core implementation for loading the Javadoc ZIP files of a directory.

    Args:
        javadoc_dir: Directory containing the Javadoc ZIP files
        logger: Logger instance
        ctx: Optional FastMCP context for user feedback

    Returns:
        The loaded JavadocDao
    """
    if ctx:
        await ctx.info(f"Loading Javadoc ZIP files from {javadoc_dir}")
    dao = await asyncio.to_thread(JavadocDao, javadoc_dir, logger)
    logger.info(
        "Loaded Javadoc directory",
        extra={'extra_data': {'path': str(javadoc_dir), 'library_count': len(dao.libraries)}}
    )
    return dao


async def list_libraries_impl(javadoc_dir: Path, logger, ctx: Optional[Context] = None) -> List[Dict[str, Optional[str]]]:
    """
    Core implementation for listing the available libraries.

    Args:
        javadoc_dir: Directory containing the Javadoc ZIP files
        logger: Logger instance
        ctx: Optional FastMCP context for user feedback

    Returns:
        List of library metadata dictionaries
    """
    logger.info("Executing list_libraries_impl")
    try:
        dao = await load_dao_impl(javadoc_dir, logger, ctx)
        libraries = [_library_metadata(library) for library in dao.libraries]
        if ctx:
            await ctx.info(f"Found {len(libraries)} libraries")
        return libraries
    except Exception as e:
        if ctx:
            await ctx.error(f"Error listing libraries: {str(e)}")
        logger.error("Failed to list libraries", exc_info=True, extra={'extra_data': {'path': str(javadoc_dir)}})
        return []


async def list_library_classes_impl(library_name: str, javadoc_dir: Path, logger, ctx: Optional[Context] = None) -> List[str]:
    """
    Core implementation for listing the classes of a library.

    Args:
        library_name: Library name or ZIP file name
        javadoc_dir: Directory containing the Javadoc ZIP files
        logger: Logger instance
        ctx: Optional FastMCP context for user feedback

    Returns:
        Sorted fully-qualified class names, empty if the library is unknown
    """
    logger.info("Listing library classes", extra={'extra_data': {'library': library_name}})
    try:
        dao = await load_dao_impl(javadoc_dir, logger, ctx)
        library = dao.find_library(library_name)
        if library is None:
            if ctx:
                await ctx.error(f"Library not found: {library_name}")
            logger.warning("Library not found", extra={'extra_data': {'library': library_name}})
            return []

        names = await asyncio.to_thread(library.class_names)
        classes = sorted(name.full for name in names)
        if ctx:
            await ctx.info(f"Found {len(classes)} classes in {library_name}")
        return classes
    except Exception as e:
        if ctx:
            await ctx.error(f"Error listing classes: {str(e)}")
        logger.error("Failed to list library classes", exc_info=True, extra={'extra_data': {'library': library_name}})
        return []


async def get_class_docs_impl(class_name: str, javadoc_dir: Path, logger, ctx: Optional[Context] = None) -> str:
    """
    Core implementation for getting a class's documentation.

    Args:
        class_name: Fully-qualified or simple class name
        javadoc_dir: Directory containing the Javadoc ZIP files
        logger: Logger instance
        ctx: Optional FastMCP context for user feedback

    Returns:
        The documentation as Markdown, or a message explaining why there is none
    """
    logger.info("Getting class docs", extra={'extra_data': {'class_name_query': class_name}})
    try:
        dao = await load_dao_impl(javadoc_dir, logger, ctx)
        info = await asyncio.to_thread(dao.get_class_info, class_name)
        if info is None:
            logger.warning("Class not found", extra={'extra_data': {'class_name_query': class_name}})
            return f"No documentation found for {class_name}"

        return render_class(info)
    except MultipleClassesFoundError as e:
        logger.info(
            "Class name is ambiguous",
            extra={'extra_data': {'class_name_query': class_name, 'matches': [c.full for c in e.classes]}}
        )
        return "Which one did you mean?\n" + "\n".join(f"- {c.full}" for c in e.classes)
    except LibraryZipError as e:
        if ctx:
            await ctx.error(f"Error reading class docs: {str(e)}")
        logger.error("Error reading class docs", exc_info=True, extra={'extra_data': {'class_name_query': class_name}})
        return f"Error reading class docs: {str(e)}"
    except Exception as e:
        if ctx:
            await ctx.error(f"Error getting class docs: {str(e)}")
        logger.error("Failed to get class docs", exc_info=True, extra={'extra_data': {'class_name_query': class_name}})
        return f"Error getting class docs: {str(e)}"


async def get_method_docs_impl(class_name: str, method: str, javadoc_dir: Path, logger, ctx: Optional[Context] = None) -> str:
    """
    Core implementation for getting the documentation of a class's method.

    Args:
        class_name: Fully-qualified or simple class name
        method: Method name, optionally with parameter types ("substring(int, int)")
        javadoc_dir: Directory containing the Javadoc ZIP files
        logger: Logger instance
        ctx: Optional FastMCP context for user feedback

    Returns:
        The documentation of every matching method as Markdown, or a message
        explaining why there is none
    """
    query = {'class_name_query': class_name, 'method_query': method}
    logger.info("Getting method docs", extra={'extra_data': query})
    try:
        dao = await load_dao_impl(javadoc_dir, logger, ctx)
        info = await asyncio.to_thread(dao.get_class_info, class_name)
        if info is None:
            logger.warning("Class not found", extra={'extra_data': query})
            return f"No documentation found for {class_name}"

        methods = find_methods(info, method)
        if not methods:
            logger.warning(
                "Method not found",
                extra={'extra_data': {'class': info.name.full, 'method_query': method}}
            )
            return f"No method {method} found in {info.name.full}"

        if ctx:
            await ctx.info(f"Found {len(methods)} matching methods")
        return "\n".join(render_method(info, m) for m in methods)
    except MultipleClassesFoundError as e:
        return "Which one did you mean?\n" + "\n".join(f"- {c.full}#{method}" for c in e.classes)
    except LibraryZipError as e:
        if ctx:
            await ctx.error(f"Error reading class docs: {str(e)}")
        logger.error("Error reading class docs", exc_info=True, extra={'extra_data': query})
        return f"Error reading class docs: {str(e)}"
    except Exception as e:
        if ctx:
            await ctx.error(f"Error getting method docs: {str(e)}")
        logger.error("Failed to get method docs", exc_info=True, extra={'extra_data': query})
        return f"Error getting method docs: {str(e)}"
