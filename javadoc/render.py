#!/usr/bin/env python3
"""
Markdown rendering of class and method documentation.
"""

import re
from typing import List

from .class_info import ClassInfo, MethodInfo

MAX_LISTED_METHODS = 20


def render_class(info: ClassInfo) -> str:
    """
    Render a class's documentation as Markdown.

    Args:
        info: The class documentation

    Returns:
        Markdown text
    """
    heading = " ".join(info.modifiers + [info.name.full])
    parts = [f"# {heading}\n"]

    if info.deprecated:
        parts.append("**Deprecated**\n")

    hierarchy = []
    if info.super_class is not None:
        hierarchy.append(f"Extends: `{info.super_class.full}`")
    if info.interfaces:
        hierarchy.append("Implements: " + ", ".join(f"`{i.full}`" for i in info.interfaces))
    if hierarchy:
        parts.append("\n".join(hierarchy) + "\n")

    if info.description:
        parts.append(info.description + "\n")

    if info.since:
        parts.append(f"Since: {info.since}\n")

    url = info.library.url(info) if info.library is not None else None
    if url:
        parts.append(f"Javadoc: {url}\n")

    if info.methods:
        parts.append("## Methods\n")
        for method in info.methods[:MAX_LISTED_METHODS]:
            parts.append(f"- `{method.signature}`")
        remaining = len(info.methods) - MAX_LISTED_METHODS
        if remaining > 0:
            parts.append(f"- ... and {remaining} more")

    return "\n".join(parts).strip() + "\n"


def render_method(info: ClassInfo, method: MethodInfo) -> str:
    """Render a single method's documentation as Markdown."""
    heading = " ".join(method.modifiers)
    if method.return_type:
        heading += f" {method.return_type}"
    heading = f"{heading} {info.name.simple}#{method.signature}".strip()

    parts = [f"# {heading}\n"]
    if method.deprecated:
        parts.append("**Deprecated**\n")
    if method.description:
        parts.append(method.description + "\n")
    if method.since:
        parts.append(f"Since: {method.since}\n")

    url = info.library.url(info) if info.library is not None else None
    if url:
        parts.append(f"Javadoc: {url}\n")

    return "\n".join(parts).strip() + "\n"


def find_methods(info: ClassInfo, query: str) -> List[MethodInfo]:
    """
    Find the methods of a class that match a query.

    Args:
        info: The class documentation
        query: A method name ("substring"), optionally followed by a
            parameter list ("substring(int, int)")

    Returns:
        The matching methods in document order
    """
    match = re.fullmatch(r'\s*([\w$]+)\s*(?:\((.*)\))?\s*', query)
    if not match:
        return []

    name = match.group(1).lower()
    methods = [m for m in info.methods if m.name.lower() == name]

    if match.group(2) is None:
        return methods

    wanted = [t.strip().lower() for t in match.group(2).split(',') if t.strip()]
    return [m for m in methods if _parameters_match(m, wanted)]


def _parameters_match(method: MethodInfo, wanted: List[str]) -> bool:
    if len(method.parameters) != len(wanted):
        return False
    for parameter, type_name in zip(method.parameters, wanted):
        if type_name not in (parameter.type.lower(), parameter.simple_type.lower()):
            return False
    return True
