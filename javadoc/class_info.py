#!/usr/bin/env python3
"""
Value objects describing the documentation of a single Java class.

Instances are produced by ClassInfoXmlParser from the per-class XML entries
of a Javadoc ZIP file.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass(frozen=True, order=True)
class ClassName:
    """
    A fully-qualified class name, e.g. "java.lang.String".

    Attributes:
        full: The fully-qualified name
    """

    full: str

    @property
    def simple(self) -> str:
        """Get the name without its package (e.g. "String")."""
        return self.full.rsplit('.', 1)[-1]

    @property
    def package(self) -> Optional[str]:
        """Get the package name, or None for the default package."""
        if '.' not in self.full:
            return None
        return self.full.rsplit('.', 1)[0]

    def __str__(self) -> str:
        return self.full


@dataclass(frozen=True)
class ParameterInfo:
    """A single method or constructor parameter."""

    type: str
    name: str

    @property
    def simple_type(self) -> str:
        """Get the parameter type without its package (e.g. "String[]")."""
        base = self.type.split('<', 1)[0]
        suffix = self.type[len(base):]
        return base.rsplit('.', 1)[-1] + suffix


@dataclass(frozen=True)
class MethodInfo:
    """
    Documentation for a method or constructor.

    Attributes:
        name: Method name (the class's simple name for constructors)
        modifiers: Modifiers such as "public" or "static"
        parameters: Parameters in declaration order
        return_type: Return type, or None for constructors
        description: Description converted to Markdown
        since: Version the method was introduced in
        deprecated: Whether the method is deprecated
        constructor: Whether this is a constructor
    """

    name: str
    modifiers: List[str] = field(default_factory=list)
    parameters: List[ParameterInfo] = field(default_factory=list)
    return_type: Optional[str] = None
    description: str = ""
    since: Optional[str] = None
    deprecated: bool = False
    constructor: bool = False

    @property
    def signature(self) -> str:
        """Get the signature using simple type names (e.g. "substring(int, int)")."""
        types = ", ".join(p.simple_type for p in self.parameters)
        return f"{self.name}({types})"


@dataclass(frozen=True)
class ClassInfo:
    """
    Parsed documentation for one class.

    Attributes:
        name: The class's name
        modifiers: Modifiers such as "public", "final" or "interface"
        super_class: The class it extends, if any
        interfaces: The interfaces it implements
        description: Description converted to Markdown
        since: Version the class was introduced in
        deprecated: Whether the class is deprecated
        methods: Constructors and methods in document order
        library: The LibraryZipFile the class was read from
    """

    name: ClassName
    modifiers: List[str] = field(default_factory=list)
    super_class: Optional[ClassName] = None
    interfaces: List[ClassName] = field(default_factory=list)
    description: str = ""
    since: Optional[str] = None
    deprecated: bool = False
    methods: List[MethodInfo] = field(default_factory=list)
    library: Any = field(default=None, compare=False, repr=False)

    @property
    def constructors(self) -> List[MethodInfo]:
        return [m for m in self.methods if m.constructor]
