#!/usr/bin/env python3
"""
Exception types raised by the Javadoc library readers.
"""

from typing import List


class LibraryZipError(OSError):
    """Raised when a Javadoc ZIP file or one of its entries cannot be read."""


class ClassInfoFormatError(LibraryZipError):
    """Raised when a class entry exists but is not a valid class document."""


class MultipleClassesFoundError(LookupError):
    """Raised when a simple class name matches classes in several packages."""

    def __init__(self, classes: List):
        self.classes = classes
        names = ", ".join(c.full for c in classes)
        super().__init__(f"Multiple classes found: {names}")
