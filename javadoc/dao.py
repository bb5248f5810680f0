#!/usr/bin/env python3
"""
Lookup of class documentation across a directory of Javadoc ZIP files.
"""

from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .class_info import ClassInfo, ClassName
from .errors import LibraryZipError, MultipleClassesFoundError
from .library_zip import LibraryZipFile


class JavadocDao:
    """Indexes the classes of every Javadoc ZIP file in a directory."""

    def __init__(self, directory: Path, logger):
        """
        Load every "*.zip" file in the directory.

        ZIP files that cannot be read are logged and skipped.

        Args:
            directory: Directory containing the Javadoc ZIP files
            logger: Logger instance
        """
        self.directory = Path(directory)
        self.logger = logger
        self._libraries: List[LibraryZipFile] = []
        self._by_full_name: Dict[str, List[Tuple[ClassName, LibraryZipFile]]] = defaultdict(list)
        self._by_simple_name: Dict[str, List[Tuple[ClassName, LibraryZipFile]]] = defaultdict(list)

        if not self.directory.is_dir():
            logger.warning("Javadoc directory not found", extra={'extra_data': {'path': str(self.directory)}})
            return

        for zip_path in sorted(self.directory.glob("*.zip")):
            try:
                self.add(zip_path)
            except LibraryZipError:
                logger.error(
                    "Could not load Javadoc ZIP file", exc_info=True,
                    extra={'extra_data': {'path': str(zip_path)}}
                )

    def add(self, zip_path: Path) -> LibraryZipFile:
        """
        Load a Javadoc ZIP file and index its classes.

        Args:
            zip_path: Path to the ZIP file

        Returns:
            The loaded library

        Raises:
            LibraryZipError: If the ZIP file cannot be read
        """
        library = LibraryZipFile(zip_path)
        names = library.class_names()

        self._libraries.append(library)
        for class_name in names:
            entry = (class_name, library)
            self._by_full_name[class_name.full.lower()].append(entry)
            self._by_simple_name[class_name.simple.lower()].append(entry)

        self.logger.info(
            "Loaded Javadoc ZIP file",
            extra={'extra_data': {
                'path': str(library.path),
                'library': library.name,
                'version': library.version,
                'class_count': len(names),
            }}
        )
        return library

    @property
    def libraries(self) -> List[LibraryZipFile]:
        return list(self._libraries)

    def find_library(self, name: str) -> Optional[LibraryZipFile]:
        """Find a library by its name or by its ZIP file name (case-insensitive)."""
        query = name.lower()
        for library in self._libraries:
            if library.name is not None and library.name.lower() == query:
                return library
        for library in self._libraries:
            if library.path.stem.lower() == query:
                return library
        return None

    def get_class_info(self, name: str) -> Optional[ClassInfo]:
        """
        Get the documentation of a class.

        Args:
            name: Fully-qualified or simple class name (case-insensitive)

        Returns:
            The class documentation, or None if no class matches

        Raises:
            MultipleClassesFoundError: If the name matches several classes
            LibraryZipError: If the matching ZIP entry cannot be read
        """
        query = name.strip()
        matches = self._by_full_name.get(query.lower()) or self._by_simple_name.get(query.lower()) or []
        if not matches:
            return None

        if len(matches) > 1:
            exact = [m for m in matches if query in (m[0].full, m[0].simple)]
            if len(exact) != 1:
                raise MultipleClassesFoundError(sorted({m[0] for m in matches}))
            matches = exact

        class_name, library = matches[0]
        return library.get_class_info(class_name.full)
