#!/usr/bin/env python3
"""
Access to ZIP files containing Javadoc information.

A Javadoc ZIP file holds an optional "info.xml" entry describing the library
(name, version, URLs) and one "<fully.qualified.ClassName>.xml" entry per
class. Every read opens the ZIP file on its own and closes it again, so a
LibraryZipFile can be shared freely once constructed.
"""

import zipfile
import zlib
from pathlib import Path
from typing import List, Optional, Union

from lxml import etree

from .class_info import ClassInfo, ClassName
from .errors import ClassInfoFormatError, LibraryZipError
from .parser import ClassInfoXmlParser

EXTENSION = ".xml"
INFO_FILE_NAME = "info" + EXTENSION

# Damaged compressed data surfaces as zlib.error or EOFError rather than OSError
READ_ERRORS = (OSError, EOFError, zipfile.BadZipFile, zlib.error)


def _xml_parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True)


def _is_class_entry(name: str) -> bool:
    """Only top-level XML entries other than info.xml describe classes."""
    if '/' in name or not name.endswith(EXTENSION):
        return False
    return name != INFO_FILE_NAME


class ClassNameIterator:
    """
    Single-pass iterator over the class names in a Javadoc ZIP file.

    Owns the open ZIP file and closes it when iteration is exhausted, when
    close() is called, or when used as a context manager and the block exits.
    """

    def __init__(self, zip_file: zipfile.ZipFile):
        self._zip_file = zip_file
        self._names = iter(zip_file.namelist())
        self.closed = False

    def __iter__(self) -> "ClassNameIterator":
        return self

    def __next__(self) -> ClassName:
        if not self.closed:
            for name in self._names:
                if _is_class_entry(name):
                    return ClassName(name[:-len(EXTENSION)])
            self.close()
        raise StopIteration

    def close(self):
        """Release the ZIP file. Safe to call more than once."""
        if not self.closed:
            self.closed = True
            self._zip_file.close()

    def __enter__(self) -> "ClassNameIterator":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class LibraryZipFile:
    """A ZIP file generated by the Javadoc doclet, containing a library's Javadoc information."""

    def __init__(self, path: Union[str, Path]):
        """
        Open the ZIP file and read the library's metadata from "info.xml".

        Args:
            path: Path to the ZIP file

        Raises:
            LibraryZipError: If the file cannot be opened or "info.xml" is
                present but cannot be read or parsed
        """
        try:
            self._path = Path(path).expanduser().resolve(strict=True)
        except OSError as e:
            raise LibraryZipError(f"Cannot open Javadoc ZIP file {path}: {e}") from e

        self._base_url = self._name = self._version = self._project_url = None

        with self._open() as zip_file:
            try:
                zip_file.getinfo(INFO_FILE_NAME)
            except KeyError:
                return

            try:
                with zip_file.open(INFO_FILE_NAME) as f:
                    document = etree.parse(f, _xml_parser())
            except etree.XMLSyntaxError as e:
                raise LibraryZipError(f"Malformed {INFO_FILE_NAME} in {self._path}: {e}") from e
            except READ_ERRORS as e:
                raise LibraryZipError(f"Cannot read {INFO_FILE_NAME} from {self._path}: {e}") from e

        info = document.getroot()
        if info.tag != 'info':
            return

        self._name = info.get('name') or None
        self._version = info.get('version') or None
        self._project_url = info.get('projectUrl') or None

        base_url = info.get('baseUrl')
        if base_url:
            self._base_url = base_url if base_url.endswith('/') else base_url + '/'

    def _open(self) -> zipfile.ZipFile:
        try:
            return zipfile.ZipFile(self._path)
        except (OSError, zipfile.BadZipFile) as e:
            raise LibraryZipError(f"Cannot open Javadoc ZIP file {self._path}: {e}") from e

    def frame_url(self, class_name: Union[str, ClassName, ClassInfo]) -> Optional[str]:
        """
        Get the URL to a class's Javadoc page (with frames).

        Args:
            class_name: The class, or its fully-qualified name

        Returns:
            The URL, or None if the library has no base URL
        """
        if self._base_url is None:
            return None
        return f"{self._base_url}index.html?{_page_path(class_name)}"

    def url(self, class_name: Union[str, ClassName, ClassInfo]) -> Optional[str]:
        """
        Get the URL to a class's Javadoc page (without frames).

        Args:
            class_name: The class, or its fully-qualified name

        Returns:
            The URL, or None if the library has no base URL
        """
        if self._base_url is None:
            return None
        return f"{self._base_url}{_page_path(class_name)}"

    def list_classes(self) -> ClassNameIterator:
        """
        Enumerate the classes in the library.

        The ZIP file stays open until the returned iterator is exhausted or
        closed. Use it in a with block when iteration may stop early.

        Returns:
            An iterator of the fully-qualified names of the classes

        Raises:
            LibraryZipError: If the ZIP file cannot be opened
        """
        return ClassNameIterator(self._open())

    def class_names(self) -> List[ClassName]:
        """Get all class names as a list."""
        with self.list_classes() as classes:
            return list(classes)

    def get_class_info(self, full_name: str) -> Optional[ClassInfo]:
        """
        Get the parsed documentation of a class.

        Args:
            full_name: The fully-qualified class name (e.g. "java.lang.String")

        Returns:
            The class documentation, or None if the class is not in the library

        Raises:
            LibraryZipError: If the ZIP file cannot be read
            ClassInfoFormatError: If the class's entry cannot be parsed
        """
        entry = full_name + EXTENSION
        if not _is_class_entry(entry):
            return None

        with self._open() as zip_file:
            try:
                zip_file.getinfo(entry)
            except KeyError:
                return None

            try:
                with zip_file.open(entry) as f:
                    document = etree.parse(f, _xml_parser())
            except etree.XMLSyntaxError as e:
                raise ClassInfoFormatError(f"Malformed class document {entry} in {self._path}: {e}") from e
            except READ_ERRORS as e:
                raise LibraryZipError(f"Cannot read {entry} from {self._path}: {e}") from e

        return ClassInfoXmlParser(document, self).parse()

    @property
    def base_url(self) -> Optional[str]:
        """The base URL of the library's Javadocs (always ends with "/")."""
        return self._base_url

    @property
    def name(self) -> Optional[str]:
        """The library's name (e.g. "jsoup")."""
        return self._name

    @property
    def version(self) -> Optional[str]:
        """The library's version (e.g. "1.8.1")."""
        return self._version

    @property
    def project_url(self) -> Optional[str]:
        """The URL of the library's website."""
        return self._project_url

    @property
    def path(self) -> Path:
        return self._path

    def __eq__(self, other) -> bool:
        if not isinstance(other, LibraryZipFile):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)

    def __repr__(self) -> str:
        return f"LibraryZipFile({str(self._path)!r})"


def _page_path(class_name: Union[str, ClassName, ClassInfo]) -> str:
    if isinstance(class_name, ClassInfo):
        class_name = class_name.name
    if isinstance(class_name, ClassName):
        class_name = class_name.full
    return class_name.replace('.', '/') + ".html"
