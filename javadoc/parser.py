#!/usr/bin/env python3
"""
Parsing of the per-class XML documents stored in Javadoc ZIP files.

Provides ClassInfoXmlParser, which turns a parsed class document into a
ClassInfo object.
"""

from typing import List, Optional

from lxml import etree

from .class_info import ClassInfo, ClassName, MethodInfo, ParameterInfo
from .errors import ClassInfoFormatError
from .html_to_markdown import convert_description


class ClassInfoXmlParser:
    """Parser for the XML document describing a single class."""

    def __init__(self, document, library=None):
        """
        Args:
            document: An lxml ElementTree or root element of the class document
            library: The LibraryZipFile the document was read from
        """
        if hasattr(document, 'getroot'):
            document = document.getroot()
        self.root = document
        self.library = library
        self._page_url = None

    def parse(self) -> ClassInfo:
        """
        Build a ClassInfo from the document.

        Returns:
            The parsed class documentation

        Raises:
            ClassInfoFormatError: If the document is not a class document
        """
        root = self.root
        if root is None or root.tag != 'class':
            tag = None if root is None else root.tag
            raise ClassInfoFormatError(f"Expected a <class> root element, got <{tag}>")

        full_name = _attribute(root, 'name')
        if full_name is None:
            raise ClassInfoFormatError("<class> element has no name attribute")
        name = ClassName(full_name)
        # Description links are relative to the class's own page
        self._page_url = self.library.url(name) if self.library is not None else None

        super_class = _attribute(root, 'extends')
        methods = []
        for element in root:
            if element.tag == 'constructor':
                methods.append(self._parse_method(element, name.simple, constructor=True))
            elif element.tag == 'method':
                method_name = _attribute(element, 'name')
                if method_name is None:
                    raise ClassInfoFormatError(f"<method> element in {full_name} has no name attribute")
                methods.append(self._parse_method(element, method_name, constructor=False))

        return ClassInfo(
            name=name,
            modifiers=_split(root, 'modifiers'),
            super_class=ClassName(super_class) if super_class else None,
            interfaces=[ClassName(i) for i in _split(root, 'implements')],
            description=self._parse_description(root),
            since=_attribute(root, 'since'),
            deprecated=_flag(root, 'deprecated'),
            methods=methods,
            library=self.library,
        )

    def _parse_method(self, element, name: str, constructor: bool) -> MethodInfo:
        parameters = []
        for parameter in element.findall('parameter'):
            parameters.append(ParameterInfo(
                type=_attribute(parameter, 'type') or "",
                name=_attribute(parameter, 'name') or "",
            ))

        return MethodInfo(
            name=name,
            modifiers=_split(element, 'modifiers'),
            parameters=parameters,
            return_type=None if constructor else _attribute(element, 'returns'),
            description=self._parse_description(element),
            since=_attribute(element, 'since'),
            deprecated=_flag(element, 'deprecated'),
            constructor=constructor,
        )

    def _parse_description(self, element) -> str:
        description = element.find('description')
        if description is None:
            return ""

        # The HTML is either escaped text or inline child markup
        html = description.text or ""
        for child in description:
            html += etree.tostring(child, encoding='unicode', with_tail=True)

        return convert_description(html, self._page_url)


def _attribute(element, name: str) -> Optional[str]:
    value = element.get(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _split(element, name: str) -> List[str]:
    value = _attribute(element, name)
    return value.split() if value else []


def _flag(element, name: str) -> bool:
    value = _attribute(element, name)
    return value is not None and value.lower() == 'true'
