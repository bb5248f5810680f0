#!/usr/bin/env python3
"""
Conversion of Javadoc description HTML to Markdown.

Javadoc descriptions use a small subset of HTML. This module walks the
BeautifulSoup tree and emits the equivalent Markdown so that descriptions can
be shown in plain-text clients.
"""

import re
from typing import List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

INLINE_MARKERS = {
    'b': '**',
    'strong': '**',
    'i': '*',
    'em': '*',
}
CODE_TAGS = ('code', 'tt')
BLOCK_TAGS = ('p', 'div', 'dl', 'dd', 'dt', 'blockquote', 'table', 'tr')


def convert_description(html: Optional[str], base_url: Optional[str] = None) -> str:
    """
    Convert a Javadoc HTML description to Markdown.

    Args:
        html: The description HTML
        base_url: URL of the page the description belongs to, used to
            resolve relative links, if known

    Returns:
        The Markdown text, or an empty string if there is no description
    """
    if not html or not html.strip():
        return ""

    soup = BeautifulSoup(html, 'html.parser')
    code_blocks: List[str] = []
    markdown = _convert_children(soup, base_url, code_blocks)

    # Tidy whitespace everywhere except inside <pre> blocks
    markdown = re.sub(r'[ \t]*\n[ \t]*', '\n', markdown)
    markdown = re.sub(r'[ \t]{2,}', ' ', markdown)
    markdown = re.sub(r'\n{3,}', '\n\n', markdown)

    for index, block in enumerate(code_blocks):
        markdown = markdown.replace(_placeholder(index), block)

    return markdown.strip()


def _placeholder(index: int) -> str:
    return f"\x00{index}\x00"


def _convert_children(element: Tag, base_url: Optional[str], code_blocks: List[str]) -> str:
    return "".join(_convert_node(child, base_url, code_blocks) for child in element.children)


def _convert_node(node, base_url: Optional[str], code_blocks: List[str]) -> str:
    if isinstance(node, Comment):
        return ""
    if isinstance(node, NavigableString):
        return re.sub(r'\s+', ' ', str(node))
    if not isinstance(node, Tag):
        return ""

    name = node.name

    if name == 'pre':
        code_blocks.append("```\n" + node.get_text().strip('\n') + "\n```")
        return f"\n\n{_placeholder(len(code_blocks) - 1)}\n\n"

    if name == 'br':
        return "\n"

    if name in CODE_TAGS:
        text = re.sub(r'\s+', ' ', node.get_text()).strip()
        return f"`{text}`" if text else ""

    inner = _convert_children(node, base_url, code_blocks)

    if name in INLINE_MARKERS:
        text = inner.strip()
        if not text:
            return ""
        marker = INLINE_MARKERS[name]
        return f"{marker}{text}{marker}"

    if name == 'a':
        text = inner.strip()
        href = node.get('href')
        if not href:
            return text
        if base_url:
            href = urljoin(base_url, href)
        return f"[{text}]({href})" if text else href

    if name == 'li':
        return f"\n- {inner.strip()}"

    if name in ('ul', 'ol'):
        return f"\n\n{inner.strip()}\n\n"

    if name in BLOCK_TAGS or re.fullmatch(r'h[1-6]', name):
        return f"\n\n{inner.strip()}\n\n"

    return inner
