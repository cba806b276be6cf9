"""
Markup element helpers.

Fragments are built as lxml elements; plain fallback text travels as str
until it is attached to a parent or serialized.
"""

import html
from typing import Optional, Union

from lxml import etree

Fragment = Union[etree._Element, str]


def element(tag: str, text: Optional[str] = None, **attrs: str) -> etree._Element:
    """
    Create an element with optional text and attributes.

    Attribute names use a trailing underscore for Python keywords (class_ -> class).
    """
    el = etree.Element(tag)
    for name, value in attrs.items():
        el.set(name.rstrip("_"), value)
    if text is not None:
        el.text = text
    return el


def has_class(el: etree._Element, css_class: str) -> bool:
    return css_class in (el.get("class") or "").split()


def add_class(el: etree._Element, css_class: str) -> etree._Element:
    """Append a CSS class to an element, keeping existing classes."""
    classes = (el.get("class") or "").split()
    if css_class not in classes:
        classes.append(css_class)
    el.set("class", " ".join(classes))
    return el


def append_text(parent: etree._Element, text: str) -> None:
    """Append text after the last child (or as leading text when there is none)."""
    if len(parent):
        last = parent[-1]
        last.tail = (last.tail or "") + text
    else:
        parent.text = (parent.text or "") + text


def append_fragment(parent: etree._Element, fragment: Fragment) -> None:
    """Append an element or a plain-text fragment to a parent element."""
    if isinstance(fragment, str):
        append_text(parent, fragment)
    else:
        parent.append(fragment)


def to_html(fragment: Fragment) -> str:
    """Serialize a fragment; plain text is escaped."""
    if isinstance(fragment, str):
        return html.escape(fragment, quote=False)
    return etree.tostring(fragment, encoding="unicode")


def text_content(fragment: Fragment) -> str:
    """Visible text of a fragment."""
    if isinstance(fragment, str):
        return fragment
    return "".join(fragment.itertext())
