"""Element tree contract consumed by the metadata compiler.

The compiler never tokenizes markup. It walks any element object exposing
``tag``, ``attrib``, ``text`` and iteration over ordered children, which is
exactly what ``xml.etree.ElementTree``, ``defusedxml.ElementTree`` and
``lxml.etree`` elements provide.
"""

from __future__ import annotations

from typing import Iterator, List, Mapping, Optional, Protocol


class Element(Protocol):
    """Minimal read-only view of a document element."""

    tag: str
    attrib: Mapping[str, str]
    text: Optional[str]

    def __iter__(self) -> Iterator["Element"]:
        ...


def children_named(element: Element, name: str) -> List[Element]:
    """Return direct children with the given tag in document order."""

    return [child for child in element if child.tag == name]


def first_child(element: Element, name: str) -> Optional[Element]:
    for child in element:
        if child.tag == name:
            return child
    return None


def find_path(element: Element, *names: str) -> List[Element]:
    """Return descendants reached by following ``names`` one level at a time."""

    current = [element]
    for name in names:
        current = [child for parent in current for child in children_named(parent, name)]
    return current


def text_of(element: Element) -> str:
    return element.text or ""


def has_attribute(element: Element, name: str) -> bool:
    return name in element.attrib


def get_attribute(element: Element, name: str, default: str = "") -> str:
    value = element.attrib.get(name)
    return default if value is None else value


def get_bool_attribute(element: Element, name: str, default: bool = False) -> bool:
    """Parse a boolean attribute, treating anything but ``true`` as false."""

    value = element.attrib.get(name)
    if value is None:
        return default
    return value.strip().lower() == "true"


__all__ = [
    "Element",
    "children_named",
    "find_path",
    "first_child",
    "get_attribute",
    "get_bool_attribute",
    "has_attribute",
    "text_of",
]
