"""Intermediate XML document tree for JUnit reports."""

import re
import xml.etree.ElementTree as ET
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

AttributeValue = str | int | float

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")
_XML_INVALID = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def xml_safe(value: AttributeValue) -> str:
    """Return value as text without colour codes or characters XML 1.0 forbids."""
    return _XML_INVALID.sub("", _ANSI_ESCAPE.sub("", str(value)))


@dataclass(frozen=True, kw_only=True)
class XmlNode:
    """Element with attributes, ordered children and optional text.

    The tree is independent of any serialization library. Attribute values
    keep their Python types until serialization.
    """

    tag: str
    attributes: Mapping[str, AttributeValue] = field(default_factory=dict)
    children: Sequence["XmlNode"] = field(default_factory=list)
    text: str | None = None

    def find_all(self, tag: str) -> Sequence["XmlNode"]:
        """Return direct children with the given tag, in order."""
        return [child for child in self.children if child.tag == tag]

    def to_element(self) -> ET.Element:
        """Convert the tree to an ElementTree element."""
        element = ET.Element(
            self.tag, {key: xml_safe(value) for key, value in self.attributes.items()}
        )
        if self.text is not None:
            element.text = xml_safe(self.text)
        for child in self.children:
            element.append(child.to_element())
        return element

    def to_mapping(self) -> dict[str, Any]:
        """Convert the tree to the attribute-prefixed mapping form.

        Attributes become ``@``-prefixed keys, children are grouped by tag
        into lists and text is stored under ``#text``. The root tag is the
        single top-level key.
        """
        return {self.tag: self._mapping_body()}

    def _mapping_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {f"@{k}": v for k, v in self.attributes.items()}
        for child in self.children:
            body.setdefault(child.tag, []).append(child._mapping_body())
        if self.text is not None:
            body["#text"] = self.text
        return body
