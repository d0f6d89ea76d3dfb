"""Serialize JUnit documents and write them to disk."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from run_report.junit.document import XmlNode

log = logging.getLogger(__name__)


def serialize_report(document: XmlNode) -> str:
    """Render a document tree as indented XML text with a declaration."""
    element = document.to_element()
    ET.indent(element)
    return ET.tostring(element, encoding="utf-8", xml_declaration=True).decode("utf-8")


def write_report(document: XmlNode, path: Path) -> None:
    """Write a document to ``path`` as UTF-8, replacing any existing file.

    The document is fully serialized before the file is opened. Filesystem
    errors propagate to the caller.
    """
    content = serialize_report(document)
    path.write_text(content, encoding="utf-8")
    log.info("Wrote JUnit report to %s", path)
