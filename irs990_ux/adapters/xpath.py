"""
XPath Extractor Adapter

Implements FieldExtractor port using lxml. Namespaces are stripped from the
parsed return so xpaths work across schema years, and each field's
alternatives are tried in order until one selects something.
"""
import logging
from pathlib import Path
from typing import Iterable, Optional

from lxml import etree

from ..core.domain import FieldSpec, MatchStatus, PathMatch
from ..core.errors import ExtractionError
from ..core.ports import FieldExtractor

logger = logging.getLogger(__name__)


def parse_return(path: Path) -> etree._ElementTree:
    """Parse a return and strip all namespaces from elements and attributes"""
    parser = etree.XMLParser(remove_blank_text=False, resolve_entities=False, no_network=True)
    tree = etree.parse(str(path), parser)
    remove_namespaces(tree.getroot())
    return tree


def remove_namespaces(root: etree._Element) -> None:
    for el in root.iter():
        if not isinstance(el.tag, str):
            # Comments and processing instructions
            continue
        el.tag = etree.QName(el).localname
        for name in list(el.attrib):
            if name.startswith("{"):
                value = el.attrib.pop(name)
                el.attrib[etree.QName(name).localname] = value
    etree.cleanup_namespaces(root)


def node_text(node) -> Optional[str]:
    """Text content of an xpath result item"""
    if isinstance(node, etree._Element):
        return "".join(node.itertext())
    return str(node)


def evaluate(tree: etree._ElementTree, xpath: str) -> PathMatch:
    """Evaluate one xpath; the first selected node wins"""
    try:
        result = tree.xpath(xpath)
    except etree.XPathError as e:
        return PathMatch(xpath, MatchStatus.INVALID, error=str(e))

    # Numbers, booleans and strings from xpath functions select no node
    if not isinstance(result, list) or not result:
        return PathMatch(xpath, MatchStatus.UNMATCHED)
    return PathMatch(xpath, MatchStatus.MATCHED, value=node_text(result[0]))


def first_match(tree: etree._ElementTree, alternatives: Iterable[str]) -> Optional[PathMatch]:
    """Try alternatives in order, return the first match or None"""
    for xpath in alternatives:
        match = evaluate(tree, xpath)
        if match.matched:
            return match
        if match.status is MatchStatus.INVALID:
            logger.debug("Invalid xpath %r: %s", xpath, match.error)
    return None


class LxmlExtractor(FieldExtractor):
    """Extracts field values from 990 XML returns"""

    def extract(self, path: Path, spec: FieldSpec) -> list[Optional[str]]:
        try:
            tree = parse_return(path)
        except (etree.XMLSyntaxError, OSError) as e:
            raise ExtractionError(path, None, e) from e

        values = []
        column = None
        try:
            for definition in spec:
                column = definition.column
                match = first_match(tree, definition.alternatives)
                values.append(match.value if match else None)
        except (etree.LxmlError, ValueError, TypeError) as e:
            raise ExtractionError(path, column, e) from e

        return values
