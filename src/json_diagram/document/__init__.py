"""Document subpackage: relaxed-JSON parsing into a typed CST.

Re-exports:
- DocumentParser / DocumentParseError: text -> CST
- ObjectNode, ArrayNode, PropertyNode, ScalarNode: the CST node classes
- to_document: wrap a decoded Python value as a CST
"""

from json_diagram.document.nodes import (
    ArrayNode,
    DocumentNode,
    ObjectNode,
    PropertyNode,
    ScalarNode,
)
from json_diagram.document.parser import (
    DocumentParseError,
    DocumentParser,
    strip_comments,
    to_document,
)

__all__ = [
    "ArrayNode",
    "DocumentNode",
    "DocumentParseError",
    "DocumentParser",
    "ObjectNode",
    "PropertyNode",
    "ScalarNode",
    "strip_comments",
    "to_document",
]
