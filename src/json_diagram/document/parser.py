"""DocumentParser: JSON text to a typed CST.

Accepts the relaxed JSON dialect editors commonly allow: ``//`` line comments,
``/* */`` block comments and trailing commas before ``]`` or ``}``. These are
blanked out (replaced by spaces, newlines kept) before the text reaches
``json.loads``, so the line and column reported in ``DocumentParseError``
still point into the original text.

Object members are collected through ``object_pairs_hook`` so key order and
duplicate keys survive into the CST.
"""

from __future__ import annotations

import json
from typing import Any

from json_diagram.document.nodes import (
    ArrayNode,
    DocumentNode,
    ObjectNode,
    PropertyNode,
    ScalarNode,
)

__all__ = [
    "NESTING_TOO_DEEP",
    "DocumentParseError",
    "DocumentParser",
    "strip_comments",
    "to_document",
]

NESTING_TOO_DEEP = "Document nesting is too deep"


class DocumentParseError(ValueError):
    """Raised when document text is not valid (relaxed) JSON.

    Attributes:
        line:   1-based line of the failure, 0 when unknown.
        column: 1-based column of the failure, 0 when unknown.
    """

    def __init__(self, message: str, line: int = 0, column: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line:
            return f"{self.message} (line {self.line}, column {self.column})"
        return self.message


def strip_comments(text: str) -> str:
    """Blank out comments and trailing commas, preserving offsets.

    String literals are copied through untouched, including escaped quotes.
    An unterminated block comment is blanked to the end of the text; the
    resulting document is then rejected (or accepted) by the JSON decoder.
    """
    out = list(text)
    n = len(text)
    i = 0
    in_string = False
    pending_comma: int | None = None

    while i < n:
        ch = text[i]
        if in_string:
            if ch == "\\":
                i += 2
                continue
            if ch == '"':
                in_string = False
            i += 1
            continue

        if ch == "/" and i + 1 < n and text[i + 1] in "/*":
            end = text.find("\n", i) if text[i + 1] == "/" else text.find("*/", i + 2)
            if end == -1:
                end = n
            elif text[i + 1] == "*":
                end += 2
            for j in range(i, end):
                if out[j] != "\n":
                    out[j] = " "
            i = end
            continue

        if not ch.isspace():
            if ch in "]}" and pending_comma is not None:
                out[pending_comma] = " "
            pending_comma = i if ch == "," else None
            if ch == '"':
                in_string = True
        i += 1

    return "".join(out)


def to_document(value: Any) -> DocumentNode:
    """Wrap an already-decoded Python JSON value as a CST.

    Raises:
        TypeError: If ``value`` contains a non-JSON type.
    """
    if isinstance(value, (ObjectNode, ArrayNode, ScalarNode)):
        return value
    if isinstance(value, dict):
        return ObjectNode(
            [PropertyNode(str(k), to_document(v)) for k, v in value.items()]
        )
    if isinstance(value, (list, tuple)):
        return ArrayNode([to_document(item) for item in value])
    if value is None or isinstance(value, (str, int, float, bool)):
        return ScalarNode(value)
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def _object_hook(pairs: list[tuple[str, Any]]) -> ObjectNode:
    # Nested objects arrive already converted; lists and scalars do not.
    return ObjectNode([PropertyNode(key, to_document(value)) for key, value in pairs])


class DocumentParser:
    """Parses relaxed JSON text into a ``DocumentNode`` tree.

    Example::

        parser = DocumentParser()
        root = parser.parse('{"a": [1, 2,], // note\\n "b": null}')
        # ObjectNode([PropertyNode("a", ArrayNode(...)), PropertyNode("b", ...)])
    """

    def parse(self, text: str) -> DocumentNode:
        """Parse ``text`` into a CST.

        Args:
            text: Document text. A leading byte-order mark is ignored.

        Returns:
            The root ``DocumentNode``.

        Raises:
            DocumentParseError: If the text is empty or malformed.
        """
        cleaned = strip_comments(text.lstrip("\ufeff"))
        if not cleaned.strip():
            raise DocumentParseError("Invalid document: no content")
        try:
            decoded = json.loads(cleaned, object_pairs_hook=_object_hook)
            return to_document(decoded)
        except json.JSONDecodeError as exc:
            raise DocumentParseError(exc.msg, exc.lineno, exc.colno) from exc
        except RecursionError as exc:
            raise DocumentParseError(NESTING_TOO_DEEP) from exc
        except ValueError as exc:
            # e.g. integer literals past the int/str conversion digit limit
            raise DocumentParseError(str(exc)) from exc
