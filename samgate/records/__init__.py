"""Typed SAM records.

Parsers live in `samgate.records.parsers` and grammar checks in
`samgate.records.validators`.
"""

from samgate.records.models import (
    CANONICAL_ORDER,
    LINE_TAGS,
    Alignment,
    HeaderLine,
    Program,
    ReadGroup,
    RecordKind,
    RefSeqDict,
)

__all__ = [
    "Alignment",
    "CANONICAL_ORDER",
    "HeaderLine",
    "LINE_TAGS",
    "Program",
    "ReadGroup",
    "RecordKind",
    "RefSeqDict",
]
