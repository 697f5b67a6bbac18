"""samgate - syntactic validation of SAM alignment text."""

from samgate.errors import (
    DuplicateIdentifier,
    GrammarViolation,
    MalformedLine,
    SamError,
    SourceUnavailable,
)
from samgate.records import (
    Alignment,
    HeaderLine,
    Program,
    ReadGroup,
    RecordKind,
    RefSeqDict,
)
from samgate.scan import ParseResult, parse_file, parse_lines

__version__ = "0.1.0"

__all__ = [
    "Alignment",
    "DuplicateIdentifier",
    "GrammarViolation",
    "HeaderLine",
    "MalformedLine",
    "ParseResult",
    "Program",
    "ReadGroup",
    "RecordKind",
    "RefSeqDict",
    "SamError",
    "SourceUnavailable",
    "parse_file",
    "parse_lines",
]
