"""Single-pass scan over SAM lines: classify, parse, validate, dedupe, accumulate."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

from samgate.errors import (
    DuplicateIdentifier,
    GrammarViolation,
    SamError,
    SourceUnavailable,
)
from samgate.records.models import (
    CANONICAL_ORDER,
    Alignment,
    HeaderLine,
    Program,
    ReadGroup,
    RecordKind,
    RefSeqDict,
)
from samgate.records.parsers import (
    parse_alignment,
    parse_header,
    parse_program,
    parse_read_group,
    parse_ref_seq,
)
from samgate.records.validators import (
    validate_alignment,
    validate_header,
    validate_program,
    validate_read_group,
    validate_ref_seq,
)
from samgate.scan.classifier import classify_line
from samgate.scan.tracker import UniquenessTracker

logger = logging.getLogger(__name__)


# Record kind -> (parser, validator)
RECORD_HANDLERS = MappingProxyType({
    RecordKind.HEADER: (parse_header, validate_header),
    RecordKind.REF_SEQ: (parse_ref_seq, validate_ref_seq),
    RecordKind.READ_GROUP: (parse_read_group, validate_read_group),
    RecordKind.PROGRAM: (parse_program, validate_program),
    RecordKind.ALIGNMENT: (parse_alignment, validate_alignment),
})


class ParseResult(BaseModel):
    """Everything a scan produced, plus the error that stopped it (if any)."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    header: HeaderLine | None = Field(default=None, description="The @HD line, if any")
    ref_seqs: list[RefSeqDict] = Field(default_factory=list, description="@SQ lines in file order")
    read_groups: list[ReadGroup] = Field(default_factory=list, description="@RG lines in file order")
    programs: list[Program] = Field(default_factory=list, description="@PG lines in file order")
    alignments: list[Alignment] = Field(default_factory=list, description="Alignments in file order")
    error: SamError | None = Field(default=None, description="Error that aborted the scan")
    lines_read: int = Field(default=0, description="Number of lines consumed")

    @property
    def ok(self) -> bool:
        return self.error is None

    def astuple(
        self,
    ) -> tuple[
        HeaderLine | None,
        list[RefSeqDict],
        list[ReadGroup],
        list[Program],
        list[Alignment],
        SamError | None,
    ]:
        """Return (header, ref_seqs, read_groups, programs, alignments, error)."""
        return (
            self.header,
            self.ref_seqs,
            self.read_groups,
            self.programs,
            self.alignments,
            self.error,
        )

    def raise_for_error(self) -> "ParseResult":
        """Raise the scan error, if any; otherwise return self."""
        if self.error is not None:
            raise self.error
        return self

    def counts(self) -> dict[str, int]:
        return {
            "header": 0 if self.header is None else 1,
            "ref_seqs": len(self.ref_seqs),
            "read_groups": len(self.read_groups),
            "programs": len(self.programs),
            "alignments": len(self.alignments),
        }


class _Accumulator:
    """Collections owned by one scan.

    `finish` hands them to a ParseResult. On abort, the collections of record
    kinds that come after the failing kind in a well-formed file are returned
    empty.
    """

    def __init__(self) -> None:
        self.header: HeaderLine | None = None
        self.records: dict[RecordKind, list] = {
            RecordKind.REF_SEQ: [],
            RecordKind.READ_GROUP: [],
            RecordKind.PROGRAM: [],
            RecordKind.ALIGNMENT: [],
        }
        self.tracker = UniquenessTracker()

    def _identifier(self, kind: RecordKind, record) -> str:
        if kind == RecordKind.REF_SEQ:
            return record.name
        return record.id

    def add(self, kind: RecordKind, record) -> None:
        """Store a validated record, rejecting duplicate identifiers."""
        if kind == RecordKind.HEADER:
            if self.header is not None:
                raise DuplicateIdentifier(kind, "@HD")
            self.header = record
            return
        if kind in (RecordKind.REF_SEQ, RecordKind.READ_GROUP, RecordKind.PROGRAM):
            identifier = self._identifier(kind, record)
            if not self.tracker.claim(kind, identifier):
                raise DuplicateIdentifier(kind, identifier)
        self.records[kind].append(record)

    def finish(self, error: SamError | None, lines_read: int) -> ParseResult:
        kept = set(CANONICAL_ORDER)
        if error is not None and error.record_kind in CANONICAL_ORDER:
            cutoff = CANONICAL_ORDER.index(error.record_kind)
            kept = set(CANONICAL_ORDER[: cutoff + 1])

        def collection(kind: RecordKind) -> list:
            return list(self.records[kind]) if kind in kept else []

        return ParseResult(
            header=self.header if RecordKind.HEADER in kept else None,
            ref_seqs=collection(RecordKind.REF_SEQ),
            read_groups=collection(RecordKind.READ_GROUP),
            programs=collection(RecordKind.PROGRAM),
            alignments=collection(RecordKind.ALIGNMENT),
            error=error,
            lines_read=lines_read,
        )


def process_line(line: str, accumulator: _Accumulator) -> None:
    """Run one line through classify -> parse -> validate -> dedupe -> store.

    Raises:
        SamError: the line is malformed, invalid or a duplicate
    """
    kind = classify_line(line)
    if kind == RecordKind.COMMENT:
        return
    parse, validate = RECORD_HANDLERS[kind]
    record = parse(line)
    reason = validate(record)
    if reason is not None:
        raise GrammarViolation(kind, reason)
    accumulator.add(kind, record)


def parse_lines(lines: Iterable[str]) -> ParseResult:
    """
    Parse SAM file contents.

    Lines are consumed in order until the input is exhausted or the first
    error. Trailing "\\n" / "\\r\\n" terminators are stripped. Errors are
    returned in `ParseResult.error`, never raised.

    Args:
        lines: Iterable yielding the lines of one SAM file

    Returns:
        ParseResult with the header, the four record collections and the error
        (None on success)
    """
    accumulator = _Accumulator()
    error: SamError | None = None
    line_number = 0
    iterator = iter(lines)

    logger.debug("Starting SAM scan")
    while True:
        try:
            raw = next(iterator)
        except StopIteration:
            break
        except (OSError, UnicodeDecodeError) as exc:
            error = SourceUnavailable(exc, line_number + 1)
            break

        line_number += 1
        try:
            process_line(raw.rstrip("\r\n"), accumulator)
        except SamError as exc:
            error = exc.at_line(line_number)
            break

    result = accumulator.finish(error, line_number)
    if error is None:
        logger.debug("SAM scan completed after %d lines: %s", line_number, result.counts())
    else:
        logger.info("SAM scan aborted: %s", error)
    return result
