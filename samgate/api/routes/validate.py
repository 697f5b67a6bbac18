"""Validation routes for SAM text and files."""

import asyncio
import io

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from samgate.config import Settings
from samgate.errors import DuplicateIdentifier, SourceUnavailable
from samgate.records import Alignment, HeaderLine, Program, ReadGroup, RefSeqDict
from samgate.scan import ParseResult, parse_file, parse_lines


router = APIRouter(prefix="/validate", tags=["validate"])


class ValidateTextRequest(BaseModel):
    """Request body carrying SAM text inline."""

    text: str


class ValidateFileRequest(BaseModel):
    """Request body naming a SAM file on the server."""

    path: str


class ErrorInfo(BaseModel):
    """The error that aborted a scan."""

    error_type: str
    record_kind: str | None = None
    line_number: int | None = None
    identifier: str | None = None
    message: str


class ValidateResponse(BaseModel):
    """Outcome of a scan and the records it accepted."""

    valid: bool
    message: str
    lines_read: int
    counts: dict[str, int]
    header: HeaderLine | None = None
    ref_seqs: list[RefSeqDict]
    read_groups: list[ReadGroup]
    programs: list[Program]
    alignments: list[Alignment]
    error: ErrorInfo | None = None

    @classmethod
    def from_result(cls, result: ParseResult) -> "ValidateResponse":
        error = None
        if result.error is not None:
            exc = result.error
            error = ErrorInfo(
                error_type=type(exc).__name__,
                record_kind=exc.record_kind.value if exc.record_kind else None,
                line_number=exc.line_number,
                identifier=exc.identifier if isinstance(exc, DuplicateIdentifier) else None,
                message=str(exc),
            )

        counts = result.counts()
        if result.ok:
            message = f"Valid. Read {result.lines_read} lines, {counts['alignments']} alignments."
        else:
            message = f"Invalid. {error.message}"

        return cls(
            valid=result.ok,
            message=message,
            lines_read=result.lines_read,
            counts=counts,
            header=result.header,
            ref_seqs=result.ref_seqs,
            read_groups=result.read_groups,
            programs=result.programs,
            alignments=result.alignments,
            error=error,
        )


# Settings instance (will be set from main app)
_settings: Settings | None = None


def set_settings(settings: Settings) -> None:
    """Set the settings used by this router."""
    global _settings
    _settings = settings


def get_settings() -> Settings:
    """Get the router settings."""
    if _settings is None:
        raise HTTPException(status_code=500, detail="Settings not initialized")
    return _settings


@router.post("", response_model=ValidateResponse)
async def validate_text(request: ValidateTextRequest) -> ValidateResponse:
    """
    Validate SAM text sent in the request body.

    An invalid file is not an HTTP error: the response has valid=false
    and describes the offending line.
    """
    result = await asyncio.to_thread(parse_lines, io.StringIO(request.text, newline=None))
    return ValidateResponse.from_result(result)


@router.post("/file", response_model=ValidateResponse)
async def validate_file(request: ValidateFileRequest) -> ValidateResponse:
    """Validate a SAM file readable by the server."""
    settings = get_settings()
    result = await asyncio.to_thread(parse_file, request.path, settings.encoding)

    if isinstance(result.error, SourceUnavailable):
        cause = result.error.cause
        if isinstance(cause, FileNotFoundError):
            raise HTTPException(status_code=404, detail=str(result.error))
        if isinstance(cause, PermissionError):
            raise HTTPException(status_code=403, detail=f"Permission denied: {cause}")
        if isinstance(cause, IsADirectoryError):
            raise HTTPException(status_code=400, detail=str(result.error))

    return ValidateResponse.from_result(result)
