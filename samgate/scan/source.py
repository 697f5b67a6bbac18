"""Read SAM files from disk and feed them to the scan driver."""

import logging
from pathlib import Path

from samgate.errors import SourceUnavailable
from samgate.scan.driver import ParseResult, parse_lines

logger = logging.getLogger(__name__)


DEFAULT_ENCODING = "utf-8"


def parse_file(path: str | Path, encoding: str = DEFAULT_ENCODING) -> ParseResult:
    """
    Open and parse a SAM text file.

    Args:
        path: Path to the .sam file
        encoding: Text encoding of the file

    Returns:
        ParseResult; an unreadable file gives an empty result whose error is
        SourceUnavailable
    """
    path = Path(path)
    try:
        handle = path.open("r", encoding=encoding)
    except OSError as e:
        logger.info("Cannot open %s: %s", path, e)
        return ParseResult(error=SourceUnavailable(e))

    with handle:
        logger.debug("Parsing %s", path)
        return parse_lines(handle)
