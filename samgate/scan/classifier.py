"""Line classification by two-character tag."""

from samgate.records.models import LINE_TAGS, RecordKind


RECORD_MARKER = "@"


def classify_line(line: str) -> RecordKind:
    """
    Classify a newline-stripped SAM line.

    Lines starting with "@" and a known tag (HD, SQ, RG, PG, CO) are metadata.
    Anything else is treated as an alignment, including "@"-lines with an
    unknown tag. An alignment whose QNAME starts with "@HD", "@SQ" etc. is
    therefore classified as metadata.
    """
    if not line.startswith(RECORD_MARKER):
        return RecordKind.ALIGNMENT
    return LINE_TAGS.get(line[1:3], RecordKind.ALIGNMENT)
