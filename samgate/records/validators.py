"""Grammar checks for parsed SAM records.

Each validator returns None when the record is valid, otherwise the reason
for the first rule it violates. Patterns are matched against the whole value.
"""

import re

from samgate.records.models import (
    Alignment,
    HeaderLine,
    Program,
    ReadGroup,
    RefSeqDict,
)


MAX_POSITION = 2**29 - 1
MAX_FLAG = 2**16 - 1
MAX_MAPQ = 2**8 - 1

VERSION_PATTERN = re.compile(r"[0-9]+\.[0-9]+")
REF_NAME_PATTERN = re.compile(r"[!-)+-<>-~][!-~]*")
FLOW_ORDER_PATTERN = re.compile(r"\*|[ACMGRSVTWYHKDBN]+")

QNAME_PATTERN = re.compile(r"\*|[!-?A-~]{1,254}")
RNAME_PATTERN = re.compile(r"\*|[!-)+-<>-~][!-~]*")
CIGAR_PATTERN = re.compile(r"\*|([0-9]+[MIDNSHPX=])+")
RNEXT_PATTERN = re.compile(r"\*|=|[!-)+-<>-~][!-~]*")
SEQ_PATTERN = re.compile(r"\*|[A-Za-z=.]+")
QUAL_PATTERN = re.compile(r"[!-~]+")

VALID_PLATFORMS = frozenset({
    "CAPILLARY",
    "LS454",
    "ILLUMINA",
    "SOLID",
    "HELICOS",
    "IONTORRENT",
    "PACBIO",
})

# Alignment columns in the order they are checked.
# Each entry: (attribute, pattern, (low, high) range)
ALIGNMENT_RULES = (
    ("qname", QNAME_PATTERN, None),
    ("flag", None, (0, MAX_FLAG)),
    ("ref_name", RNAME_PATTERN, None),
    ("pos", None, (0, MAX_POSITION)),
    ("mapq", None, (0, MAX_MAPQ)),
    ("cigar", CIGAR_PATTERN, None),
    ("next_ref", RNEXT_PATTERN, None),
    ("next_pos", None, (0, MAX_POSITION)),
    ("template_len", None, (-MAX_POSITION, MAX_POSITION)),
    ("seq", SEQ_PATTERN, None),
    ("qual", QUAL_PATTERN, None),
)


def _out_of_range(field: str, value: int, low: int, high: int) -> str | None:
    if low <= value <= high:
        return None
    return f"{field} {value} out of range [{low}, {high}]"


def validate_header(header: HeaderLine) -> str | None:
    if not VERSION_PATTERN.fullmatch(header.version):
        return f"invalid version '{header.version}' (expected <major>.<minor>)"
    return None


def validate_ref_seq(ref_seq: RefSeqDict) -> str | None:
    if not ref_seq.name:
        return "reference sequence name (SN) is required"
    if not REF_NAME_PATTERN.fullmatch(ref_seq.name):
        return f"invalid reference sequence name '{ref_seq.name}'"
    return _out_of_range("length", ref_seq.length, 1, MAX_POSITION)


def validate_read_group(read_group: ReadGroup) -> str | None:
    if not read_group.id:
        return "read group ID is required"
    if read_group.flow_order and not FLOW_ORDER_PATTERN.fullmatch(read_group.flow_order):
        return f"invalid flow order '{read_group.flow_order}'"
    if read_group.platform and read_group.platform not in VALID_PLATFORMS:
        return (
            f"invalid platform '{read_group.platform}' "
            f"(expected one of {', '.join(sorted(VALID_PLATFORMS))})"
        )
    return None


def validate_program(program: Program) -> str | None:
    # PP is a soft reference to another @PG ID and is not checked here
    if not program.id:
        return "program ID is required"
    return None


def validate_alignment(alignment: Alignment) -> str | None:
    """Check the eleven columns in file order and report the first bad one."""
    for field, pattern, bounds in ALIGNMENT_RULES:
        value = getattr(alignment, field)
        if pattern is not None and not pattern.fullmatch(value):
            return f"invalid {field} '{value}'"
        if bounds is not None:
            reason = _out_of_range(field, value, *bounds)
            if reason:
                return reason
    return None
