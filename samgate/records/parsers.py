"""Decode tab-delimited SAM lines into typed records."""

import re
from types import MappingProxyType

from samgate.errors import GrammarViolation, MalformedLine
from samgate.records.models import (
    Alignment,
    HeaderLine,
    Program,
    ReadGroup,
    RecordKind,
    RefSeqDict,
)


# Field tag -> model attribute, per metadata line type
HEADER_FIELDS = MappingProxyType({
    "VN": "version",
    "SO": "sort_order",
})

REF_SEQ_FIELDS = MappingProxyType({
    "SN": "name",
    "LN": "length",
    "AS": "assembly_id",
    "M5": "md5",
    "SP": "species",
    "UR": "uri",
})

READ_GROUP_FIELDS = MappingProxyType({
    "ID": "id",
    "CN": "seq_center",
    "DS": "description",
    "DT": "date",
    "FO": "flow_order",
    "KS": "key_seq",
    "LB": "library",
    "PG": "programs",
    "PI": "predicted_insert_size",
    "PL": "platform",
    "PU": "platform_unit",
    "SM": "sample",
})

PROGRAM_FIELDS = MappingProxyType({
    "ID": "id",
    "PN": "name",
    "CL": "command_line",
    "PP": "previous_id",
})

ALIGNMENT_COLUMNS = (
    "qname",
    "flag",
    "ref_name",
    "pos",
    "mapq",
    "cigar",
    "next_ref",
    "next_pos",
    "template_len",
    "seq",
    "qual",
)

_INTEGER_COLUMNS = {"flag", "pos", "mapq", "next_pos", "template_len"}

INTEGER_PATTERN = re.compile(r"[-+]?[0-9]+")

# Longer values are far outside every SAM numeric range
MAX_INTEGER_DIGITS = 20


def parse_int(value: str, kind: RecordKind, field: str) -> int:
    """Convert a decimal field value, reporting bad values as grammar errors."""
    if not INTEGER_PATTERN.fullmatch(value):
        raise GrammarViolation(kind, f"{field} must be an integer, got '{value}'")
    digits = len(value.lstrip("+-"))
    if digits > MAX_INTEGER_DIGITS:
        raise GrammarViolation(kind, f"{field} value with {digits} digits out of range")
    return int(value)


def split_tagged_fields(line: str, known: MappingProxyType) -> dict[str, str]:
    """
    Collect the known KEY:VALUE fields of a metadata line.

    The leading tag field (e.g. "@SQ") is skipped. Fields without a colon and
    keys missing from `known` are ignored. When a key repeats, the last value
    wins.

    Args:
        line: Tab-delimited metadata line
        known: Mapping of two-character key to model attribute

    Returns:
        dict of model attribute -> raw string value
    """
    values: dict[str, str] = {}
    for field in line.split("\t")[1:]:
        key, sep, value = field.partition(":")
        if not sep:
            continue
        attr = known.get(key)
        if attr is not None:
            values[attr] = value
    return values


def parse_header(line: str) -> HeaderLine:
    """Parse an @HD line."""
    return HeaderLine(**split_tagged_fields(line, HEADER_FIELDS))


def parse_ref_seq(line: str) -> RefSeqDict:
    """Parse an @SQ line."""
    values: dict = split_tagged_fields(line, REF_SEQ_FIELDS)
    if "length" in values:
        values["length"] = parse_int(values["length"], RecordKind.REF_SEQ, "LN")
    return RefSeqDict(**values)


def parse_read_group(line: str) -> ReadGroup:
    """Parse an @RG line."""
    return ReadGroup(**split_tagged_fields(line, READ_GROUP_FIELDS))


def parse_program(line: str) -> Program:
    """Parse a @PG line."""
    return Program(**split_tagged_fields(line, PROGRAM_FIELDS))


def parse_alignment(line: str) -> Alignment:
    """
    Parse an alignment line from its first eleven columns.

    Optional TAG:TYPE:VALUE columns after the eleventh are not decoded.

    Raises:
        MalformedLine: fewer than eleven tab-separated fields
        GrammarViolation: a numeric column is not an integer
    """
    fields = line.split("\t")
    if len(fields) < len(ALIGNMENT_COLUMNS):
        raise MalformedLine(
            RecordKind.ALIGNMENT,
            f"expected at least {len(ALIGNMENT_COLUMNS)} tab-separated fields, "
            f"found {len(fields)}",
        )

    values: dict = {}
    for column, value in zip(ALIGNMENT_COLUMNS, fields):
        if column in _INTEGER_COLUMNS:
            value = parse_int(value, RecordKind.ALIGNMENT, column)
        values[column] = value
    return Alignment(**values)
