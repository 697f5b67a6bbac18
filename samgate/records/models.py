"""Pydantic models for SAM header and alignment records."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RecordKind(str, Enum):
    """Kinds of lines found in a SAM file."""

    HEADER = "HeaderLine"
    REF_SEQ = "RefSeqDict"
    READ_GROUP = "ReadGroup"
    PROGRAM = "Program"
    COMMENT = "Comment"
    ALIGNMENT = "Alignment"


# Two-character line tags of the metadata kinds
LINE_TAGS = {
    "HD": RecordKind.HEADER,
    "SQ": RecordKind.REF_SEQ,
    "RG": RecordKind.READ_GROUP,
    "PG": RecordKind.PROGRAM,
    "CO": RecordKind.COMMENT,
}

# Order in which record kinds appear in a well-formed file
CANONICAL_ORDER = (
    RecordKind.HEADER,
    RecordKind.REF_SEQ,
    RecordKind.READ_GROUP,
    RecordKind.PROGRAM,
    RecordKind.ALIGNMENT,
)


class HeaderLine(BaseModel):
    """The @HD line."""

    model_config = ConfigDict(frozen=True)

    version: str = Field(default="", description="Format version (VN)")
    sort_order: str = Field(default="", description="Sort order (SO)")


class RefSeqDict(BaseModel):
    """An @SQ line. Their order defines the coordinate sort order."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Reference sequence name (SN)")
    length: int = Field(default=0, description="Reference sequence length (LN)")
    assembly_id: str = Field(default="", description="Genome assembly identifier (AS)")
    md5: str = Field(default="", description="MD5 checksum of the sequence (M5)")
    species: str = Field(default="", description="Species (SP)")
    uri: str = Field(default="", description="URI of the sequence (UR)")


class ReadGroup(BaseModel):
    """An @RG line."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default="", description="Read group identifier (ID)")
    seq_center: str = Field(default="", description="Sequencing center (CN)")
    description: str = Field(default="", description="Description (DS)")
    date: str = Field(default="", description="Date the run was produced (DT)")
    flow_order: str = Field(default="", description="Flow order (FO)")
    key_seq: str = Field(default="", description="Key sequence (KS)")
    library: str = Field(default="", description="Library (LB)")
    programs: str = Field(default="", description="Programs used (PG)")
    predicted_insert_size: str = Field(default="", description="Predicted median insert size (PI)")
    platform: str = Field(default="", description="Sequencing platform (PL)")
    platform_unit: str = Field(default="", description="Platform unit (PU)")
    sample: str = Field(default="", description="Sample (SM)")


class Program(BaseModel):
    """A @PG line."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default="", description="Program record identifier (ID)")
    name: str = Field(default="", description="Program name (PN)")
    command_line: str = Field(default="", description="Command line (CL)")
    previous_id: str = Field(default="", description="Previous @PG ID in the chain (PP)")


class Alignment(BaseModel):
    """One alignment line: the eleven mandatory columns."""

    model_config = ConfigDict(frozen=True)

    qname: str = Field(default="", description="Query template name")
    flag: int = Field(default=0, description="Bitwise flag")
    ref_name: str = Field(default="", description="Reference sequence name")
    pos: int = Field(default=0, description="1-based leftmost mapping position")
    mapq: int = Field(default=0, description="Mapping quality")
    cigar: str = Field(default="", description="CIGAR string")
    next_ref: str = Field(default="", description="Reference name of the mate/next read")
    next_pos: int = Field(default=0, description="Position of the mate/next read")
    template_len: int = Field(default=0, description="Observed template length")
    seq: str = Field(default="", description="Segment sequence")
    qual: str = Field(default="", description="Phred+33 base qualities")
