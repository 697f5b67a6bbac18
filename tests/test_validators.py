import pytest

from samgate.records import Alignment, HeaderLine, Program, ReadGroup, RefSeqDict
from samgate.records.validators import (
    MAX_POSITION,
    validate_alignment,
    validate_header,
    validate_program,
    validate_read_group,
    validate_ref_seq,
)


def _alignment(**overrides) -> Alignment:
    values = dict(
        qname="r001",
        flag=99,
        ref_name="chr1",
        pos=7,
        mapq=30,
        cigar="8M2I4M1D3M",
        next_ref="=",
        next_pos=37,
        template_len=39,
        seq="TTAGATAAAGGATACTG",
        qual="*",
    )
    values.update(overrides)
    return Alignment(**values)


@pytest.mark.parametrize("version", ["1.0", "1.6", "10.25"])
def test_header_accepts_major_minor_versions(version):
    assert validate_header(HeaderLine(version=version)) is None


@pytest.mark.parametrize("version", ["12x3", "1.0.1", "1.", ".1", "", "v1.0", "1,0"])
def test_header_rejects_other_versions(version):
    reason = validate_header(HeaderLine(version=version))
    assert reason is not None
    assert "version" in reason


def test_ref_seq_length_bounds():
    assert validate_ref_seq(RefSeqDict(name="chr1", length=1)) is None
    assert validate_ref_seq(RefSeqDict(name="chr1", length=MAX_POSITION)) is None
    assert "out of range" in validate_ref_seq(RefSeqDict(name="chr1", length=0))
    assert "out of range" in validate_ref_seq(RefSeqDict(name="chr1", length=MAX_POSITION + 1))


def test_ref_seq_name_grammar():
    assert validate_ref_seq(RefSeqDict(name="chrUn_KI270302v1", length=10)) is None
    assert "required" in validate_ref_seq(RefSeqDict(name="", length=10))
    assert "invalid reference sequence name" in validate_ref_seq(RefSeqDict(name="*chr1", length=10))
    assert "invalid reference sequence name" in validate_ref_seq(RefSeqDict(name="=chr1", length=10))
    assert "invalid reference sequence name" in validate_ref_seq(RefSeqDict(name="chr 1", length=10))


def test_ref_seq_name_checked_before_length():
    reason = validate_ref_seq(RefSeqDict(name="*", length=0))
    assert "name" in reason


def test_read_group_flow_order_and_platform():
    assert validate_read_group(ReadGroup(id="grp1")) is None
    assert validate_read_group(ReadGroup(id="grp1", flow_order="*", platform="ILLUMINA")) is None
    assert validate_read_group(ReadGroup(id="grp1", flow_order="TACGTACGTCTGAGCATCGATCGATGTACAGC")) is None
    assert "flow order" in validate_read_group(ReadGroup(id="grp1", flow_order="acgt"))
    assert "platform" in validate_read_group(ReadGroup(id="grp1", platform="NANOPORE"))
    assert "platform" in validate_read_group(ReadGroup(id="grp1", platform="illumina"))


def test_read_group_id_required():
    assert "ID is required" in validate_read_group(ReadGroup(platform="ILLUMINA"))


def test_program_id_required():
    assert validate_program(Program(id="bwa", previous_id="missing")) is None
    assert "ID is required" in validate_program(Program(name="bwa"))


def test_valid_alignment_passes():
    assert validate_alignment(_alignment()) is None
    assert validate_alignment(_alignment(ref_name="*", cigar="*", next_ref="*", seq="*")) is None


@pytest.mark.parametrize(
    "field,value,expected",
    [
        ("qname", "@r001", "invalid qname"),
        ("qname", "r" * 255, "invalid qname"),
        ("flag", 65536, "flag 65536 out of range"),
        ("ref_name", "=chr1", "invalid ref_name"),
        ("pos", MAX_POSITION + 1, "pos"),
        ("mapq", 256, "mapq 256 out of range"),
        ("cigar", "8M2Q", "invalid cigar"),
        ("next_ref", "*chr2", "invalid next_ref"),
        ("next_pos", -1, "next_pos -1 out of range"),
        ("template_len", -MAX_POSITION - 1, "template_len"),
        ("seq", "ACGT1", "invalid seq"),
        ("qual", "II II", "invalid qual"),
    ],
)
def test_alignment_field_rules(field, value, expected):
    reason = validate_alignment(_alignment(**{field: value}))
    assert reason is not None
    assert expected in reason


def test_alignment_template_len_accepts_negative_bound():
    assert validate_alignment(_alignment(template_len=-MAX_POSITION)) is None


def test_alignment_reports_first_failing_field():
    reason = validate_alignment(_alignment(qname="@bad", flag=70000, qual=" "))
    assert reason.startswith("invalid qname")

    reason = validate_alignment(_alignment(mapq=300, seq="123"))
    assert reason.startswith("mapq")
