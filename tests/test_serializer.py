import pytest

from mdtag import MdTag, MdTagConsistencyError
from mdtag.md import to_md_string


@pytest.mark.parametrize(
    "md_string",
    [
        "100",
        "10A5",
        "5^AC6",
        "0A5",
        "5A0",
        "0A0",
        "0^A0",
        "5^AC0",
        "2T0G3",
        "3^T0C2",
        "1^ACG1A0T12",
        "0T2A0^G1",
    ],
)
@pytest.mark.parametrize("start", [0, 1, 12345])
def test_round_trip(md_string, start):
    assert str(MdTag.parse(md_string, start)) == md_string


def test_round_trip_normalises_case():
    assert str(MdTag.parse("3^t0c2", 7)) == "3^T0C2"


def test_empty_tag():
    assert to_md_string(MdTag(10)) == "0"


def test_adjacent_match_ranges_are_merged():
    tag = MdTag(0, [range(0, 2), range(2, 5), range(5, 6)])
    assert str(tag) == "6"


def test_adjacent_deletion_blocks_are_merged():
    assert str(MdTag.parse("5^A0^C5", 0)) == "5^AC5"


def test_consecutive_mismatches_get_zero_runs():
    assert str(MdTag.parse("10AC5", 0)) == "10A0C5"


def test_built_from_collections():
    tag = MdTag(
        20,
        matches=[(20, 23), (26, 28)],
        mismatches={23: "G"},
        deletions={24: "T", 25: "T"},
    )
    assert str(tag) == "3G0^TT2"


def test_unclassified_position_fails_at_construction():
    with pytest.raises(MdTagConsistencyError, match="Position 2"):
        MdTag(0, [range(0, 2), range(3, 5)])
