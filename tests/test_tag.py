import dataclasses

import pytest

from mdtag import MdTag


def test_equality_ignores_range_decomposition():
    split = MdTag(0, [range(0, 2), range(2, 5)])
    parsed = MdTag.parse("5", 0)
    assert split.matches != parsed.matches
    assert split == parsed
    assert hash(split) == hash(parsed)
    assert len({split, parsed}) == 1


def test_equality_across_construction_paths():
    parsed = MdTag.parse("2T2", 7)
    aligned = MdTag.from_alignment("AACGT", "AATGT", "5M", 7)
    assert parsed == aligned
    assert hash(parsed) == hash(aligned)


def test_start_is_part_of_equality():
    assert MdTag.parse("10A5", 0) != MdTag.parse("10A5", 1)
    assert MdTag.parse("0", 5) != MdTag.parse("0", 6)


def test_not_equal_to_strings():
    assert MdTag.parse("10", 0) != "10"


def test_tuple_ranges_are_accepted_and_sorted():
    tag = MdTag(0, [(11, 16), (0, 10)], mismatches={10: "A"})
    assert tag.matches == (range(0, 10), range(11, 16))
    assert str(tag) == "10A5"


def test_zero_length_ranges_are_dropped():
    assert MdTag(0, [range(3, 3)]).is_empty()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"matches": [range(0, 5)], "mismatches": {3: "A"}},
        {"matches": [range(0, 5)], "deletions": {4: "A"}},
        {"mismatches": {3: "A"}, "deletions": {3: "C"}},
        {"matches": [range(0, 5), range(4, 8)]},
    ],
)
def test_overlapping_classifications_are_rejected(kwargs):
    with pytest.raises(ValueError):
        MdTag(0, **kwargs)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"matches": [(0, 3)], "mismatches": {3: "A"}},
        {"matches": [(4, 8)]},
        {"matches": [(5, 8)], "mismatches": {4: "A"}},
        {"matches": [(5, 8)], "deletions": {2: "C"}},
    ],
)
def test_positions_before_start_are_rejected(kwargs):
    with pytest.raises(ValueError, match="before alignment start 5"):
        MdTag(5, **kwargs)


def test_queries():
    tag = MdTag.parse("3A2^GT1", 10)
    assert tag.is_match(10) and tag.is_match(12) and tag.is_match(18)
    assert not tag.is_match(13)
    assert not tag.is_match(9) and not tag.is_match(19)
    assert tag.mismatched_base(13) == "A"
    assert tag.mismatched_base(12) is None
    assert tag.deleted_base(16) == "G"
    assert tag.deleted_base(17) == "T"
    assert tag.deleted_base(13) is None
    assert tag.has_mismatches() and tag.count_of_mismatches() == 1
    assert tag.has_deletions() and tag.count_of_deletions() == 2
    assert tag.end() == 18


def test_deletions_are_not_mismatches():
    tag = MdTag.parse("5^A5", 0)
    assert not tag.has_mismatches()
    assert tag.count_of_mismatches() == 0
    assert tag.has_deletions()


@pytest.mark.parametrize("md_string,end", [("10A5", 15), ("5^AC0", 6), ("0A0", 0), ("100", 99)])
def test_end(md_string, end):
    assert MdTag.parse(md_string, 0).end() == end


def test_coverage_of_parsed_tag():
    tag = MdTag.parse("1^ACG1A0T12", 500)
    for pos in range(tag.start, tag.end() + 1):
        hits = [tag.is_match(pos), pos in tag.mismatches, pos in tag.deletions]
        assert hits.count(True) == 1


def test_immutable():
    tag = MdTag.parse("10A5", 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        tag.start = 3
    with pytest.raises(TypeError):
        tag.mismatches[11] = "C"


def test_input_collections_are_copied():
    mismatches = {2: "T"}
    tag = MdTag(0, [range(0, 2), range(3, 5)], mismatches=mismatches)
    mismatches[7] = "G"
    assert dict(tag.mismatches) == {2: "T"}


def test_repr():
    assert repr(MdTag.parse("5^AC6", 42)) == "MdTag(start=42, md='5^AC6')"


def test_move_alignment_keeps_start():
    tag = MdTag.parse("1^C3", 0)
    moved = tag.move_alignment("ACGT", "1M1D3M", "2M1D2M")
    assert moved == MdTag.parse("2^C2", 0)
    assert dict(moved.deletions) == {2: "C"}


def test_move_alignment_with_same_start():
    tag = MdTag.parse("1^C3", 20)
    assert str(tag.move_alignment("ACGT", "1M1D3M", "2M1D2M", start=20)) == "2^C2"


def test_move_alignment_rejects_moved_start():
    tag = MdTag.parse("1^C3", 20)
    with pytest.raises(ValueError, match="move_alignment_to"):
        tag.move_alignment("ACGT", "1M1D3M", "2M1D2M", start=21)


def test_move_alignment_to():
    tag = MdTag.move_alignment_to("ACGT", "4M", "ACGA", 7)
    assert tag.start == 7
    assert str(tag) == "3A0"
