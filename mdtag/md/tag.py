# pylint: disable=R0913

""" MD tag value type """

from dataclasses import dataclass, field
from types import MappingProxyType

from intervaltree import IntervalTree

from .parser import parse_md
from .reconciler import build_md_string, reconcile
from .reference import reconstruct_reference
from .serializer import to_md_string


@dataclass(frozen=True, eq=False, repr=False)
class MdTag:
    """
    Mismatches and deletions of a read aligned against a reference, as described by an MD tag.
    The tag can be used to reconstruct the reference that an aligned read overlaps.

    start: reference position where the alignment starts
    matches: half-open reference ranges over which the read matches perfectly
    mismatches: reference position -> reference base, where the read base differs
    deletions: reference position -> reference base, for bases missing from the read

    Two tags are equal if they start at the same position and serialize to the same MD string.
    """
    start: int
    matches: tuple = ()
    mismatches: MappingProxyType = field(default_factory=dict)
    deletions: MappingProxyType = field(default_factory=dict)
    _match_index: IntervalTree = field(default=None, init=False)
    _md_string: str = field(default=None, init=False)

    def __post_init__(self):
        matches = tuple(
            sorted(
                (r if isinstance(r, range) else range(*r) for r in self.matches),
                key=lambda r: r.start,
            )
        )
        matches = tuple(r for r in matches if len(r))
        object.__setattr__(self, "matches", matches)
        object.__setattr__(self, "mismatches", MappingProxyType(dict(self.mismatches)))
        object.__setattr__(self, "deletions", MappingProxyType(dict(self.deletions)))
        object.__setattr__(
            self, "_match_index", IntervalTree.from_tuples((r.start, r.stop) for r in matches)
        )
        self._check_disjoint()
        object.__setattr__(self, "_md_string", to_md_string(self))

    def _check_disjoint(self):
        below_start = [r for r in self.matches if r.start < self.start]
        below_start.extend(pos for pos in self.mismatches if pos < self.start)
        below_start.extend(pos for pos in self.deletions if pos < self.start)
        if below_start:
            raise ValueError(f"Classified positions before alignment start {self.start}: {below_start}")

        for prev, cur in zip(self.matches, self.matches[1:]):
            if cur.start < prev.stop:
                raise ValueError(f"Overlapping match ranges {prev} and {cur}.")

        shared = set(self.mismatches).intersection(self.deletions)
        if shared:
            raise ValueError(f"Positions classified as both mismatch and deletion: {sorted(shared)}")

        for pos in set(self.mismatches).union(self.deletions):
            if self._match_index.overlaps(pos):
                raise ValueError(f"Position {pos} is classified as match and as mismatch/deletion.")

    # ---------- construction ----------

    @classmethod
    def parse(cls, md_string, start):
        """ Builds an MD tag from its string representation and the read's alignment start. """
        return cls(start, *parse_md(md_string, start))

    @classmethod
    def from_alignment(cls, read, reference, cigar, start):
        """
        Builds an MD tag by comparing read and reference bases along the CIGAR.

        `reference` starts at the alignment start `start`.
        """
        return cls(start, *reconcile(read, reference, cigar, start))

    @classmethod
    def from_md_string_alignment(cls, read, reference, cigar, start):
        return cls.parse(build_md_string(read, reference, cigar), start)

    @classmethod
    def move_alignment_to(cls, read, new_cigar, new_reference, new_start):
        """
        MD tag for a read realigned to `new_start` with `new_cigar` against `new_reference`.

        If the alignment start does not change, `move_alignment` on the read's current tag
        does not need the reference.
        """
        return cls.from_alignment(read, new_reference, new_cigar, new_start)

    def move_alignment(self, read, cigar, new_cigar, start=None):
        """
        MD tag for the read after its CIGAR changed from `cigar` to `new_cigar`
        (e.g. after left-normalising an indel). The reference is rebuilt from this tag.

        The alignment start must not change; use `move_alignment_to` otherwise.
        """
        if start is not None and start != self.start:
            raise ValueError(
                f"Alignment start moved from {self.start} to {start}: "
                "the reference cannot be recovered from the old MD tag, use move_alignment_to."
            )
        reference = self.get_reference(read, cigar)
        return self.from_alignment(read, reference, new_cigar, self.start)

    # ---------- queries ----------

    def is_empty(self):
        return not (self.matches or self.mismatches or self.deletions)

    def is_match(self, pos):
        """ True if the base matches the reference. False means mismatch, deletion or not covered. """
        return self._match_index.overlaps(pos)

    def mismatched_base(self, pos):
        return self.mismatches.get(pos)

    def deleted_base(self, pos):
        return self.deletions.get(pos)

    def has_mismatches(self):
        """ Deletions do not count as mismatches. """
        return bool(self.mismatches)

    def count_of_mismatches(self):
        return len(self.mismatches)

    def has_deletions(self):
        return bool(self.deletions)

    def count_of_deletions(self):
        return len(self.deletions)

    def end(self):
        """ Last reference position (inclusive) described by the tag. """
        if self.is_empty():
            raise ValueError("Empty MD tag has no end position.")
        ends = [r.stop - 1 for r in self.matches]
        ends.extend(self.mismatches)
        ends.extend(self.deletions)
        return max(ends)

    def get_reference(self, read, cigar, start=None):
        """ Reference overlapping the read, from read bases, CIGAR and this tag. """
        return reconstruct_reference(self, read, cigar, start)

    # ---------- string form & equality ----------

    def __str__(self):
        return self._md_string

    def __repr__(self):
        return f"MdTag(start={self.start}, md='{self}')"

    def __eq__(self, other):
        if not isinstance(other, MdTag):
            return NotImplemented
        return self.start == other.start and str(self) == str(other)

    def __hash__(self):
        return hash((self.start, str(self)))
