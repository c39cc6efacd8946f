""" Reference reconstruction from read, CIGAR and MD tag """

from ..alignment.cigarops import CigarOps
from ..errors import MdTagConsistencyError
from .reconciler import skip_operation


def reconstruct_reference(tag, read, cigar, start=None):
    """
    Returns the reference bases the read was aligned against.

    Mismatched and deleted bases come from the tag, matched bases from the read.
    Insertions and soft clips are skipped. `start` defaults to the tag's start.
    """
    position = tag.start if start is None else start
    read_pos = 0
    reference = []

    for op, oplen in CigarOps.normalise(cigar):
        if op in CigarOps.ALIGNED:
            if read_pos + oplen > len(read):
                raise ValueError(
                    f"read sequence too short for CIGAR: need {read_pos + oplen} bases, have {len(read)}."
                )
            for i in range(oplen):
                base = tag.mismatched_base(position)
                if base is None:
                    if not tag.is_match(position):
                        raise MdTagConsistencyError(
                            f"Could not find matching or mismatching base at position {position} (cigar offset {i})."
                        )
                    base = read[read_pos]
                reference.append(base)
                read_pos += 1
                position += 1

        elif op == CigarOps.DELETION:
            for i in range(oplen):
                base = tag.deleted_base(position)
                if base is None:
                    raise MdTagConsistencyError(
                        f"Could not find deleted base at position {position} (cigar offset {i})."
                    )
                reference.append(base)
                position += 1

        else:
            read_pos += skip_operation(op, oplen)

    return "".join(reference)
