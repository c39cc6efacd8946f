# pylint: disable=R0914

""" Building MD classifications from read, reference and CIGAR """

import logging

from ..alignment.cigarops import CigarOps
from ..errors import UnsupportedCigarOperationError


logger = logging.getLogger(__name__)


def skip_operation(op, oplen):
    """ Read advance for operations that are neither aligned nor deletions. """
    if op in CigarOps.REF_CONSUMERS:
        raise UnsupportedCigarOperationError(CigarOps.op_name(op))
    return oplen if op in CigarOps.QUERY_CONSUMERS else 0


def _check_bounds(name, sequence, offset, oplen):
    if offset + oplen > len(sequence):
        raise ValueError(
            f"{name} sequence too short for CIGAR: need {offset + oplen} bases, have {len(sequence)}."
        )


def reconcile(read, reference, cigar, start):
    """
    Classifies every reference position covered by `cigar` as match, mismatch or deletion.

    `reference` holds the reference bases from `start` onwards; `read` the read bases
    including soft-clipped ones. Returns (matches, mismatches, deletions) with
    consecutive matches merged into a single half-open range.
    """
    read_pos, ref_pos = 0, 0
    matches, mismatches, deletions = [], {}, {}
    cigar = CigarOps.normalise(cigar)

    for op, oplen in cigar:
        if op in CigarOps.ALIGNED:
            _check_bounds("read", read, read_pos, oplen)
            _check_bounds("reference", reference, ref_pos, oplen)
            range_start, in_match = 0, False

            for _ in range(oplen):
                ref_base = reference[ref_pos].upper()
                if ref_base == read[read_pos].upper():
                    if not in_match:
                        range_start, in_match = ref_pos, True
                else:
                    if in_match:
                        matches.append(range(start + range_start, start + ref_pos))
                        in_match = False
                    mismatches[start + ref_pos] = ref_base

                read_pos += 1
                ref_pos += 1

            if in_match:
                matches.append(range(start + range_start, start + ref_pos))

        elif op == CigarOps.DELETION:
            _check_bounds("reference", reference, ref_pos, oplen)
            for _ in range(oplen):
                deletions[start + ref_pos] = reference[ref_pos].upper()
                ref_pos += 1

        else:
            read_pos += skip_operation(op, oplen)

    logger.debug(
        "reconciled %s against %s bp reference at %s: %s match runs, %s mismatches, %s deletions",
        CigarOps.show_cigar(cigar), ref_pos, start, len(matches), len(mismatches), len(deletions),
    )

    return matches, mismatches, deletions


def build_md_string(read, reference, cigar):
    """ Counting walk that writes MD text directly, without building classifications. """
    md_string = []
    match_count, del_count = 0, 0
    read_pos, ref_pos = 0, 0

    for op, oplen in CigarOps.normalise(cigar):
        if op in CigarOps.ALIGNED:
            _check_bounds("read", read, read_pos, oplen)
            _check_bounds("reference", reference, ref_pos, oplen)
            for _ in range(oplen):
                ref_base = reference[ref_pos].upper()
                if read[read_pos].upper() == ref_base:
                    match_count += 1
                else:
                    md_string.append(f"{match_count}{ref_base}")
                    match_count = 0
                read_pos += 1
                ref_pos += 1
                del_count = 0

        elif op == CigarOps.DELETION:
            _check_bounds("reference", reference, ref_pos, oplen)
            for _ in range(oplen):
                if del_count == 0:
                    md_string.append(f"{match_count}^")
                md_string.append(reference[ref_pos].upper())
                match_count = 0
                del_count += 1
                ref_pos += 1

        else:
            read_pos += skip_operation(op, oplen)

    md_string.append(str(match_count))

    return "".join(md_string)
