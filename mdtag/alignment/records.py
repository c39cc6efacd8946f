""" MD tag helpers for pysam alignment records """

import logging

from ..md.tag import MdTag
from .cigarops import CigarOps


logger = logging.getLogger(__name__)


def _check_query_length(pysam_aln, cigar):
    query_length = CigarOps.calculate_querylength(cigar)
    if query_length != len(pysam_aln.query_sequence):
        raise ValueError(
            f"Read {pysam_aln.query_name}: CIGAR {CigarOps.show_cigar(cigar)} covers {query_length} bases, "
            f"sequence has {len(pysam_aln.query_sequence)}."
        )


def _check_record(pysam_aln):
    if pysam_aln.is_unmapped:
        raise ValueError(f"Read {pysam_aln.query_name} is unmapped.")
    if not pysam_aln.query_sequence:
        raise ValueError(f"Read {pysam_aln.query_name} has no sequence.")
    if not pysam_aln.cigartuples:
        raise ValueError(f"Read {pysam_aln.query_name} has no CIGAR.")
    _check_query_length(pysam_aln, pysam_aln.cigartuples)


def get_md_tag(pysam_aln):
    """ The record's MD tag, or None if it does not carry one. """
    try:
        md_string = pysam_aln.get_tag("MD")
    except KeyError:
        return None
    return MdTag.parse(md_string, pysam_aln.reference_start)


def _require_md_tag(pysam_aln):
    md_tag = get_md_tag(pysam_aln)
    if md_tag is None:
        raise ValueError(f"Read {pysam_aln.query_name} has no MD tag.")
    return md_tag


def get_reference(pysam_aln):
    """ Reference bases under the record, rebuilt from sequence, CIGAR and MD tag. """
    _check_record(pysam_aln)
    return _require_md_tag(pysam_aln).get_reference(
        pysam_aln.query_sequence, pysam_aln.cigartuples, pysam_aln.reference_start
    )


def move_alignment(pysam_aln, new_cigar, new_reference=None, new_start=None):
    """
    MD tag for the record under a new alignment.

    Without `new_reference`, the reference is recovered from the record's current
    MD tag and CIGAR; this requires the alignment start to stay where it is.
    With `new_reference` (bases from `new_start` onwards) any new position is allowed.
    """
    _check_record(pysam_aln)
    new_cigar = CigarOps.normalise(new_cigar)
    _check_query_length(pysam_aln, new_cigar)

    if new_reference is None:
        logger.debug(
            "%s: moving %s -> %s at %s-%s",
            pysam_aln.query_name, pysam_aln.cigarstring, CigarOps.show_cigar(new_cigar),
            pysam_aln.reference_start, CigarOps.calculate_coordinates(pysam_aln.reference_start, new_cigar),
        )
        return _require_md_tag(pysam_aln).move_alignment(
            pysam_aln.query_sequence, pysam_aln.cigartuples, new_cigar, start=new_start,
        )

    new_start = pysam_aln.reference_start if new_start is None else new_start
    logger.debug(
        "%s: moving %s@%s -> %s@%s-%s",
        pysam_aln.query_name, pysam_aln.cigarstring, pysam_aln.reference_start,
        CigarOps.show_cigar(new_cigar), new_start, CigarOps.calculate_coordinates(new_start, new_cigar),
    )
    return MdTag.move_alignment_to(pysam_aln.query_sequence, new_cigar, new_reference, new_start)


def set_md_tag(pysam_aln, md_tag):
    pysam_aln.set_tag("MD", str(md_tag), value_type="Z")
