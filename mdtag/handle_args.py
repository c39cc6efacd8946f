# pylint: disable=C0301
""" module docstring """

import argparse
import logging
import textwrap

from . import __version__
from . import __tool__


logger = logging.getLogger(__name__)


def add_alignment_args(ap, cigar_help="CIGAR string of the alignment, e.g. 10M2D5M."):
    ap.add_argument("--read", type=str, required=True, help="Read sequence (including soft-clipped bases).")
    ap.add_argument("--cigar", type=str, required=True, help=cigar_help)
    ap.add_argument("--start", type=int, default=0, help="Reference start position of the alignment.")


def validate_args(args):

    logger.debug("args: %s", args.__dict__)

    if args.start < 0:
        raise ValueError(f"Alignment start must be non-negative, got {args.start}.")

    return args


def handle_args(args):

    log_ap = argparse.ArgumentParser(prog=__tool__, add_help=False)
    log_ap.add_argument("-l", "--log_level", type=int, choices=range(1, 5), default=logging.INFO)
    log_args, _ = log_ap.parse_known_args(args)

    try:
        logging.basicConfig(
            level=log_args.log_level,
            format='[%(asctime)s] %(message)s'
        )
    except ValueError as invalid_loglevel_err:
        raise ValueError(f"Invalid log level: {log_args.log_level}") from invalid_loglevel_err

    ap = argparse.ArgumentParser(
        prog=__tool__,
        formatter_class=argparse.RawTextHelpFormatter,
        parents=(log_ap,),
    )
    ap.add_argument("--version", action="version", version="%(prog)s " + __version__)

    subparsers = ap.add_subparsers(dest="command", required=True)

    parse_ap = subparsers.add_parser(
        "parse",
        help="Parse an MD string and list its matches, mismatches and deletions.",
    )
    parse_ap.add_argument("md", type=str, help="MD string, e.g. 10A5^AC6.")
    parse_ap.add_argument("--start", type=int, default=0, help="Reference start position of the alignment.")

    compute_ap = subparsers.add_parser(
        "compute",
        help="Compute the MD string of a read aligned against a reference.",
    )
    add_alignment_args(compute_ap)
    compute_ap.add_argument(
        "--reference",
        type=str,
        required=True,
        help=textwrap.dedent(
            """\
            Reference sequence, starting at the alignment start.
            """
        ),
    )

    reference_ap = subparsers.add_parser(
        "reference",
        help="Rebuild the reference sequence from read, CIGAR and MD string.",
    )
    reference_ap.add_argument("md", type=str, help="MD string of the alignment.")
    add_alignment_args(reference_ap)

    move_ap = subparsers.add_parser(
        "move",
        help=textwrap.dedent(
            """\
            Recompute the MD string after the CIGAR changed
            (alignment start must stay the same).
            """
        ),
    )
    move_ap.add_argument("md", type=str, help="MD string of the current alignment.")
    add_alignment_args(move_ap, cigar_help="Current CIGAR string.")
    move_ap.add_argument("--new_cigar", type=str, required=True, help="New CIGAR string.")

    return validate_args(ap.parse_args(args))
