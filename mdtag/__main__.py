# pylint: disable=C0103

""" module docstring """

import logging
import os
import sys

from .handle_args import handle_args
from .errors import MdTagError
from .md import MdTag
from . import __version__


logger = logging.getLogger(__name__)


def show_tag(md_tag):
    print("md", str(md_tag), sep="\t")
    print("start", md_tag.start, sep="\t")
    if md_tag.is_empty():
        return

    print("end", md_tag.end(), sep="\t")
    for match in md_tag.matches:
        print("match", match.start, match.stop, sep="\t")
    for pos, base in sorted(md_tag.mismatches.items()):
        print("mismatch", pos, base, sep="\t")
    for pos, base in sorted(md_tag.deletions.items()):
        print("deletion", pos, base, sep="\t")


def run(args):
    if args.command == "parse":
        show_tag(MdTag.parse(args.md, args.start))

    elif args.command == "compute":
        print(MdTag.from_alignment(args.read, args.reference, args.cigar, args.start))

    elif args.command == "reference":
        print(MdTag.parse(args.md, args.start).get_reference(args.read, args.cigar))

    elif args.command == "move":
        md_tag = MdTag.parse(args.md, args.start)
        print(md_tag.move_alignment(args.read, args.cigar, args.new_cigar))

    else:
        raise ValueError(f"Command `{args.command}` is not supported.")


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv

    try:
        args = handle_args(argv)
    except ValueError as err:
        logger.error("%s", err)
        sys.exit(1)

    logger.info("Version: %s", __version__)
    logger.info("Command: %s %s", os.path.basename(sys.argv[0]), " ".join(argv))

    try:
        run(args)
    except (MdTagError, ValueError) as err:
        logger.error("Failed to process MD tag:")
        logger.error("%s", err)
        sys.exit(1)


if __name__ == "__main__":
    main()
