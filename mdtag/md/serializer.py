""" module docstring """

from ..errors import MdTagConsistencyError
from .parser import MdEvent


def to_md_string(tag):
    """
    Writes the canonical MD string for a tag: [0-9]+(([A-Z]|\\^[A-Z]+)[0-9]+)*

    Every coordinate in [tag.start, tag.end()] has to be classified.
    """
    if tag.is_empty():
        return "0"

    md_string = []
    last_event = None
    match_run = 0

    def flush_matches():
        md_string.append(str(match_run) if last_event == MdEvent.MATCH else "0")

    for pos in range(tag.start, tag.end() + 1):
        if tag.is_match(pos):
            if last_event == MdEvent.MATCH:
                match_run += 1
            else:
                match_run = 1
                last_event = MdEvent.MATCH

        elif pos in tag.deletions:
            if last_event != MdEvent.DELETE:
                flush_matches()
                md_string.append("^")
                last_event = MdEvent.DELETE
            md_string.append(tag.deletions[pos])

        elif pos in tag.mismatches:
            flush_matches()
            md_string.append(tag.mismatches[pos])
            last_event = MdEvent.MISMATCH

        else:
            raise MdTagConsistencyError(
                f"Position {pos} is neither match, mismatch nor deletion (tag covers {tag.start}-{tag.end()})."
            )

    flush_matches()

    return "".join(md_string)
