""" MD string scanner """

from enum import Enum, auto, unique

from ..errors import MdTagFormatError


# nucleotides and IUPAC ambiguity codes, after upper-casing
MD_BASES = frozenset("AGCTNUKMRSWBVHDXY")


@unique
class MdEvent(Enum):
    MATCH = auto()
    MISMATCH = auto()
    DELETE = auto()


class MdScanner:
    """ Cursor over an (upper-cased) MD string. """

    def __init__(self, md_string):
        self.text = md_string
        self.offset = 0

    def at_end(self):
        return self.offset >= len(self.text)

    def peek(self):
        return self.text[self.offset]

    def read_digits(self):
        end = self.offset
        # ASCII only, str.isdigit() also accepts other unicode digits
        while end < len(self.text) and "0" <= self.text[end] <= "9":
            end += 1
        token, self.offset = self.text[self.offset:end], end
        return token

    def read_bases(self):
        end = self.offset
        while end < len(self.text) and self.text[end] in MD_BASES:
            end += 1
        token, self.offset = self.text[self.offset:end], end
        return token

    def read_event(self):
        if self.peek() == "^":
            self.offset += 1
            return MdEvent.DELETE
        return MdEvent.MISMATCH


def parse_md(md_string, start):
    """
    Scans an MD string anchored at reference coordinate `start`.

    Returns (matches, mismatches, deletions): a list of half-open match ranges
    and two dicts mapping reference coordinate to reference base.
    `None`, '' and '0' all describe an empty tag.
    """
    matches, mismatches, deletions = [], {}, {}

    if not md_string or md_string == "0":
        return matches, mismatches, deletions

    scanner = MdScanner(md_string.upper())
    position = start

    def read_matches(msg):
        nonlocal position
        offset = scanner.offset
        token = scanner.read_digits()
        if not token:
            raise MdTagFormatError(f"{msg}: `{md_string}` (at offset {offset}: `{md_string[offset:]}`)")
        length = int(token)
        if length > 0:
            matches.append(range(position, position + length))
        position += length

    read_matches("MD tag must start with a digit")

    while not scanner.at_end():
        event = scanner.read_event()
        offset = scanner.offset
        bases = scanner.read_bases()
        if not bases:
            raise MdTagFormatError(
                "Failed to find deleted or mismatched bases after a match: "
                f"`{md_string}` (at offset {offset}: `{md_string[offset:]}`)"
            )

        events = deletions if event == MdEvent.DELETE else mismatches
        for base in bases:
            events[position] = base
            position += 1

        read_matches("MD tag should have matching bases after mismatched or missing bases")

    return matches, mismatches, deletions
