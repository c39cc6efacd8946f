""" CIGAR Ops """

import re


class CigarOps:
    CIGAR_OPS = "MIDNSHP=X"
    # MIDNSHP=X
    # 012345678; 02378 consume reference, 01478 consume query
    MATCH, INSERTION, DELETION, SKIP, SOFT_CLIP, HARD_CLIP, PADDING, SEQ_MATCH, SEQ_MISMATCH = range(9)

    REF_CONSUMERS = {0, 2, 3, 7, 8}
    QUERY_CONSUMERS = {0, 1, 4, 7, 8}
    # read and reference advance in lockstep
    ALIGNED = {0, 7, 8}

    CIGAR_PATTERN = re.compile(r"([0-9]+)([MIDNSHP=X])")

    @staticmethod
    def parse_cigar_string(cigar):
        """ '5M1I4M' -> [(0, 5), (1, 1), (0, 4)], i.e. pysam cigartuples order (op, length). """
        ops, pos = [], 0
        for match in CigarOps.CIGAR_PATTERN.finditer(cigar):
            if match.start() != pos:
                break
            ops.append((CigarOps.CIGAR_OPS.index(match.group(2)), int(match.group(1))))
            pos = match.end()

        if pos != len(cigar) or not ops:
            raise ValueError(f"Invalid CIGAR string: `{cigar}`.")

        return ops

    @staticmethod
    def normalise(cigar):
        """ Accepts a CIGAR string or (op, length) pairs with op given as code or letter. """
        if isinstance(cigar, str):
            return CigarOps.parse_cigar_string(cigar)

        ops = []
        for op, oplen in cigar:
            if isinstance(op, str):
                if len(op) != 1 or op not in CigarOps.CIGAR_OPS:
                    raise ValueError(f"Unknown CIGAR operation `{op}`.")
                op = CigarOps.CIGAR_OPS.index(op)
            elif not 0 <= op < len(CigarOps.CIGAR_OPS):
                raise ValueError(f"Unknown CIGAR operation code {op}.")
            if oplen < 0:
                raise ValueError(f"Negative CIGAR operation length {oplen}.")
            ops.append((op, oplen))

        return ops

    @staticmethod
    def show_cigar(cigar):
        return "".join(f"{oplen}{CigarOps.CIGAR_OPS[op]}" for op, oplen in CigarOps.normalise(cigar))

    @staticmethod
    def op_name(op):
        return CigarOps.CIGAR_OPS[op]

    @staticmethod
    def calculate_coordinates(start, cigar):
        return start + CigarOps.calculate_seqlength(cigar)

    @staticmethod
    def calculate_seqlength(cigar):
        return sum(oplen for op, oplen in CigarOps.normalise(cigar) if op in CigarOps.REF_CONSUMERS)

    @staticmethod
    def calculate_querylength(cigar):
        return sum(oplen for op, oplen in CigarOps.normalise(cigar) if op in CigarOps.QUERY_CONSUMERS)
