""" Exceptions raised while parsing, building or resolving MD tags. """


class MdTagError(Exception):
    pass


class MdTagFormatError(MdTagError, ValueError):
    """ MD text does not follow [0-9]+(([A-Z]|\\^[A-Z]+)[0-9]+)* """


class UnsupportedCigarOperationError(MdTagError, ValueError):
    """ A CIGAR operation consumes reference bases but is neither aligned (M/=/X) nor a deletion. """

    def __init__(self, operation):
        self.operation = operation
        super().__init__(f"Cannot handle operator: {operation}")


class MdTagConsistencyError(MdTagError, RuntimeError):
    """ The tag does not describe the read/CIGAR it is applied to. """
