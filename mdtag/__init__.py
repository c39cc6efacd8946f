# flake8: noqa

""" MD tag codec for aligned reads """

__version__ = "0.3.1"
__tool__ = "mdtag"

from .errors import MdTagError, MdTagFormatError, UnsupportedCigarOperationError, MdTagConsistencyError
from .md import MdTag
from .alignment import CigarOps
