# flake8: noqa

""" MD tag codec: parsing, reconciliation, serialization, reference reconstruction """

from .tag import MdTag
from .parser import parse_md
from .reconciler import build_md_string, reconcile
from .reference import reconstruct_reference
from .serializer import to_md_string
