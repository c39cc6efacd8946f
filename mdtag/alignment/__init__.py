# flake8: noqa

""" module docstring """

from .cigarops import CigarOps
