"""
Models package for the Author's Dictionary backend.

Importing this package registers every table on the declarative base.
"""

from .sentence import Sentence

__all__ = ["Sentence"]
