"""
Author's Dictionary backend.

Serves dictionary definitions alongside literary sentences that use a word.
"""

__version__ = "1.0.0"
