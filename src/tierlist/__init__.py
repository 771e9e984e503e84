"""Tierlist service.

Templates of rankable items shared by a community and personal rankings saved
by each address against those templates.
"""

__version__ = "0.1.0"

CONTRACT_NAME = "tierlist"

__all__ = ["CONTRACT_NAME", "__version__"]
