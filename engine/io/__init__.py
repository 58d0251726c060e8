"""I/O utilities (Business Layer).

This package is intended to be backend-independent.

Subpackages
-----------
- :mod:`engine.io.readers`: parsing adapters for matrix, DQI and metadata files
"""

from .readers import *  # noqa: F401,F403
