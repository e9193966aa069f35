"""Word index implementations.

This package contains concrete implementations of the WordIndex interface.
"""

from shared.implementations.indexes.linear_index import LinearWordIndex
from shared.implementations.indexes.grouped_index import GroupedWordIndex

__all__ = ["LinearWordIndex", "GroupedWordIndex"]
