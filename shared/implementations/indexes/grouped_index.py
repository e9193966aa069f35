"""Word index backed by pre-built length groups."""

import logging
import threading
from typing import Dict, List, Optional, Set
from shared.domain.models import Dictionary
from shared.interfaces.word_index import WordIndex

logger = logging.getLogger(__name__)


class GroupedWordIndex(WordIndex):
    """Groups words by length once per dictionary, then answers from the groups.
    
    O(n) setup the first time a dictionary is seen, O(1) average lookup after.
    The groups are rebuilt whenever a different dictionary object is passed.
    The index keeps a reference to the dictionary it grouped, so identity
    comparison is safe.
    
    Thread-safe: group building and swapping happen under a lock, and lookups
    read from an immutable snapshot of the groups.
    """
    
    def __init__(self) -> None:
        self._source: Optional[Dictionary] = None
        self._groups: Dict[int, List[str]] = {}
        self._lock = threading.Lock()
    
    def words_of_length(self, dictionary: Dictionary, length: int) -> List[str]:
        groups = self._groups_for(dictionary)
        # Copy so callers cannot mutate the cached group
        return list(groups.get(length, ()))
    
    def unique_lengths_in_range(
        self,
        dictionary: Dictionary,
        min_length: int,
        max_length: int,
    ) -> Set[int]:
        groups = self._groups_for(dictionary)
        return {length for length in groups if min_length <= length <= max_length}
    
    def _groups_for(self, dictionary: Dictionary) -> Dict[int, List[str]]:
        """Return length groups for `dictionary`, building them if needed."""
        with self._lock:
            if dictionary is not self._source:
                self._groups = self._build_groups(dictionary)
                self._source = dictionary
            return self._groups
    
    @staticmethod
    def _build_groups(dictionary: Dictionary) -> Dict[int, List[str]]:
        """Single pass: length -> words, preserving dictionary order within each group."""
        groups: Dict[int, List[str]] = {}
        for entry in dictionary:
            groups.setdefault(entry.length, []).append(entry.word)
        
        logger.debug(
            f"Built length groups for {len(dictionary)} entries "
            f"({len(groups)} distinct lengths)"
        )
        return groups
