"""Factory for creating word index instances."""

from shared.interfaces.word_index import WordIndex
from shared.implementations.indexes import LinearWordIndex, GroupedWordIndex
from shared.domain.consts import WordIndexName


INDEXES: dict[str, type[WordIndex]] = {
    WordIndexName.LINEAR: LinearWordIndex,
    WordIndexName.GROUPED: GroupedWordIndex,
}


def create_index(index_name: str) -> WordIndex:
    """Factory for creating word indexes.
        
    Returns:
        WordIndex instance
        
    Raises:
        ValueError: If index_name is unknown
    """
    try:
        index_cls = INDEXES[index_name]
    except KeyError:
        choices = ", ".join(name.value for name in WordIndexName)
        raise ValueError(f"Unknown word index: {index_name} (choose from: {choices})")
    return index_cls()
