from abc import ABC, abstractmethod
from typing import Iterable, List, Set


class Dictionary(ABC):
    """
    Answers whether a token is a known word.
    Implementations must be total: unknown or garbage tokens answer False,
    nothing is raised.
    """

    @abstractmethod
    def contains(self, token: str) -> bool:
        ...

    def __contains__(self, token: str) -> bool:
        return self.contains(token)


class WordSetDictionary(Dictionary):
    def __init__(self, words: Iterable[str] = ()):
        self.words: Set[str] = set(words)

    def contains(self, token: str) -> bool:
        # Exact case, no trimming
        return token in self.words

    def __len__(self) -> int:
        return len(self.words)


class UnionDictionary(Dictionary):
    """Recognizes a token when any member dictionary does."""

    def __init__(self, members: Iterable[Dictionary] = ()):
        self.members: List[Dictionary] = list(members)

    def contains(self, token: str) -> bool:
        return any(member.contains(token) for member in self.members)
