from filerank.dictionary import Dictionary, UnionDictionary, WordSetDictionary
from filerank.ranking import Ranker, Score
from filerank.trie import TrieDictionary

__all__ = [
    "Dictionary",
    "Ranker",
    "Score",
    "TrieDictionary",
    "UnionDictionary",
    "WordSetDictionary",
]
