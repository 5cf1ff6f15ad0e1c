from typing import Dict, Iterable

from filerank.dictionary import Dictionary

class TrieNode:
    __slots__ = ('children', 'is_word')

    def __init__(self):
        self.children: Dict[str, TrieNode] = {}
        self.is_word: bool = False

class TrieDictionary(Dictionary):
    def __init__(self, words: Iterable[str] = ()):
        self.root = TrieNode()
        for word in words:
            self.insert(word)

    def insert(self, word: str):
        """
        Insert a word into the trie.
        Casing is kept as given; lookups are exact.
        """
        if not word:
            return
        node = self.root
        for char in word:
            if char not in node.children:
                node.children[char] = TrieNode()
            node = node.children[char]
        node.is_word = True

    def contains(self, token: str) -> bool:
        node = self.root
        for char in token:
            node = node.children.get(char)
            if node is None:
                return False
        return node.is_word
