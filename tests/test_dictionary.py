import io
import os
import sys
import unittest
from contextlib import redirect_stderr
from unittest.mock import MagicMock, patch

# Add src to path
sys.path.append(os.path.join(os.getcwd(), "src"))

from filerank import hunspell_dictionary
from filerank.dictionary import Dictionary, UnionDictionary, WordSetDictionary
from filerank.hunspell_dictionary import HunspellDictionary
from filerank.ranking import Ranker
from filerank.trie import TrieDictionary

class TestWordSetDictionary(unittest.TestCase):
    def test_exact_lookup(self):
        words = WordSetDictionary(["Haus", "report"])
        self.assertTrue(words.contains("Haus"))
        self.assertFalse(words.contains("haus"))
        self.assertFalse(words.contains("report,"))
        self.assertIn("report", words)
        self.assertEqual(len(words), 2)

    def test_empty_and_garbage(self):
        words = WordSetDictionary()
        self.assertFalse(words.contains(""))
        self.assertFalse(words.contains("\x00(1)"))

    def test_abstract_contract(self):
        with self.assertRaises(TypeError):
            Dictionary()

class TestTrieDictionary(unittest.TestCase):
    def setUp(self):
        self.trie = TrieDictionary(["one", "only", "Onkel", ""])

    def test_contains_full_words_only(self):
        self.assertTrue(self.trie.contains("one"))
        self.assertTrue(self.trie.contains("only"))
        self.assertFalse(self.trie.contains("on"))
        self.assertFalse(self.trie.contains("ones"))
        self.assertFalse(self.trie.contains(""))

    def test_case_sensitive(self):
        self.assertTrue(self.trie.contains("Onkel"))
        self.assertFalse(self.trie.contains("onkel"))

    def test_insert(self):
        self.trie.insert("on")
        self.assertTrue(self.trie.contains("on"))

    def test_drives_ranker(self):
        ranker = Ranker(self.trie)
        self.assertEqual(ranker.rank("/x/one only (1).txt").dictionary_hits, 2)

class TestUnionDictionary(unittest.TestCase):
    def test_any_member(self):
        union = UnionDictionary([WordSetDictionary(["alpha"]), TrieDictionary(["beta"])])
        self.assertTrue(union.contains("alpha"))
        self.assertTrue(union.contains("beta"))
        self.assertFalse(union.contains("gamma"))

    def test_empty_union(self):
        self.assertFalse(UnionDictionary().contains("alpha"))

class TestHunspellDictionary(unittest.TestCase):
    def test_lookup_delegates_to_phunspell(self):
        backend = MagicMock()
        backend.lookup.side_effect = lambda word: word == "report"
        with patch.object(hunspell_dictionary.phunspell, "Phunspell", return_value=backend) as ctor:
            words = HunspellDictionary("en_US")

        ctor.assert_called_once_with("en_US")
        self.assertTrue(words.is_available())
        self.assertTrue(words.contains("report"))
        self.assertFalse(words.contains("xq9"))
        self.assertFalse(words.contains(""))

    def test_lookup_failure_answers_false(self):
        backend = MagicMock()
        backend.lookup.side_effect = RuntimeError("broken affix file")
        with patch.object(hunspell_dictionary.phunspell, "Phunspell", return_value=backend):
            words = HunspellDictionary("en_US")

        err = io.StringIO()
        with redirect_stderr(err):
            self.assertFalse(words.contains("report"))
        self.assertIn("ERROR: Hunspell lookup failed", err.getvalue())

    def test_init_failure_recognizes_nothing(self):
        err = io.StringIO()
        with patch.object(hunspell_dictionary.phunspell, "Phunspell", side_effect=ValueError("no such language")):
            with redirect_stderr(err):
                words = HunspellDictionary("xx_XX")

        self.assertFalse(words.is_available())
        self.assertFalse(words.contains("report"))
        self.assertIn("WARNING: Failed to initialize Phunspell for xx_XX", err.getvalue())

if __name__ == "__main__":
    unittest.main()
