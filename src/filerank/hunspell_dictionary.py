import sys

import phunspell  # type: ignore

from filerank.dictionary import Dictionary

class HunspellDictionary(Dictionary):
    def __init__(self, lang: str = "en_US"):
        self.lang = lang # e.g. 'de_DE'
        self.ps = None

        try:
            # Phunspell resolves the language against the dictionaries it ships
            self.ps = phunspell.Phunspell(self.lang)
        except Exception as e:
            print(f"WARNING: Failed to initialize Phunspell for {self.lang}: {e}. No word will be recognized.", file=sys.stderr)

    def is_available(self) -> bool:
        return self.ps is not None

    def contains(self, token: str) -> bool:
        if not self.ps or not token:
            return False # Fail closed
        try:
            return bool(self.ps.lookup(token))
        except Exception as e:
            print(f"ERROR: Hunspell lookup failed for {token!r}: {e}", file=sys.stderr)
            return False
