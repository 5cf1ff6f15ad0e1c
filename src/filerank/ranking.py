import functools
import os
import re
from dataclasses import dataclass
from pathlib import PurePath
from typing import Iterable, List, Optional, Tuple, Union

from filerank.dictionary import Dictionary

PathInput = Union[str, bytes, os.PathLike]

# "name (1)", "name (0042)": a rename done to dodge a collision
DUPLICATE_MARKER = re.compile(r".+ \(\d+\)", re.DOTALL)


@functools.total_ordering
@dataclass(frozen=True)
class Score:
    """
    Comparable summary of one filename.

    Ordering, most significant first:
      1. more dictionary hits wins
      2. no duplicate marker beats a duplicate marker
      3. longer base name wins (longer, not shorter: kept as is)
    """
    dictionary_hits: int
    has_duplicate_marker: bool
    length: int

    def _compare(self, other: "Score") -> int:
        if self.dictionary_hits != other.dictionary_hits:
            return 1 if self.dictionary_hits > other.dictionary_hits else -1

        if self.has_duplicate_marker != other.has_duplicate_marker:
            return -1 if self.has_duplicate_marker else 1

        if self.length != other.length:
            return 1 if self.length > other.length else -1
        return 0

    def __lt__(self, other):
        if not isinstance(other, Score):
            return NotImplemented
        return self._compare(other) < 0


def file_name(path: PathInput) -> Optional[str]:
    """
    Final path segment as text, or None when there is none.
    """
    path = os.fspath(path)
    if isinstance(path, bytes):
        path = os.fsdecode(path)

    name = PurePath(path).name
    if not name or name == "..":
        return None

    # Undecodable bytes come back as lone surrogates
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return name


def without_extension(name: str) -> str:
    # Last dot only: "notes.final.txt" -> "notes.final", ".bashrc" -> ""
    idx = name.rfind(".")
    return name[:idx] if idx != -1 else name


class Ranker:
    def __init__(self, dictionary: Dictionary):
        self.dictionary = dictionary
        self.marker_pattern = DUPLICATE_MARKER

    def rank(self, path: PathInput) -> Optional[Score]:
        """
        Score a candidate path or bare filename.
        Returns None if no filename can be extracted; such candidates
        are not comparable and should be left out of the ranking.
        """
        name = file_name(path)
        if name is None:
            return None
        base = without_extension(name)

        return Score(
            dictionary_hits=self._dictionary_hits(base),
            has_duplicate_marker=self._has_duplicate_marker(base),
            length=len(base),
        )

    def best(self, candidates: Iterable[PathInput]) -> Optional[PathInput]:
        """Candidate with the greatest score; earliest one wins a tie."""
        winner = None
        winner_score = None
        for candidate in candidates:
            score = self.rank(candidate)
            if score is None:
                continue
            if winner_score is None or score > winner_score:
                winner, winner_score = candidate, score
        return winner

    def ordered(self, candidates: Iterable[PathInput]) -> List[PathInput]:
        scored: List[Tuple[Score, PathInput]] = []
        for candidate in candidates:
            score = self.rank(candidate)
            if score is not None:
                scored.append((score, candidate))

        # Stable, so equal scores keep their input order
        scored.sort(key=lambda x: x[0], reverse=True)
        return [c[1] for c in scored]

    def _dictionary_hits(self, base: str) -> int:
        return sum(1 for token in base.split() if self.dictionary.contains(token))

    def _has_duplicate_marker(self, base: str) -> bool:
        return self.marker_pattern.fullmatch(base) is not None
