from filerank.config import build_ranker

_ranker = None

def _default_ranker():
    global _ranker
    if _ranker is None:
        _ranker = build_ranker()
    return _ranker

def rank(path):
    """
    rank(path: string) -> Score or None, using the configured dictionary
    """
    return _default_ranker().rank(path)

def best(candidates):
    return _default_ranker().best(candidates)

def ordered(candidates):
    return _default_ranker().ordered(candidates)
