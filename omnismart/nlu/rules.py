"""Rule-based keyword matching for the sector assistants.

Matching is plain lowercase substring containment: no tokenization, no fuzzy
matching, no scoring. Vocabularies below are shared by the sector agents and
by the sector guesser.
"""
from typing import Callable, Iterable, List, Tuple

from ..schemas.io_models import Sector

Predicate = Callable[[str], bool]

# Retail
CLOTHING = ["shirt", "clothing", "wear"]
OCCASION = ["party", "formal"]
PANTS = ["pants", "trouser"]
GROCERY = ["grocery", "food"]

# Education
INSTITUTION = ["school", "college", "university"]

# Healthcare
MEDICAL = ["hospital", "doctor", "medical"]

# Extra vocabulary only used to guess a sector when none was picked
SECTOR_HINTS: List[Tuple[Sector, List[str]]] = [
    (Sector.retail, CLOTHING + PANTS + GROCERY + ["shop", "store", "mall", "buy", "cart", "electronics"]),
    (Sector.education, INSTITUTION + ["admission", "tuition", "course", "degree"]),
    (Sector.healthcare, MEDICAL + ["clinic", "medicine", "appointment", "pharmacy"]),
]


def contains_any(query: str, vocab: Iterable[str]) -> bool:
    ql = query.lower()
    return any(word in ql for word in vocab)


def any_of(*words: str) -> Predicate:
    """Predicate matching when the query contains any of ``words``."""
    return lambda q: contains_any(q, words)


def all_of(*predicates: Predicate) -> Predicate:
    """Predicate matching when every one of ``predicates`` matches."""
    return lambda q: all(p(q) for p in predicates)


def guess_sector(query: str) -> Sector:
    for sector, vocab in SECTOR_HINTS:
        if contains_any(query, vocab):
            return sector
    return Sector.general
