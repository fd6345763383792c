"""BaseAgent interface for all sector agents."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from ..nlu.rules import Predicate
from ..schemas.io_models import AssistantResponse, CartItem, ResponseMetadata, Sector, SuggestedAction


@dataclass(frozen=True)
class KeywordRule:
    """One (predicate, canned response) entry of a sector table."""
    name: str
    predicate: Predicate
    text: str
    metadata: Optional[ResponseMetadata] = None
    actions: List[SuggestedAction] = field(default_factory=list)


def directions_action(location: str) -> SuggestedAction:
    return SuggestedAction(label="Directions", kind="directions", payload={"location": location})


def add_to_cart_action(products: List[str], item: CartItem) -> SuggestedAction:
    """Add to Cart carries the cart row it adds, so the server can act on it as sent."""
    return SuggestedAction(
        label="Add to Cart",
        kind="add_to_cart",
        payload={
            "products": list(products),
            "location": item.location,
            "items": [item.model_dump()],
        },
    )


class BaseAgent(ABC):
    name: str = "base"
    sector: Sector = Sector.general
    fallback_text: str = ""

    def __init__(self):
        self.rules: List[KeywordRule] = self.build_rules()

    @abstractmethod
    def build_rules(self) -> List[KeywordRule]:
        """Return the ordered rule table; the first matching rule wins."""
        ...

    def handle(self, query: str) -> AssistantResponse:
        q = (query or "").lower()
        for rule in self.rules:
            if rule.predicate(q):
                return self._ok(rule)
        return self._fallback()

    def _ok(self, rule: KeywordRule) -> AssistantResponse:
        # fresh copies so callers can't mutate the shared table
        return AssistantResponse(
            sector=self.sector,
            rule=rule.name,
            text=rule.text,
            metadata=rule.metadata.model_copy(deep=True) if rule.metadata else None,
            actions=[a.model_copy(deep=True) for a in rule.actions],
        )

    def _fallback(self) -> AssistantResponse:
        return AssistantResponse(sector=self.sector, rule="fallback", text=self.fallback_text)
