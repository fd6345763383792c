"""General Agent: catch-all for the general services sector."""
from typing import List

from .base_agent import BaseAgent, KeywordRule
from ..schemas.io_models import Sector


class GeneralAgent(BaseAgent):
    name = "general"
    sector = Sector.general
    fallback_text = (
        "I can help you find various services and facilities in your area:\n"
        "• Shopping & retail stores\n"
        "• Schools and colleges\n"
        "• Hospitals and clinics\n"
        "• Public services (city hall, library, post office)\n\n"
        "Pick a sector or tell me what you're looking for! 🧭"
    )

    def build_rules(self) -> List[KeywordRule]:
        return []
