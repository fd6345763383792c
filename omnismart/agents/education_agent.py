"""Education Agent: recommends institutions and admission help."""
from typing import List

from .base_agent import BaseAgent, KeywordRule
from ..nlu.rules import INSTITUTION, any_of
from ..schemas.io_models import ResponseMetadata, Sector, SuggestedAction

TOP_INSTITUTIONS = [
    ("Seattle University", "$45,000/year"),
    ("University of Washington", "$38,000/year"),
    ("Seattle Pacific University", "$42,000/year"),
    ("Cornish College", "$35,000/year"),
    ("Seattle Central College", "$15,000/year"),
]


def _top_institutions_text() -> str:
    lines = [f"{i}. {name} - {fee}" for i, (name, fee) in enumerate(TOP_INSTITUTIONS, 1)]
    return (
        "🎓 **Top 5 Recommended Institutions:**\n\n"
        "⭐ **Premium Recommendations:**\n"
        + "\n".join(lines)
        + "\n\n📚 **Other Options:** 10 more institutions available\n\n"
        "💰 Would you like admission details or payment processing for any of these?"
    )


class EducationAgent(BaseAgent):
    name = "education"
    sector = Sector.education
    fallback_text = (
        "I can help you find educational institutions! I provide:\n"
        "• Top 5 recommended schools/colleges\n"
        "• Admission requirements & fees\n"
        "• Application processes\n"
        "• Payment assistance\n\n"
        "What type of education are you looking for? 📚"
    )

    def build_rules(self) -> List[KeywordRule]:
        names = [name for name, _ in TOP_INSTITUTIONS]
        return [
            KeywordRule(
                name="top_institutions",
                predicate=any_of(*INSTITUTION),
                text=_top_institutions_text(),
                metadata=ResponseMetadata(recommendations=names),
                actions=[
                    SuggestedAction(
                        label="Admission Details",
                        kind="admission_details",
                        payload={"institutions": names},
                    ),
                ],
            ),
        ]
