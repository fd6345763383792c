"""Healthcare Agent: hospital recommendations and appointment hints."""
from typing import List

from .base_agent import BaseAgent, KeywordRule
from ..nlu.rules import MEDICAL, any_of
from ..schemas.io_models import ResponseMetadata, Sector, SuggestedAction

TOP_HOSPITALS = [
    "Seattle Children's Hospital",
    "UW Medical Center",
    "Swedish Medical Center",
    "Virginia Mason Medical",
    "Harborview Medical Center",
]


class HealthcareAgent(BaseAgent):
    name = "healthcare"
    sector = Sector.healthcare
    fallback_text = (
        "I can help with healthcare services:\n"
        "• Find nearby hospitals\n"
        "• Recommend top medical centers\n"
        "• Medicine availability\n"
        "• Appointment booking\n"
        "• Payment processing\n\n"
        "What healthcare service do you need? 🏥"
    )

    def build_rules(self) -> List[KeywordRule]:
        listing = "\n".join(f"{i}. {name}" for i, name in enumerate(TOP_HOSPITALS, 1))
        return [
            KeywordRule(
                name="top_hospitals",
                predicate=any_of(*MEDICAL),
                text=(
                    "🏥 **Top 5 Recommended Hospitals:**\n\n"
                    "⭐ **Premium Care:**\n"
                    f"{listing}\n\n"
                    "💊 **Services:** Diagnostics, medicines, consultations\n"
                    "💳 **Payment:** Insurance, cash, online payments\n\n"
                    "🏥 Need appointment booking or medicine information?"
                ),
                metadata=ResponseMetadata(recommendations=list(TOP_HOSPITALS)),
                actions=[
                    SuggestedAction(
                        label="Book Appointment",
                        kind="book_appointment",
                        payload={"hospitals": list(TOP_HOSPITALS)},
                    ),
                    SuggestedAction(label="Medicine Info", kind="medicine_info", payload={}),
                ],
            ),
        ]
