#!/usr/bin/env python3
"""
Response generation for the OmniSmart assistant.

``generate_response`` is a pure lookup: it picks the sector agent and returns
its first matching canned response. The follow-up builders produce the cart
and payment messages that answer suggested actions.
"""

from typing import Dict, Optional, Union

from ..agents.base_agent import BaseAgent
from ..agents.education_agent import EducationAgent
from ..agents.general_agent import GeneralAgent
from ..agents.healthcare_agent import HealthcareAgent
from ..agents.retail_agent import RetailAgent
from ..schemas.io_models import AssistantResponse, QRReceipt, Sector, SuggestedAction

AGENT_MAP: Dict[Sector, BaseAgent] = {
    Sector.retail: RetailAgent(),
    Sector.education: EducationAgent(),
    Sector.healthcare: HealthcareAgent(),
    Sector.general: GeneralAgent(),
}


def generate_response(query: str, sector: Optional[Union[Sector, str]]) -> AssistantResponse:
    """
    Map a free-text query to the canned response of its sector.

    Args:
        query: User text; matched lowercase by substring
        sector: Sector (or its string value); None means general

    Returns:
        The first matching rule's response, or the sector fallback
    """
    agent = AGENT_MAP[Sector(sector) if sector else Sector.general]
    return agent.handle(query)


def cart_added_response(sector: Union[Sector, str] = Sector.retail) -> AssistantResponse:
    return AssistantResponse(
        sector=Sector(sector),
        rule="cart_added",
        text=(
            "🛒 **Item added to cart!**\n\n"
            "✅ **Payment Options:**\n"
            "• 💳 **Online Payment** - Card/Digital wallet\n"
            "• 💵 **Pay at Store** - Hand cash to cashier\n\n"
            "🎯 **Next Steps:**\n"
            "1. Continue shopping or proceed to checkout\n"
            "2. I'll generate your unique QR code after payment\n"
            "3. Use QR for store exit verification\n\n"
            "Which payment method would you prefer?"
        ),
        actions=[
            SuggestedAction(label="Generate QR", kind="generate_qr", payload={"payment_method": "online"}),
        ],
    )


def payment_success_response(receipt: QRReceipt) -> AssistantResponse:
    return AssistantResponse(
        sector=receipt.sector,
        rule="payment_success",
        text=(
            "🎉 **Payment Successful!**\n\n"
            f"📱 **Your QR Code:** {receipt.id}\n\n"
            "✅ **QR Code Features:**\n"
            "• Product verification\n"
            "• Payment confirmation\n"
            "• Store exit pass\n"
            "• Purchase history\n\n"
            "💡 **CRM Recommendation:** After checkout, I'll show you better deals at other "
            "stores for future visits!\n\n"
            "Save this QR code for store exit! 📲"
        ),
    )
