"""Controller / Orchestrator that routes queries to sector agents and keeps session state.

The agents themselves are pure; everything stateful (chat history, cart,
receipts) lives here and in the session manager.
"""
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from .cart import checkout
from .errors import CartError, UnsupportedActionError
from .generate import cart_added_response, generate_response, payment_success_response
from .session import SessionManager
from ..data.sectors import welcome_message
from ..nlu.rules import guess_sector
from ..schemas.io_models import (
    AssistantResponse,
    CartItem,
    ChatMessage,
    PaymentMethod,
    QRReceipt,
    Sector,
)
from ..utils.logger import get_logger

logger = get_logger()


class Controller:
    def __init__(self, session_manager: Optional[SessionManager] = None):
        self.session_manager = session_manager or SessionManager()

    def _record(self, session_id: str, role: str, content: str, sector: Optional[Sector] = None,
                response: Optional[AssistantResponse] = None) -> ChatMessage:
        message = ChatMessage(
            id=str(uuid.uuid4()),
            role=role,
            content=content,
            timestamp=datetime.now(),
            sector=sector,
            metadata=response.metadata if response else None,
            actions=response.actions if response else [],
        )
        self.session_manager.add_message(session_id, message.model_dump(mode="json"))
        return message

    def _reply(self, session_id: str, response: AssistantResponse) -> ChatMessage:
        return self._record(session_id, "assistant", response.text, response.sector, response)

    def handle_query(self, session_id: str, query: str, sector: Optional[Sector] = None) -> ChatMessage:
        logger.info(f"[WORKFLOW] 1. Controller received query: '{query}'")
        if sector is None:
            sector = guess_sector(query)
            logger.info(f"[WORKFLOW] 1a. No sector given, guessed '{sector.value}'")
        self._record(session_id, "user", query, sector)

        response = generate_response(query, sector)
        logger.info(f"[WORKFLOW] 2. Agent '{response.sector.value}' matched rule '{response.rule}'")
        return self._reply(session_id, response)

    def handle_action(self, session_id: str, kind: str, payload: Dict[str, Any],
                      sector: Sector = Sector.general) -> ChatMessage:
        logger.info(f"[WORKFLOW] Action '{kind}' for session {session_id}")
        if kind == "add_to_cart":
            rows = payload.get("items") or []
            if not rows:
                raise CartError("Add to cart needs at least one item")
            self.add_to_cart(session_id, [CartItem(**row) for row in rows])
            return self._reply(session_id, cart_added_response(sector))
        if kind == "generate_qr":
            method = payload.get("payment_method", PaymentMethod.online.value)
            receipt = self.checkout(session_id, method, sector)
            return self._reply(session_id, payment_success_response(receipt))
        raise UnsupportedActionError(f"Action '{kind}' is handled by the client")

    def add_to_cart(self, session_id: str, items: List[CartItem]):
        cart = self.session_manager.get_cart(session_id)
        for item in items:
            cart.add_item(item)
        self.session_manager.save_cart(session_id, cart)
        return cart

    def checkout(self, session_id: str, method, sector: Sector = Sector.retail) -> QRReceipt:
        cart = self.session_manager.get_cart(session_id)
        receipt = checkout(cart, method, sector)
        self.session_manager.save_cart(session_id, cart)
        logger.info(f"[WORKFLOW] Checkout {receipt.id}: ${receipt.total_amount:.2f} via {receipt.payment_method.value}")
        return receipt

    def welcome(self, session_id: str, sector: Sector) -> ChatMessage:
        return self._record(session_id, "assistant", welcome_message(sector), sector)
