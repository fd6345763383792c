#!/usr/bin/env python3
"""
Shopping cart and checkout for the OmniSmart assistant.

Carts are plain item lists kept per session; checkout turns a cart into a
placeholder QR receipt. The QR id is a random string, nothing is encoded.
"""

import random
import string
import time
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from .errors import CartError
from ..schemas.io_models import CartItem, PaymentMethod, PaymentStatus, QRReceipt, Sector

_BASE36 = string.digits + string.ascii_lowercase


class ShoppingCart:
    def __init__(self, items: Optional[List[CartItem]] = None):
        self.items: List[CartItem] = list(items or [])

    def _find(self, item_id: str) -> Optional[CartItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def add_item(self, item: CartItem):
        """Add an item to the cart or update quantity if it already exists."""
        existing = self._find(item.id)
        if existing:
            existing.quantity += item.quantity
            return
        self.items.append(item.model_copy())

    def change_quantity(self, item_id: str, delta: int) -> bool:
        """Step a quantity up or down; a change that would go below 1 is ignored."""
        item = self._find(item_id)
        if item is None:
            return False
        new_quantity = item.quantity + delta
        if new_quantity < 1:
            return False
        item.quantity = new_quantity
        return True

    def update_quantity(self, item_id: str, quantity: int):
        if quantity < 1:
            raise CartError(f"Quantity must be at least 1, got {quantity}")
        item = self._find(item_id)
        if item is None:
            raise CartError(f"Item '{item_id}' is not in the cart")
        item.quantity = quantity

    def remove_item(self, item_id: str) -> bool:
        """Remove an item from the cart."""
        before = len(self.items)
        self.items = [item for item in self.items if item.id != item_id]
        return len(self.items) < before

    def clear(self):
        """Clear the entire cart."""
        self.items = []

    def is_empty(self) -> bool:
        return not self.items

    def get_total(self) -> float:
        """Calculate the total price of items in the cart."""
        return sum(item.price * item.quantity for item in self.items)

    def get_summary(self) -> str:
        """Generate a summary of the cart contents."""
        summary = []
        for item in self.items:
            where = f" ({item.location})" if item.location else ""
            summary.append(f"- {item.quantity}x {item.name}{where}: ${item.price * item.quantity:.2f}")
        summary.append(f"\nTotal: ${self.get_total():.2f}")
        return "\n".join(summary)

    def to_dict(self) -> Dict[str, Any]:
        return {"items": [item.model_dump() for item in self.items]}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ShoppingCart":
        if not data:
            return cls()
        return cls([CartItem(**row) for row in data.get("items", [])])


def generate_qr_code() -> str:
    suffix = "".join(random.choices(_BASE36, k=9))
    return f"QR-{int(time.time() * 1000)}-{suffix}"


def checkout(cart: ShoppingCart, method: Union[PaymentMethod, str],
             sector: Union[Sector, str] = Sector.retail) -> QRReceipt:
    """
    Pay for the cart and issue a QR receipt.

    Online payments complete immediately; cash is pending until paid at the store.
    The cart is emptied on success.
    """
    if cart.is_empty():
        raise CartError("Cannot check out an empty cart")

    try:
        method = PaymentMethod(method)
    except ValueError:
        raise CartError(f"Unsupported payment method '{method}'")
    status = PaymentStatus.completed if method == PaymentMethod.online else PaymentStatus.pending
    receipt = QRReceipt(
        id=generate_qr_code(),
        items=[item.model_copy() for item in cart.items],
        total_amount=round(cart.get_total(), 2),
        payment_method=method,
        payment_status=status,
        timestamp=datetime.now(),
        sector=Sector(sector),
    )
    cart.clear()
    return receipt
