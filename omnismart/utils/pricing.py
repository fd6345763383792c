"""Price display helpers."""
from typing import Optional

from ..schemas.io_models import PriceInfo


def format_price(price: float, discount: Optional[float] = 0) -> PriceInfo:
    """Apply a percentage discount and render both prices with two decimals."""
    discount = discount or 0
    final = price * (1 - discount / 100)
    return PriceInfo(original=f"{price:.2f}", final=f"{final:.2f}", has_discount=discount > 0)
