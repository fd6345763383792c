"""Retail Agent: in-store product locations for clothing and groceries."""
from typing import List

from .base_agent import BaseAgent, KeywordRule, add_to_cart_action, directions_action
from ..nlu.rules import CLOTHING, GROCERY, OCCASION, PANTS, all_of, any_of
from ..schemas.io_models import CartItem, ResponseMetadata, Sector

FORMAL_SHIRTS_LOCATION = "2nd floor, Column 3, Line 3"
CASUAL_SHIRTS_LOCATION = "2nd floor, Column 3, Line 2"
PANTS_LOCATION = "2nd floor, Column 2, Line 1"
GROCERY_LOCATION = "Ground floor, Section A"

# Shelf picks offered by Add to Cart; ids and prices match data/raw/products.json
FORMAL_SHIRT_ITEM = CartItem(id="pr-001", name="Organic Cotton Formal Shirt", price=34.99,
                             location=FORMAL_SHIRTS_LOCATION)
CASUAL_SHIRT_ITEM = CartItem(id="pr-002", name="Casual Denim Shirt", price=24.5,
                             location=CASUAL_SHIRTS_LOCATION)
PANTS_ITEM = CartItem(id="pr-003", name="Stretch Chino Pants", price=29.0, location=PANTS_LOCATION)


class RetailAgent(BaseAgent):
    name = "retail"
    sector = Sector.retail
    fallback_text = (
        "I can help you find products in our store! Try searching for:\n"
        "• Clothing items (shirts, pants, dresses)\n"
        "• Electronics\n"
        "• Groceries\n"
        "• Home goods\n\n"
        "I'll provide exact locations like '2nd floor, column 3, line 2' for easy navigation! 🧭"
    )

    def build_rules(self) -> List[KeywordRule]:
        return [
            KeywordRule(
                name="formal_shirts",
                predicate=all_of(any_of(*CLOTHING), any_of(*OCCASION)),
                text=(
                    "🎯 Found party wear shirts for you!\n\n"
                    f"📍 **Location:** {FORMAL_SHIRTS_LOCATION}\n"
                    "🏷️ **Section:** Party Wear & Formal Shirts\n"
                    "💰 **Price Range:** $25 - $85\n"
                    "⭐ **Top Brands:** Available\n\n"
                    "🛒 Would you like me to add any specific shirts to your cart "
                    "or show you directions to this section?"
                ),
                metadata=ResponseMetadata(location=FORMAL_SHIRTS_LOCATION, products=["shirts", "party wear"]),
                actions=[
                    add_to_cart_action(["shirts", "party wear"], FORMAL_SHIRT_ITEM),
                    directions_action(FORMAL_SHIRTS_LOCATION),
                ],
            ),
            KeywordRule(
                name="shirts",
                predicate=any_of(*CLOTHING),
                text=(
                    "👔 Found shirts section!\n\n"
                    f"📍 **Location:** {CASUAL_SHIRTS_LOCATION}\n"
                    "🏷️ **Section:** Casual & Regular Shirts\n"
                    "💰 **Price Range:** $15 - $60\n"
                    "📦 **Stock:** Well stocked\n\n"
                    "🛒 Would you like me to help you add items to cart or get directions?"
                ),
                metadata=ResponseMetadata(location=CASUAL_SHIRTS_LOCATION, products=["shirts"]),
                actions=[
                    add_to_cart_action(["shirts"], CASUAL_SHIRT_ITEM),
                    directions_action(CASUAL_SHIRTS_LOCATION),
                ],
            ),
            KeywordRule(
                name="pants",
                predicate=any_of(*PANTS),
                text=(
                    "👖 Found pants section!\n\n"
                    f"📍 **Location:** {PANTS_LOCATION}\n"
                    "🏷️ **Section:** Pants & Trousers\n"
                    "💰 **Price Range:** $20 - $70\n"
                    "📏 **Sizes:** All sizes available\n\n"
                    "🛒 Ready to add to cart or need directions?"
                ),
                metadata=ResponseMetadata(location=PANTS_LOCATION, products=["pants"]),
                actions=[
                    add_to_cart_action(["pants"], PANTS_ITEM),
                    directions_action(PANTS_LOCATION),
                ],
            ),
            KeywordRule(
                name="grocery",
                predicate=any_of(*GROCERY),
                text=(
                    "🛒 Grocery section found!\n\n"
                    f"📍 **Location:** {GROCERY_LOCATION}\n"
                    "🥬 **Fresh Produce:** Aisle 1-3\n"
                    "🥫 **Packaged Foods:** Aisle 4-8\n"
                    "🥛 **Dairy:** Aisle 9\n\n"
                    "💳 Payment options: Card, Cash, Digital wallets available!"
                ),
                metadata=ResponseMetadata(location=GROCERY_LOCATION),
                actions=[directions_action(GROCERY_LOCATION)],
            ),
        ]
