# backend/utils/cart_store.py
import logging
import uuid
from decimal import Decimal
from typing import Dict, List, Optional
from pydantic import ValidationError

from config import settings
from schemas.cart import CartLine, CartPayload, LineIdentity, ProductId, ProductSnapshot
from utils.errors import InvalidQuantity
from utils.money import round_money
from utils.storage import SlotStorage

logger = logging.getLogger(__name__)

# Stock hint used when the product does not report its stock
DEFAULT_MAX_QUANTITY = 10


class CartStore:
    """Authoritative cart lines for the session, mirrored into a storage slot.

    The in-memory lines are the source of truth. After every mutation the
    whole collection is written to the slot before the call returns.
    Concurrent writers (several tabs or processes on one slot) are not
    coordinated: the last write wins.
    """

    def __init__(self, storage: SlotStorage, key: str = settings.CART_STORAGE_KEY):
        self.storage = storage
        self.key = key
        self._lines: Dict[str, CartLine] = {}
        self._load()

    # --- persistence ---

    def _load(self) -> None:
        payload = self.storage.get_item(self.key)
        if not payload:
            return
        try:
            lines = CartPayload.validate_json(payload)
        except ValidationError as e:
            logger.warning(f"Error loading cart from storage, starting empty: {e}")
            return

        for line in lines:
            existing = self.find_line(*line.identity)
            if existing:
                existing.quantity += line.quantity
            else:
                self._lines[line.line_id] = line

    def _persist(self) -> None:
        payload = CartPayload.dump_json(list(self._lines.values()), by_alias=True)
        self.storage.set_item(self.key, payload.decode())

    # --- mutations ---

    def add_item(
        self,
        product: ProductSnapshot,
        quantity: int = 1,
        size: Optional[str] = None,
        color: Optional[str] = None,
    ) -> CartLine:
        if quantity < 1:
            raise InvalidQuantity(quantity)

        line = self.find_line(product.id, size, color)
        if line:
            # No clamp to max_quantity here
            line.quantity += quantity
        else:
            line = CartLine(
                line_id=uuid.uuid4().hex,
                product_id=product.id,
                name=product.name,
                unit_price=product.price,
                image_ref=product.image_ref,
                size=size,
                color=color,
                quantity=quantity,
                max_quantity=product.stock or DEFAULT_MAX_QUANTITY,
            )
            self._lines[line.line_id] = line

        self._persist()
        logger.info(f"{product.name} added to cart")
        return line

    def update_quantity(self, line_id: str, new_quantity: int) -> None:
        line = self._lines.get(line_id)
        if line is None:
            return

        if new_quantity <= 0:
            del self._lines[line_id]
            logger.info("Item removed from cart")
        else:
            line.quantity = new_quantity
        self._persist()

    def remove_item(self, line_id: str) -> None:
        if self._lines.pop(line_id, None) is None:
            return
        self._persist()
        logger.info("Item removed from cart")

    def clear(self) -> None:
        self._lines.clear()
        self._persist()
        logger.info("Cart cleared")

    # --- queries ---

    def get_total(self) -> Decimal:
        return round_money(sum((line.line_total for line in self._lines.values()), Decimal("0")))

    def get_item_count(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    def find_line(
        self,
        product_id: ProductId,
        size: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Optional[CartLine]:
        identity = LineIdentity(product_id, size, color)
        for line in self._lines.values():
            if line.identity == identity:
                return line
        return None

    def is_in_cart(self, product_id: ProductId, size: Optional[str] = None, color: Optional[str] = None) -> bool:
        return self.find_line(product_id, size, color) is not None

    def get_line(self, line_id: str) -> Optional[CartLine]:
        return self._lines.get(line_id)

    @property
    def lines(self) -> List[CartLine]:
        return list(self._lines.values())

    def __len__(self) -> int:
        return len(self._lines)
