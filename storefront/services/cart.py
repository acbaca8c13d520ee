from typing import Dict

from storefront.core.errors import UserNotFound
from storefront.core.logging import get_logger
from storefront.services.credentials import CredentialStore

logger = get_logger(__name__)


def seed_cart(size: int) -> Dict[int, int]:
    """Cart a new account starts with: ids [0, size) all at zero."""
    return {item_id: 0 for item_id in range(size)}


class CartEngine:
    """Per-user item counters, read and written through the CredentialStore.

    Each call loads the cart, changes at most one key and writes the whole
    mapping back. Nothing is cached between requests.
    """

    def __init__(self, store: CredentialStore):
        self.store = store

    def snapshot(self, user_id: str) -> Dict[int, int]:
        user = self.store.find_by_id(user_id)
        if user is None:
            raise UserNotFound(user_id)
        return {int(item_id): quantity for item_id, quantity in (user.cart_data or {}).items()}

    def increment(self, user_id: str, item_id: int) -> int:
        cart = self.snapshot(user_id)
        cart[item_id] = cart.get(item_id, 0) + 1
        self.store.update_cart(user_id, cart)
        logger.info("cart.increment", user_id=user_id, item_id=item_id, quantity=cart[item_id])
        return cart[item_id]

    def decrement(self, user_id: str, item_id: int) -> int:
        cart = self.snapshot(user_id)
        quantity = cart.get(item_id, 0)
        if quantity > 0:
            cart[item_id] = quantity - 1
        # Written back even when unchanged, same as an increment
        self.store.update_cart(user_id, cart)
        logger.info("cart.decrement", user_id=user_id, item_id=item_id, quantity=cart.get(item_id, 0))
        return cart.get(item_id, 0)
