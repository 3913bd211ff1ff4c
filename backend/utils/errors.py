# backend/utils/errors.py
# Local (non-network) failures of the storefront state layer.
# Backend failures surface as httpx.HTTPStatusError / httpx.RequestError.


class StorefrontError(Exception):
    """Base class for local storefront errors."""


class InvalidQuantity(StorefrontError, ValueError):
    def __init__(self, quantity):
        super().__init__(f"Quantity must be at least 1, got {quantity}")
        self.quantity = quantity


class EmptyCart(StorefrontError):
    def __init__(self):
        super().__init__("Cannot submit an order for an empty cart")


class UnknownShippingMethod(StorefrontError, ValueError):
    def __init__(self, method: str):
        super().__init__(f"Unknown shipping method: {method}")
        self.method = method
