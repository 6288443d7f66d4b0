# POS Cart API Client

from .client import CartClient, CartClientError, NetworkError, MalformedResponseError
from .config import Settings, get_settings
from .monitor import CartMonitor, MonitorState
from .models import (
    Cart,
    CartItem,
    CartResponse,
    Customer,
    Discount,
    DiscountType,
    PaymentResponse,
    PaymentState,
    PaymentStatus,
    Tax,
)

__all__ = [
    "CartClient",
    "CartClientError",
    "NetworkError",
    "MalformedResponseError",
    "Settings",
    "get_settings",
    "CartMonitor",
    "MonitorState",
    "Cart",
    "CartItem",
    "CartResponse",
    "Customer",
    "Discount",
    "DiscountType",
    "PaymentResponse",
    "PaymentState",
    "PaymentStatus",
    "Tax",
]
