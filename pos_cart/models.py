"""POS Cart Data Models"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class PaymentState(str, Enum):
    """Payment flow state reported by the POS terminal"""
    IDLE = "idle"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class DiscountType(str, Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


class _Record(BaseModel):
    """Immutable record parsed from the cart API.

    Field names are the exact JSON keys; keys the client does not know about
    are ignored.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")


class CartItem(_Record):
    """Line item in the current cart"""
    id: str
    productId: str
    name: str
    quantity: int
    price: float
    total: float
    weight: Optional[float] = None
    unit: Optional[str] = None
    # Extra product details sent by newer POS builds
    variantId: Optional[str] = None
    originalPrice: Optional[float] = None
    memberPrice: Optional[float] = None
    source: Optional[str] = None
    discount: Optional[float] = None
    barcode: Optional[str] = None
    sku: Optional[str] = None
    cost: Optional[float] = None
    soldBy: Optional[str] = None


class Customer(_Record):
    """Customer attached to the cart"""
    id: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None


class Discount(_Record):
    """Cart-level discount"""
    type: str  # "percentage" or "fixed"
    value: float

    @property
    def is_percentage(self) -> bool:
        return self.type == DiscountType.PERCENTAGE.value


class Tax(_Record):
    rate: float
    amount: float


class Cart(_Record):
    """Current contents of the POS cart"""
    items: tuple[CartItem, ...] = ()
    discount: Optional[Discount] = None
    tax: Optional[Tax] = None
    customer: Optional[Customer] = None
    notes: Optional[str] = None
    total: float
    lastUpdated: str

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def item_count(self) -> int:
        """Total quantity across all line items"""
        return sum(item.quantity for item in self.items)


class PaymentStatus(_Record):
    """Payment progress for the current cart"""
    status: str
    timestamp: Optional[str] = None
    amount: Optional[float] = None
    method: Optional[str] = None
    transactionId: Optional[str] = None

    @property
    def state(self) -> Optional[PaymentState]:
        """Known payment state, or None for a status this client does not recognize"""
        try:
            return PaymentState(self.status)
        except ValueError:
            return None

    @property
    def is_completed(self) -> bool:
        return self.state == PaymentState.COMPLETED

    @property
    def is_failed(self) -> bool:
        return self.state == PaymentState.FAILED


class CartResponse(_Record):
    """Envelope returned by GET /cart"""
    success: bool
    cart: Optional[Cart] = None
    timestamp: Optional[str] = None
    error: Optional[str] = None

    def unwrap(self) -> Optional[Cart]:
        """Cart payload, only when the server reports success"""
        return self.cart if self.success else None


class PaymentResponse(_Record):
    """Envelope returned by GET /cart/payment"""
    success: bool
    paymentStatus: Optional[PaymentStatus] = None

    def unwrap(self) -> Optional[PaymentStatus]:
        return self.paymentStatus if self.success else None
