"""
POS Cart API Client

HTTP client for the point-of-sale cart API.
Reads the cart shown on the customer display and the payment status of that cart.
"""

import logging
from typing import Optional, TypeVar, Union

import httpx
from pydantic import ValidationError

from .config import Settings, get_settings
from .models import Cart, CartResponse, PaymentResponse, PaymentStatus

logger = logging.getLogger(__name__)

CART_PATH = "/cart"
PAYMENT_PATH = "/cart/payment"

Envelope = TypeVar("Envelope", CartResponse, PaymentResponse)


class CartClientError(Exception):
    """Base exception for cart client errors"""
    pass


class NetworkError(CartClientError):
    """Transport failure: connection refused, timeout, DNS failure"""
    pass


class MalformedResponseError(CartClientError):
    """Response body is not valid JSON or does not match the expected envelope"""
    pass


class CartClient:
    """
    Client for the POS cart API.

    Both operations make a single GET request and unwrap the response envelope.
    A non-2xx status or an envelope with ``success: false`` gives ``None``;
    transport and parse failures raise.

    Usage:
        async with CartClient() as client:
            cart = await client.get_cart()
            payment = await client.get_payment_status()
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[Union[float, httpx.Timeout]] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize cart client.

        Args:
            base_url: Base URL of the cart API, defaults to the configured one
            timeout: Request timeout, defaults to the configured connect/read/write timeouts
            http_client: Pre-built httpx client; the caller keeps ownership of it
            settings: Settings to read defaults from
        """
        settings = settings or get_settings()
        self.base_url = (base_url or settings.base_url).rstrip("/")

        if http_client is not None:
            self._http_client = http_client
            self._owns_http_client = False
        else:
            self._http_client = httpx.AsyncClient(
                timeout=timeout if timeout is not None else settings.timeout()
            )
            self._owns_http_client = True

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "CartClient":
        """Create client from settings (environment by default)"""
        return cls(settings=settings or get_settings())

    async def __aenter__(self) -> "CartClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        """Close HTTP client"""
        if self._owns_http_client:
            await self._http_client.aclose()

    def _generate_headers(self) -> dict[str, str]:
        return {"Content-Type": "application/json"}

    async def _fetch(self, path: str, envelope: type[Envelope]) -> Optional[Envelope]:
        """
        GET a path and parse its envelope.

        Returns:
            Parsed envelope, or None when the server answers with a non-2xx status

        Raises:
            NetworkError: the request did not complete
            MalformedResponseError: the 2xx body could not be parsed
        """
        url = f"{self.base_url}{path}"

        try:
            response = await self._http_client.get(url, headers=self._generate_headers())
        except httpx.DecodingError as e:
            logger.error(f"Could not decode body from {url}: {e!r}")
            raise MalformedResponseError(f"Undecodable body from {url}: {e}") from e
        except httpx.RequestError as e:
            logger.error(f"GET {url} failed: {e!r}")
            raise NetworkError(f"GET {url} failed: {e}") from e

        logger.debug(f"GET {url} response code: {response.status_code}")

        if not response.is_success:
            logger.warning(f"GET {url} unsuccessful: {response.status_code}")
            return None

        try:
            return envelope.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Could not parse {envelope.__name__} from {url}: {e}")
            raise MalformedResponseError(
                f"Invalid {envelope.__name__} body from {url}"
            ) from e

    # ==================== Cart APIs ====================

    async def fetch_cart_response(self) -> Optional[CartResponse]:
        """
        Get the raw cart envelope.

        Unlike get_cart, a ``success: false`` envelope is returned as is so the
        caller can show the server's error text.
        """
        return await self._fetch(CART_PATH, CartResponse)

    async def get_cart(self) -> Optional[Cart]:
        """Get current cart contents"""
        cart_response = await self.fetch_cart_response()
        if cart_response is None:
            return None

        if not cart_response.success:
            logger.info(f"Cart API reported failure: {cart_response.error}")
        return cart_response.unwrap()

    async def fetch_payment_response(self) -> Optional[PaymentResponse]:
        """Get the raw payment status envelope"""
        return await self._fetch(PAYMENT_PATH, PaymentResponse)

    async def get_payment_status(self) -> Optional[PaymentStatus]:
        """Get payment status of the current cart"""
        payment_response = await self.fetch_payment_response()
        if payment_response is None:
            return None
        return payment_response.unwrap()
