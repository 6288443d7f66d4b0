"""Polling monitor for the customer display"""

import asyncio
import logging
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import AsyncIterator, Optional

from .client import CartClient, CartClientError, MalformedResponseError
from .config import get_settings
from .models import Cart, PaymentStatus

logger = logging.getLogger(__name__)


@dataclass
class MonitorState:
    """Latest cart and payment state seen by the monitor"""
    cart: Optional[Cart] = None
    payment_status: Optional[PaymentStatus] = None
    is_loading: bool = True
    error_message: Optional[str] = None
    last_polled_at: Optional[datetime] = None


class CartMonitor:
    """
    Polls the cart API at a fixed interval.

    Every tick issues one cart request and one payment status request and
    records the outcome in ``state``. Errors are recorded, never raised, and a
    failed tick is not re-issued; the next tick simply polls again.
    """

    def __init__(self, client: CartClient, poll_interval: Optional[float] = None):
        self.client = client
        self.poll_interval = (
            poll_interval if poll_interval is not None else get_settings().poll_interval
        )
        self.state = MonitorState()
        self._stop_event: Optional[asyncio.Event] = None
        self._stop_requested = False

    async def poll_cart(self) -> Optional[Cart]:
        try:
            cart_response = await self.client.fetch_cart_response()
        except MalformedResponseError as e:
            logger.error(f"Malformed cart response: {e}")
            self.state.error_message = f"Malformed response: {e}"
        except CartClientError as e:
            logger.error(f"Exception in polling cart: {e}")
            self.state.error_message = f"Network error: {e}"
        else:
            if cart_response is None:
                self.state.cart = None
                self.state.error_message = "No response from server"
            elif not cart_response.success:
                self.state.cart = None
                self.state.error_message = cart_response.error or "Unknown error from API"
            else:
                self.state.cart = cart_response.cart
                self.state.error_message = None
        finally:
            self.state.is_loading = False

        return self.state.cart

    async def poll_payment_status(self) -> Optional[PaymentStatus]:
        try:
            self.state.payment_status = await self.client.get_payment_status()
        except CartClientError as e:
            logger.error(f"Exception in polling payment status: {e}")

        return self.state.payment_status

    async def tick(self) -> MonitorState:
        """Poll both endpoints once and return a snapshot of the state"""
        await asyncio.gather(self.poll_cart(), self.poll_payment_status())
        self.state.last_polled_at = datetime.now(timezone.utc)
        return replace(self.state)

    async def snapshots(self, iterations: Optional[int] = None) -> AsyncIterator[MonitorState]:
        """
        Yield a state snapshot after every tick until stopped.

        A stop() issued before polling starts is honored: no tick runs. Once
        polling ends the stop request is cleared so the monitor can run again.
        """
        # Bound to the running loop, not the one current at construction time
        self._stop_event = asyncio.Event()
        if self._stop_requested:
            self._stop_event.set()
        count = 0

        try:
            while not self._stop_event.is_set():
                yield await self.tick()
                count += 1
                if iterations is not None and count >= iterations:
                    break

                try:
                    await asyncio.wait_for(self._stop_event.wait(), timeout=self.poll_interval)
                except asyncio.TimeoutError:
                    pass
        finally:
            self._stop_event = None
            self._stop_requested = False

    async def run(self, iterations: Optional[int] = None) -> MonitorState:
        """Poll until stopped or until ``iterations`` ticks have run"""
        logger.info(f"Monitoring {self.client.base_url} every {self.poll_interval}s")
        async for _ in self.snapshots(iterations):
            pass
        return self.state

    def stop(self) -> None:
        self._stop_requested = True
        if self._stop_event is not None:
            self._stop_event.set()
