import math
from typing import Any, Dict, List, Optional

import stripe

from checkout_service.logging_config import get_logger

log = get_logger(__name__)


def unit_amount(price: float) -> int:
    """Price in the smallest currency unit, half a cent rounding up."""
    return int(math.floor(price * 100 + 0.5))


def to_line_items(items, currency: str = "usd") -> List[Dict[str, Any]]:
    return [
        {
            "price_data": {
                "currency": currency,
                "product_data": {"name": item.label},
                "unit_amount": unit_amount(item.price),
            },
            "quantity": item.quantity,
        }
        for item in items
    ]


def order_total(items) -> float:
    return sum(item.price * item.quantity for item in items)


def success_url(origin: Optional[str]) -> str:
    # {CHECKOUT_SESSION_ID} is substituted by Stripe on redirect
    return f"{origin}/success?session_id={{CHECKOUT_SESSION_ID}}"


def cancel_url(origin: Optional[str]) -> str:
    return f"{origin}/cart"


class StripeGateway:
    """
    Stripe Checkout client, built once at startup and shared by every request.
    """

    def __init__(self, api_key: str):
        self.api_key = api_key

    def create_session(
        self,
        line_items: List[Dict[str, Any]],
        success_url: str,
        cancel_url: str,
        customer_email: Optional[str],
    ) -> Dict[str, Any]:
        """
        Creates a one-off payment Checkout Session.
        Returns: {"id": "cs_...", "url": "https://checkout.stripe.com/..."}
        Raises: stripe.StripeError on any gateway failure.
        """
        session = stripe.checkout.Session.create(
            api_key=self.api_key,
            payment_method_types=["card"],
            line_items=line_items,
            mode="payment",
            success_url=success_url,
            cancel_url=cancel_url,
            customer_email=customer_email,
        )
        log.info(f"[Session: {session['id']}] Stripe checkout session created.")
        return {"id": session["id"], "url": session["url"]}


def error_message(exc: Exception) -> str:
    """Client-facing text for a failed checkout."""
    if isinstance(exc, stripe.StripeError) and exc.user_message:
        return exc.user_message
    return str(exc) or exc.__class__.__name__
