"""
Order emails: composition of the owner alert and the customer confirmation,
and the background-task entry points that deliver them.

Both senders run after the HTTP response has been returned. Their failures
are logged here and never reach the caller.
"""

from checkout_service import config
from checkout_service.logging_config import get_logger

log = get_logger(__name__)


def _money(amount: float) -> str:
    return f"${amount:.2f}"


def item_lines(items) -> str:
    return "\n".join(
        f"- {item.label} × {item.quantity} = {_money(item.price * item.quantity)}"
        for item in items
    )


def owner_message(order, items, customer, origin):
    """Returns (subject, body) of the new-order alert sent to the shop mailbox."""
    subject = f"New Order #{order.id} - {config.SHOP_NAME}"
    body = "\n".join([
        "NEW ORDER RECEIVED!",
        "",
        f"Customer: {customer.name}",
        f"Email: {customer.email}",
        f"Phone: {customer.phone}",
        f"Address: {customer.address}",
        "",
        "Items:",
        item_lines(items),
        "",
        f"Total: {_money(order.total)}",
        "",
        "Payment: Processing via Stripe",
        f"View in Dashboard: {origin}/admin/orders",
    ])
    return subject, body


def customer_message(order, customer):
    """Returns (subject, body) of the confirmation sent to the customer."""
    subject = f"Order Confirmed - {config.SHOP_NAME}"
    body = "\n".join([
        f"Hi {customer.name},",
        "",
        "Thank you for your order! We've received your payment and are preparing your items.",
        "",
        f"Order ID: #{order.id}",
        f"Total: {_money(order.total)}",
        "",
        "We'll notify you when it ships.",
        "",
        "Questions? Reply to this email.",
        "",
        f"- {config.SHOP_NAME}",
    ])
    return subject, body


def send_owner_notification(mailer, order_id: str, subject: str, body: str):
    try:
        result = mailer.send(config.EMAIL_USER, config.EMAIL_USER, subject, body)
    except Exception as e:
        log.error(f"[Order: {order_id}] Owner notification failed: {e}")
        return
    log.info(f"[Order: {order_id}] Owner notification sent: {result}")


def send_customer_confirmation(mailer, order_id: str, to: str, subject: str, body: str):
    try:
        mailer.send(config.EMAIL_USER, to, subject, body)
    except Exception as e:
        log.warning(f"[Order: {order_id}] Customer confirmation to {to!r} not delivered: {e}")
