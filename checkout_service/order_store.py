from checkout_service.database import session_scope
from checkout_service.models import Order
from checkout_service.logging_config import get_logger

log = get_logger(__name__)


def save_order(order: Order) -> Order:
    """Insert a new order and return it with its generated id."""
    with session_scope() as db:
        db.add(order)
        db.flush()
        db.refresh(order)
        db.expunge(order)

    log.info(f"[Order: {order.id}] Saved (session {order.stripe_session_id}, total {order.total:.2f}).")
    return order
