import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Float, DateTime, JSON
from checkout_service.database import Base


def _new_order_id():
    return uuid.uuid4().hex


def _utcnow():
    return datetime.now(timezone.utc)


class Order(Base):
    __tablename__ = "orders"

    id = Column(String, primary_key=True, default=_new_order_id)
    user_id = Column(String, index=True)
    items = Column(JSON)                           # cart items, request order
    total = Column(Float)
    customer_info = Column(JSON)
    stripe_session_id = Column(String, index=True)  # Stripe Checkout Session ID
    created_at = Column(DateTime(timezone=True), default=_utcnow)
