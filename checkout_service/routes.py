from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Header, Request
from fastapi.responses import JSONResponse

from checkout_service import config
from checkout_service.auth import verify_token
from checkout_service.models import Order
from checkout_service.order_store import save_order
from checkout_service.schemas import CheckoutRequest, CheckoutResponse
from checkout_service.stripe_service import (
    cancel_url,
    error_message,
    order_total,
    success_url,
    to_line_items,
)
from checkout_service.notifications import (
    customer_message,
    owner_message,
    send_customer_confirmation,
    send_owner_notification,
)
from checkout_service.logging_config import get_logger

log = get_logger(__name__)

router = APIRouter()


def get_gateway(request: Request):
    return request.app.state.gateway


def get_mailer(request: Request):
    return request.app.state.mailer


@router.post("/checkout", response_model=CheckoutResponse)
def checkout(
    request: CheckoutRequest,
    background_tasks: BackgroundTasks,
    origin: Optional[str] = Header(None),
    user_id: str = Depends(verify_token),
    gateway=Depends(get_gateway),
    mailer=Depends(get_mailer),
):
    items = request.items
    customer = request.customer_info

    try:
        session = gateway.create_session(
            line_items=to_line_items(items, config.CHECKOUT_CURRENCY),
            success_url=success_url(origin),
            cancel_url=cancel_url(origin),
            customer_email=customer.email,
        )

        order = Order(
            user_id=user_id,
            items=[item.model_dump() for item in items],
            total=order_total(items),
            customer_info=customer.model_dump(),
            stripe_session_id=session["id"],
        )
        order = save_order(order)
    except Exception as e:
        log.exception(f"Checkout failed for user {user_id}: {e}")
        return JSONResponse(status_code=400, content={"error": error_message(e)})

    subject, body = owner_message(order, items, customer, origin)
    background_tasks.add_task(send_owner_notification, mailer, order.id, subject, body)

    subject, body = customer_message(order, customer)
    background_tasks.add_task(send_customer_confirmation, mailer, order.id, customer.email, subject, body)

    return {"url": session["url"]}
