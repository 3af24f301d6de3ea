from typing import List, Optional
from pydantic import BaseModel, Field


class CartItem(BaseModel):
    name: str
    variant: Optional[str] = None
    price: float
    quantity: int

    @property
    def label(self) -> str:
        return f"{self.name} ({self.variant or 'Standard'})"


class CustomerInfo(BaseModel):
    # No format checks: values are passed on to Stripe and the mailer untouched
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


class CheckoutRequest(BaseModel):
    items: List[CartItem]
    customer_info: CustomerInfo = Field(..., alias="customerInfo")


class CheckoutResponse(BaseModel):
    url: str
