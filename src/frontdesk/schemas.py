"""Input schemas for the booking and payment forms."""
from __future__ import annotations

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

PaymentMode = Literal["UPI", "Cash", "GPay", "PhonePe", "Net Banking", "Card"]
PaymentType = Literal["Full", "Advance"]


class BookingRequest(BaseModel):
    """Data collected by the new-booking form."""
    room_number: str = Field(min_length=1, description="Room number the guest is booked into")
    guest_name: str = Field(min_length=2, description="Customer name")
    check_in: date = Field(description="Check-in day (YYYY-MM-DD)")
    check_out: date = Field(description="Check-out day (YYYY-MM-DD)")
    num_persons: int = Field(default=1, ge=1, description="At least one person")
    payment_type: PaymentType = Field(default="Full")
    payment_mode: PaymentMode = Field(default="Cash")
    payment_amount: float = Field(ge=1, description="Amount received with the booking")

    @field_validator("room_number", "guest_name", mode="before")
    @classmethod
    def _strip(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        return value.strip() if isinstance(value, str) else value

    @model_validator(mode="after")
    def _check_interval(self) -> "BookingRequest":
        if self.check_out < self.check_in:
            raise ValueError("check_out must not be before check_in")
        return self


class PaymentRequest(BaseModel):
    """Data collected when the remaining balance is settled."""
    amount: float = Field(ge=0.01, description="Payment amount")
    mode: PaymentMode = Field(default="Cash")
    paid_on: Optional[date] = Field(default=None, description="Defaults to today")
