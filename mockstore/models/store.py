# mockstore/models/store.py
from __future__ import annotations

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field

from .discovery import CamelModel

OrderStatus = Literal["pending", "approved", "delivered"]


class OrderCreate(CamelModel):
    id: Optional[Union[str, int]] = None
    food_id: Optional[str] = None
    quantity: Optional[float] = None
    status: Optional[OrderStatus] = None
    complete: Optional[bool] = None
    base_price: Optional[float] = None
    # Accepted only so it can be rejected: the server stamps orderDate itself
    order_date: Optional[Any] = None


class User(BaseModel):
    id: Union[int, str]
    username: str
    password: str
    role: str = "user"

    def public(self) -> dict:
        return {"id": self.id, "username": self.username, "role": self.role}


class LoginRequest(BaseModel):
    username: Optional[str] = Field(default=None)
    password: Optional[str] = Field(default=None)
