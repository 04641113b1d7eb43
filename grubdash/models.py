from typing import Any

from pydantic import BaseModel, Field


class RequestBody(BaseModel):
    """Envelope for every write: {"data": {...}}. Field checks happen in the pipelines."""
    data: dict[str, Any] = Field(..., description="Resource payload")


class Dish(BaseModel):
    id: int
    name: str
    description: str
    price: int
    image_url: str


class Order(BaseModel):
    id: int
    deliverTo: str
    mobileNumber: str
    status: Any = None  # stored as supplied on create, checked on update
    dishes: list[dict[str, Any]]
