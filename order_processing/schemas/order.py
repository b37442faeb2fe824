"""
Pydantic schemas for orders and their line items
"""
from decimal import Decimal
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List
from datetime import datetime

from order_processing.models.order import OrderStatus


class ProductResponse(BaseModel):
    """Product snapshot attached to an order item"""
    id: int
    name: str
    category: Optional[str] = None
    price: Decimal
    
    model_config = ConfigDict(from_attributes=True)


class OrderItemResponse(BaseModel):
    """Schema for an order line item"""
    id: int
    order_id: int
    product_id: int
    quantity: int = Field(..., gt=0, description="Ordered quantity")
    unit_price: Decimal = Field(..., ge=0, description="Price per unit")
    product: Optional[ProductResponse] = None
    
    model_config = ConfigDict(from_attributes=True)


class OrderResponse(BaseModel):
    """
    Schema for an order
    
    `items` is None when line items were not loaded; an empty list means
    the order has no items.
    """
    id: int
    customer_id: int
    order_date: datetime
    total_amount: Decimal = Decimal("0")
    discount_percent: Optional[Decimal] = None
    discount_amount: Optional[Decimal] = None
    status: OrderStatus = OrderStatus.PENDING
    items: Optional[List[OrderItemResponse]] = None
    
    model_config = ConfigDict(from_attributes=True)


class ProcessOrdersResponse(BaseModel):
    """Schema for the result of processing a customer's pending orders"""
    customer_id: int
    orders: list[OrderResponse]
    total: int
