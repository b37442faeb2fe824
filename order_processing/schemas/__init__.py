"""
Schemas package
"""
from order_processing.schemas.customer import CustomerResponse
from order_processing.schemas.order import (
    ProductResponse,
    OrderItemResponse,
    OrderResponse,
    ProcessOrdersResponse
)

__all__ = [
    "CustomerResponse",
    "ProductResponse",
    "OrderItemResponse",
    "OrderResponse",
    "ProcessOrdersResponse"
]
