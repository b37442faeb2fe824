"""
SQLAlchemy models package
"""
from order_processing.models.base import Base
from order_processing.models.customer import Customer
from order_processing.models.product import Product, Inventory
from order_processing.models.order import Order, OrderItem, OrderLog, OrderStatus

__all__ = [
    "Base",
    "Customer",
    "Product",
    "Inventory",
    "Order",
    "OrderItem",
    "OrderLog",
    "OrderStatus",
]
