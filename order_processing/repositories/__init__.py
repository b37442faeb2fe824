"""
Repositories package
"""
from order_processing.repositories.customer_repository import CustomerRepository
from order_processing.repositories.order_repository import OrderRepository
from order_processing.repositories.inventory_repository import InventoryRepository
from order_processing.repositories.repository_factory import RepositoryFactory

__all__ = [
    "CustomerRepository",
    "OrderRepository",
    "InventoryRepository",
    "RepositoryFactory",
]
