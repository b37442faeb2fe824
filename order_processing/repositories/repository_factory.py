"""
Builds repositories bound to one unit of work
"""
from order_processing.clock import TimeProvider
from order_processing.unit_of_work import SqlUnitOfWork
from order_processing.repositories.customer_repository import CustomerRepository
from order_processing.repositories.order_repository import OrderRepository
from order_processing.repositories.inventory_repository import InventoryRepository


class RepositoryFactory:
    """Creates repositories that share the unit of work's session"""
    
    def __init__(self, time_provider: TimeProvider):
        if time_provider is None:
            raise ValueError("time_provider is required")
        self.time_provider = time_provider
    
    def create_customer_repository(self, uow: SqlUnitOfWork) -> CustomerRepository:
        return CustomerRepository(uow.session)
    
    def create_order_repository(self, uow: SqlUnitOfWork) -> OrderRepository:
        return OrderRepository(uow.session, self.time_provider)
    
    def create_inventory_repository(self, uow: SqlUnitOfWork) -> InventoryRepository:
        return InventoryRepository(uow.session)
