"""
Customer Order Processor - processes all pending orders of one customer
in a single transaction
"""
import logging
from typing import List

from order_processing.repositories.repository_factory import RepositoryFactory
from order_processing.schemas.order import OrderResponse
from order_processing.services.order_processing_service import OrderProcessingService
from order_processing.unit_of_work import SqlUnitOfWorkFactory

logger = logging.getLogger(__name__)


class CustomerOrderProcessor:
    """Runs OrderProcessingService over a customer's pending orders, all or nothing"""
    
    def __init__(
        self,
        unit_of_work_factory: SqlUnitOfWorkFactory,
        repository_factory: RepositoryFactory,
        order_processing_service: OrderProcessingService
    ):
        if unit_of_work_factory is None:
            raise ValueError("unit_of_work_factory is required")
        if repository_factory is None:
            raise ValueError("repository_factory is required")
        if order_processing_service is None:
            raise ValueError("order_processing_service is required")
        self.unit_of_work_factory = unit_of_work_factory
        self.repository_factory = repository_factory
        self.order_processing_service = order_processing_service
    
    def process_customer_orders(self, customer_id: int) -> List[OrderResponse]:
        """
        Process every pending order of a customer
        
        Args:
            customer_id: Customer ID (must be positive)
        
        Returns:
            The processed orders, in the order they were fetched
        
        Raises:
            ValueError: If customer_id is not positive
            CustomerNotFoundError: If the customer does not exist
            InvalidOrderStateError: If an order's items are not loaded
        
        Any error rolls back the whole transaction and is re-raised unchanged.
        """
        if customer_id <= 0:
            raise ValueError("Customer ID must be a positive number.")
        
        with self.unit_of_work_factory.create() as uow:
            uow.begin()
            
            try:
                customer_repository = self.repository_factory.create_customer_repository(uow)
                order_repository = self.repository_factory.create_order_repository(uow)
                inventory_repository = self.repository_factory.create_inventory_repository(uow)
                
                customer = customer_repository.get_by_id(customer_id)
                pending_orders = order_repository.get_pending_orders(customer_id)
                logger.info("Processing %d pending order(s) for customer %s",
                            len(pending_orders), customer_id)
                
                for order in pending_orders:
                    self.order_processing_service.process(
                        customer, order, order_repository, inventory_repository
                    )
                
                uow.commit()
                logger.info("Committed %d order(s) for customer %s",
                            len(pending_orders), customer_id)
                return pending_orders
            
            except Exception as e:
                uow.rollback()
                logger.warning("Rolled back order processing for customer %s: %s",
                               customer_id, e)
                raise
