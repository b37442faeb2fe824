"""
Order Processing Service - per-order business logic
"""
import logging

from order_processing.models.order import OrderStatus
from order_processing.repositories.inventory_repository import InventoryRepository
from order_processing.repositories.order_repository import OrderRepository
from order_processing.schemas.customer import CustomerResponse
from order_processing.schemas.order import OrderResponse
from order_processing.services.discounts.calculator import DiscountCalculator

logger = logging.getLogger(__name__)

ON_HOLD_MESSAGE = "Order on hold. Some items are not on stock."


class OrderProcessingService:
    """Moves one order from Pending to Ready or OnHold"""
    
    def __init__(self, discount_calculator: DiscountCalculator):
        if discount_calculator is None:
            raise ValueError("discount_calculator is required")
        self.discount_calculator = discount_calculator
    
    def process(
        self,
        customer: CustomerResponse,
        order: OrderResponse,
        order_repository: OrderRepository,
        inventory_repository: InventoryRepository
    ) -> None:
        """
        Process a single order
        
        Steps:
        1. Apply discount (status becomes Processed)
        2. Persist amounts, discount and status
        3. Check stock for every item
        4. In stock: reduce inventory, mark Ready, log completion
        5. Otherwise: mark OnHold, log hold
        """
        self.discount_calculator.apply_discount(customer, order)
        order_repository.update_order(order)
        
        if inventory_repository.are_all_items_in_stock(order.id):
            inventory_repository.reduce_inventory(order.id)
            order.status = OrderStatus.READY
            order_repository.update_status(order)
            order_repository.insert_log(
                order.id,
                f"Order completed with {order.discount_percent}% discount. "
                f"Total price: {order.total_amount}"
            )
            logger.info("Order %s ready (discount %s%%, total %s)",
                        order.id, order.discount_percent, order.total_amount)
        else:
            order.status = OrderStatus.ON_HOLD
            order_repository.update_status(order)
            order_repository.insert_log(order.id, ON_HOLD_MESSAGE)
            logger.info("Order %s on hold, insufficient stock", order.id)
