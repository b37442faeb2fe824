"""
Order Repository - Data Access Layer
"""
from typing import List
from sqlalchemy.orm import Session, selectinload

from order_processing.clock import TimeProvider
from order_processing.models.order import Order, OrderItem, OrderLog, OrderStatus
from order_processing.schemas.order import OrderResponse


class OrderRepository:
    """Repository for reading and updating orders and writing order logs"""
    
    def __init__(self, db: Session, time_provider: TimeProvider):
        if time_provider is None:
            raise ValueError("time_provider is required")
        self.db = db
        self.time_provider = time_provider
    
    def get_pending_orders(self, customer_id: int) -> List[OrderResponse]:
        """
        Get the customer's pending orders with their items and products loaded
        
        Orders without line items are not returned. Results are ordered by ID.
        """
        orders = self.db.query(Order).options(
            selectinload(Order.items).selectinload(OrderItem.product)
        ).filter(
            Order.customer_id == customer_id,
            Order.status == OrderStatus.PENDING.value,
            Order.items.any()
        ).order_by(Order.id).all()
        
        return [OrderResponse.model_validate(o) for o in orders]
    
    def update_order(self, order: OrderResponse) -> None:
        """Persist amount, discount and status fields"""
        self.db.query(Order).filter(Order.id == order.id).update(
            {
                Order.total_amount: order.total_amount,
                Order.discount_percent: order.discount_percent,
                Order.discount_amount: order.discount_amount,
                Order.status: OrderStatus(order.status).value,
            },
            synchronize_session=False
        )
    
    def update_status(self, order: OrderResponse) -> None:
        """Persist the status field only"""
        self.db.query(Order).filter(Order.id == order.id).update(
            {Order.status: OrderStatus(order.status).value},
            synchronize_session=False
        )
    
    def insert_log(self, order_id: int, message: str) -> None:
        """Append an audit entry stamped with the current time"""
        self.db.add(OrderLog(
            order_id=order_id,
            log_date=self.time_provider.now(),
            message=message
        ))
        self.db.flush()
