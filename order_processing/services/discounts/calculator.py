"""
Discount Calculator
"""
from decimal import Decimal
from typing import Iterable

from order_processing.exceptions import InvalidOrderStateError
from order_processing.models.order import OrderStatus
from order_processing.schemas.customer import CustomerResponse
from order_processing.schemas.order import OrderResponse
from order_processing.services.discounts.rules import DiscountRule, order_subtotal

MAX_DISCOUNT_PERCENT = Decimal("25")


class DiscountCalculator:
    """Applies the combined discount of all rules to an order"""
    
    def __init__(self, rules: Iterable[DiscountRule]):
        self.rules = list(rules)
    
    def apply_discount(self, customer: CustomerResponse, order: OrderResponse) -> None:
        """
        Compute discount and final total, and mark the order Processed
        
        The summed rule percentage is capped at MAX_DISCOUNT_PERCENT.
        
        Raises:
            InvalidOrderStateError: If the order's items were not loaded
        """
        if order.items is None:
            raise InvalidOrderStateError(f"Order {order.id} items must be loaded")
        
        total_amount = order_subtotal(order)
        
        discount_percent = sum(
            (rule.calculate(customer, order) for rule in self.rules),
            Decimal("0")
        )
        if discount_percent > MAX_DISCOUNT_PERCENT:
            discount_percent = MAX_DISCOUNT_PERCENT
        
        discount_amount = total_amount * discount_percent / 100
        final_amount = total_amount - discount_amount
        
        order.discount_percent = discount_percent
        order.discount_amount = discount_amount
        order.total_amount = final_amount
        order.status = OrderStatus.PROCESSED
