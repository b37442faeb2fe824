"""
Discount rules

Each rule returns a percentage contribution for one customer and order.
Rules are summed by DiscountCalculator, which also applies the cap.
"""
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List

from order_processing.clock import TimeProvider
from order_processing.schemas.customer import CustomerResponse
from order_processing.schemas.order import OrderResponse

ZERO = Decimal("0")


def order_subtotal(order: OrderResponse) -> Decimal:
    """Sum of quantity * unit price over the order's items"""
    return sum((item.quantity * item.unit_price for item in order.items or []), ZERO)


class DiscountRule(ABC):
    """Base class for discount rules"""
    
    @abstractmethod
    def calculate(self, customer: CustomerResponse, order: OrderResponse) -> Decimal:
        raise NotImplementedError


class VipDiscountRule(DiscountRule):
    """10% for VIP customers"""
    
    def calculate(self, customer: CustomerResponse, order: OrderResponse) -> Decimal:
        return Decimal("10") if customer.is_vip else ZERO


class LoyaltyDiscountRule(DiscountRule):
    """
    Loyalty discount by calendar years since registration
    
    Years are current year minus registration year, so a customer registered
    in December counts one year the following January.
    
    - 5 years or more: 5%
    - 2 years or more: 2%
    """
    
    def __init__(self, time_provider: TimeProvider):
        if time_provider is None:
            raise ValueError("time_provider is required")
        self.time_provider = time_provider
    
    def calculate(self, customer: CustomerResponse, order: OrderResponse) -> Decimal:
        years = self.time_provider.now().year - customer.registration_date.year
        
        if years >= 5:
            return Decimal("5")
        if years >= 2:
            return Decimal("2")
        return ZERO


class OrderAmountDiscountRule(DiscountRule):
    """
    Discount by order subtotal (strictly greater than each threshold)
    
    - over 10000: 15%
    - over 5000: 10%
    - over 1000: 5%
    """
    
    def calculate(self, customer: CustomerResponse, order: OrderResponse) -> Decimal:
        amount = order_subtotal(order)
        
        if amount > 10000:
            return Decimal("15")
        if amount > 5000:
            return Decimal("10")
        if amount > 1000:
            return Decimal("5")
        return ZERO


def default_rules(time_provider: TimeProvider) -> List[DiscountRule]:
    """The rule set used in production"""
    return [
        VipDiscountRule(),
        LoyaltyDiscountRule(time_provider),
        OrderAmountDiscountRule(),
    ]
