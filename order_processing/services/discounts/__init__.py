"""
Discount rules and calculator
"""
from order_processing.services.discounts.rules import (
    DiscountRule,
    VipDiscountRule,
    LoyaltyDiscountRule,
    OrderAmountDiscountRule,
    default_rules
)
from order_processing.services.discounts.calculator import DiscountCalculator

__all__ = [
    "DiscountRule",
    "VipDiscountRule",
    "LoyaltyDiscountRule",
    "OrderAmountDiscountRule",
    "default_rules",
    "DiscountCalculator",
]
