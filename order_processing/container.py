"""
Composition root - wires the processor and its collaborators
"""
from typing import Callable, Optional
from sqlalchemy.orm import Session

from order_processing.clock import FixedTimeProvider, SystemTimeProvider, TimeProvider
from order_processing.config import settings
from order_processing.repositories.repository_factory import RepositoryFactory
from order_processing.services.customer_order_processor import CustomerOrderProcessor
from order_processing.services.discounts import DiscountCalculator, default_rules
from order_processing.services.order_processing_service import OrderProcessingService
from order_processing.unit_of_work import SqlUnitOfWorkFactory


def default_time_provider() -> TimeProvider:
    """Fixed clock when FIXED_NOW is configured, system clock otherwise"""
    if settings.FIXED_NOW is not None:
        return FixedTimeProvider(settings.FIXED_NOW)
    return SystemTimeProvider()


def build_customer_order_processor(
    session_factory: Optional[Callable[[], Session]] = None,
    time_provider: Optional[TimeProvider] = None
) -> CustomerOrderProcessor:
    """
    Build a processor for one invocation
    
    The time source is frozen here so that every rule and log entry in the
    invocation sees the same instant. Build a new processor per invocation.
    """
    if session_factory is None:
        from order_processing.database import SessionLocal
        session_factory = SessionLocal
    if time_provider is None:
        time_provider = default_time_provider()
    
    clock = FixedTimeProvider(time_provider.now())
    
    calculator = DiscountCalculator(default_rules(clock))
    return CustomerOrderProcessor(
        unit_of_work_factory=SqlUnitOfWorkFactory(session_factory),
        repository_factory=RepositoryFactory(clock),
        order_processing_service=OrderProcessingService(calculator)
    )
