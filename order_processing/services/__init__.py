"""
Services package
"""
from order_processing.services.order_processing_service import OrderProcessingService
from order_processing.services.customer_order_processor import CustomerOrderProcessor

__all__ = ["OrderProcessingService", "CustomerOrderProcessor"]
