"""
Order processing exceptions
"""


class OrderProcessingError(Exception):
    """Base exception for order processing errors"""
    pass


class CustomerNotFoundError(OrderProcessingError):
    """Customer not found"""
    
    def __init__(self, customer_id: int):
        self.customer_id = customer_id
        super().__init__(f"Customer with ID {customer_id} not found.")


class InvalidOrderStateError(OrderProcessingError):
    """Order is not in a state that allows the requested operation"""
    pass
