"""
Customer Repository - Data Access Layer
"""
from sqlalchemy.orm import Session

from order_processing.exceptions import CustomerNotFoundError
from order_processing.models.customer import Customer
from order_processing.schemas.customer import CustomerResponse


class CustomerRepository:
    """Repository for reading customers"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_by_id(self, customer_id: int) -> CustomerResponse:
        """
        Get customer by ID
        
        Raises:
            CustomerNotFoundError: If no customer has this ID
        """
        customer = self.db.query(Customer).filter(Customer.id == customer_id).first()
        if not customer:
            raise CustomerNotFoundError(customer_id)
        return CustomerResponse.model_validate(customer)
