"""
SQLAlchemy Customer model
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.orm import relationship
from order_processing.models.base import Base


class Customer(Base):
    """Customer database model"""
    
    __tablename__ = "customers"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=True, index=True)
    is_vip = Column(Boolean, nullable=False, default=False)
    registration_date = Column(DateTime, nullable=False)
    
    orders = relationship("Order", back_populates="customer")
    
    def __repr__(self):
        return f"<Customer(id={self.id}, name='{self.name}', is_vip={self.is_vip})>"
