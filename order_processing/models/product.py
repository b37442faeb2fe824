"""
SQLAlchemy Product and Inventory models
"""
from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from order_processing.models.base import Base


class Product(Base):
    """Product database model"""
    
    __tablename__ = "products"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    category = Column(String(100), nullable=True)
    price = Column(Numeric(18, 2), nullable=False)
    
    inventory = relationship("Inventory", back_populates="product", uselist=False)
    
    # Constraints
    __table_args__ = (
        CheckConstraint('price >= 0', name='check_price_non_negative'),
    )
    
    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', price={self.price})>"


class Inventory(Base):
    """Stock level per product"""
    
    __tablename__ = "inventory"
    
    product_id = Column(Integer, ForeignKey("products.id"), primary_key=True)
    stock_quantity = Column(Integer, nullable=False, default=0)
    
    product = relationship("Product", back_populates="inventory")
    
    def __repr__(self):
        return f"<Inventory(product_id={self.product_id}, stock_quantity={self.stock_quantity})>"
