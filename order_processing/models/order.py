"""
SQLAlchemy Order, OrderItem and OrderLog models
"""
import enum

from sqlalchemy import Column, Integer, String, Numeric, DateTime, Text, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from order_processing.models.base import Base


class OrderStatus(str, enum.Enum):
    """Order lifecycle: Pending -> Processed -> Ready | OnHold"""
    
    PENDING = "Pending"
    PROCESSED = "Processed"
    READY = "Ready"
    ON_HOLD = "OnHold"


class Order(Base):
    """Order database model"""
    
    __tablename__ = "orders"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    order_date = Column(DateTime, nullable=False)
    total_amount = Column(Numeric(18, 2), nullable=False, default=0)
    discount_percent = Column(Numeric(5, 2), nullable=True)
    discount_amount = Column(Numeric(18, 2), nullable=True)
    status = Column(String(50), nullable=False, default=OrderStatus.PENDING.value, index=True)
    
    customer = relationship("Customer", back_populates="orders")
    items = relationship("OrderItem", back_populates="order", order_by="OrderItem.id")
    logs = relationship("OrderLog", back_populates="order", order_by="OrderLog.id")
    
    # Constraints
    __table_args__ = (
        CheckConstraint(
            "status IN ('Pending', 'Processed', 'Ready', 'OnHold')",
            name='check_status_valid'
        ),
    )
    
    def __repr__(self):
        return f"<Order(id={self.id}, customer_id={self.customer_id}, status='{self.status}')>"


class OrderItem(Base):
    """Order line item database model"""
    
    __tablename__ = "order_items"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(18, 2), nullable=False)
    
    order = relationship("Order", back_populates="items")
    product = relationship("Product")
    
    # Constraints
    __table_args__ = (
        CheckConstraint('quantity > 0', name='check_quantity_positive'),
        CheckConstraint('unit_price >= 0', name='check_unit_price_non_negative'),
    )
    
    def __repr__(self):
        return f"<OrderItem(id={self.id}, order_id={self.order_id}, product_id={self.product_id}, quantity={self.quantity})>"


class OrderLog(Base):
    """Audit log entry for an order"""
    
    __tablename__ = "order_logs"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    log_date = Column(DateTime, nullable=False)
    message = Column(Text, nullable=False)
    
    order = relationship("Order", back_populates="logs")
    
    def __repr__(self):
        return f"<OrderLog(order_id={self.order_id}, message='{self.message}')>"
