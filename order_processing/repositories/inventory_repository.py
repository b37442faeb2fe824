"""
Inventory Repository - Data Access Layer
"""
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from order_processing.models.order import OrderItem
from order_processing.models.product import Inventory


class InventoryRepository:
    """Repository for stock checks and stock updates"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def are_all_items_in_stock(self, order_id: int) -> bool:
        """
        Check every line item of the order against inventory
        
        A product without an inventory row counts as out of stock.

        Each line is checked on its own: several lines for one product are
        not summed here, while reduce_inventory subtracts their total.
        """
        insufficient_count = self.db.query(func.count(OrderItem.id)).select_from(
            OrderItem
        ).outerjoin(
            Inventory, Inventory.product_id == OrderItem.product_id
        ).filter(
            OrderItem.order_id == order_id,
            or_(
                Inventory.stock_quantity.is_(None),
                Inventory.stock_quantity < OrderItem.quantity
            )
        ).scalar()
        
        return insufficient_count == 0
    
    def reduce_inventory(self, order_id: int) -> None:
        """Subtract each line item's quantity from its product's stock"""
        quantities = self.db.query(
            OrderItem.product_id,
            func.sum(OrderItem.quantity)
        ).filter(
            OrderItem.order_id == order_id
        ).group_by(OrderItem.product_id).all()
        
        for product_id, quantity in quantities:
            self.db.query(Inventory).filter(Inventory.product_id == product_id).update(
                {Inventory.stock_quantity: Inventory.stock_quantity - quantity},
                synchronize_session=False
            )
