"""
Pydantic schema for customers
"""
from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime


class CustomerResponse(BaseModel):
    """Read-only customer snapshot used by discount rules"""
    id: int
    name: str
    email: Optional[str] = None
    is_vip: bool = False
    registration_date: datetime
    
    model_config = ConfigDict(from_attributes=True, frozen=True)
