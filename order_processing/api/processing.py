"""
Order processing API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import ValidationError

from order_processing.container import build_customer_order_processor
from order_processing.exceptions import CustomerNotFoundError, InvalidOrderStateError
from order_processing.schemas.order import ProcessOrdersResponse
from order_processing.services.customer_order_processor import CustomerOrderProcessor

router = APIRouter(prefix="/customers", tags=["processing"])


def get_customer_order_processor() -> CustomerOrderProcessor:
    """Dependency to get a CustomerOrderProcessor for this request"""
    return build_customer_order_processor()


@router.post(
    "/{customer_id}/orders/process",
    response_model=ProcessOrdersResponse,
    summary="Process pending orders"
)
def process_customer_orders(
    customer_id: int,
    processor: CustomerOrderProcessor = Depends(get_customer_order_processor)
):
    """
    Process all pending orders of a customer in one transaction
    
    For each order: apply discount, check stock, then mark it Ready
    (inventory reduced) or OnHold. Any failure rolls back every order.
    
    - **customer_id**: Customer ID (must be positive)
    """
    try:
        orders = processor.process_customer_orders(customer_id)
    except CustomerNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except InvalidOrderStateError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )
    except ValidationError:
        # stored data failed to load: a server fault, not a bad request
        raise
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    
    return ProcessOrdersResponse(
        customer_id=customer_id,
        orders=orders,
        total=len(orders)
    )
