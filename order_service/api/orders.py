"""Order API endpoints."""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from order_service.core.dependencies import get_order_service
from order_service.services.ordering.exceptions import (
    AccountNotFound,
    IncorrectRequest,
    OrderNotFound,
    OrderServiceError,
    PaymentNotAccepted,
)
from order_service.services.ordering.models import Order, OrderRequest
from order_service.services.ordering.orchestrator import OrderService


router = APIRouter()
logger = logging.getLogger(__name__)

ERROR_STATUS_CODES = {
    IncorrectRequest: 400,
    AccountNotFound: 404,
    PaymentNotAccepted: 402,
    OrderNotFound: 404,
}


async def order_error_handler(request: Request, exc: OrderServiceError) -> JSONResponse:
    """Translate order workflow errors into HTTP responses."""
    status_code = ERROR_STATUS_CODES.get(type(exc), 400)
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "message": exc.message},
    )


@router.post("/api/orders", response_model=Order, status_code=201)
async def create_order(
    payload: OrderRequest,
    request: Request,
    service: OrderService = Depends(get_order_service),
):
    """Create an order."""
    logger.info(
        f"[ORDERS API] Create request - account: {payload.account_id}, "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )
    try:
        return await service.create_order(payload)
    except OrderServiceError:
        raise
    except Exception as e:
        logger.error(
            f"[ORDERS API] Error creating order - account: {payload.account_id}, "
            f"Error: {type(e).__name__}: {str(e)}",
            exc_info=True,
        )
        raise HTTPException(status_code=500, detail="Error creating order")


@router.get("/api/orders", response_model=List[Order])
async def list_orders(service: OrderService = Depends(get_order_service)):
    """Get all orders, newest first."""
    return await service.list_orders()


@router.get("/api/orders/account/{account_id}", response_model=List[Order])
async def list_account_orders(
    account_id: str,
    service: OrderService = Depends(get_order_service),
):
    """Get the orders placed by an account."""
    return await service.list_orders_by_account(account_id)


@router.get("/api/orders/{order_id}", response_model=Order)
async def get_order(order_id: str, service: OrderService = Depends(get_order_service)):
    """Get a single order."""
    return await service.get_order(order_id)
