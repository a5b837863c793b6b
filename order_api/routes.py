# routes.py

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from order_api.logger import log_debug, log_error, log_info
from order_api.schemas import OrderRequest, OrderResponse
from order_api.services import OrderService

router = APIRouter(prefix="/api")


def get_order_service(request: Request) -> OrderService:
    """ The OrderService created at startup and kept in app state. """
    return request.app.state.order_service


# API: /api/orders/place - POST to place a new order
@router.post("/orders/place", response_model=OrderResponse, status_code=201)
def place_order(request: Request, order: OrderRequest, order_service: OrderService = Depends(get_order_service)):
    """
    Place a new order and return it as stored.
    """
    request_id = request.state.request_id
    log_info(f"Placing order for customer: {order.customer_name}", request_id=request_id)
    log_debug(f"Order request: {order.model_dump()}", request_id=request_id)
    try:
        order_response = order_service.place_order(order)
    except Exception as e:
        log_error(f"Error placing order: {e}", request_id=request_id)
        raise HTTPException(status_code=500, detail="Internal Server Error")

    log_info(f"Order placed: {order_response.order_id}", request_id=request_id)
    return JSONResponse(content=order_response.to_json(), status_code=201)


# API: /api/orders - GET to list all orders
@router.get("/orders", response_model=list[OrderResponse])
def list_orders(request: Request, order_service: OrderService = Depends(get_order_service)):
    """
    List every order, oldest first. An empty store gives an empty list.
    """
    request_id = request.state.request_id
    try:
        responses = order_service.get_all_order_responses()
    except Exception as e:
        log_error(f"Error listing orders: {e}", request_id=request_id)
        raise HTTPException(status_code=500, detail="Internal Server Error")

    log_info(f"Listing {len(responses)} order(s)", request_id=request_id)
    return JSONResponse(content=[r.to_json() for r in responses], status_code=200)
