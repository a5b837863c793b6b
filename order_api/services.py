# services.py

import threading
import uuid
from datetime import date
from sqlite3 import Connection, Error as SQLiteError

from order_api.database import (
    get_all_orders, get_items_for_order, get_order_by_id,
    insert_order, insert_order_item, order_exists,
)
from order_api.logger import log_error, log_info, log_warning
from order_api.schemas import OrderItemResponse, OrderRequest, OrderResponse

# New orders start as PLACED
STATUS_PLACED = "PLACED"


class OrderServiceError(Exception):
    """ Raised when an order cannot be stored or read back. """


def generate_order_id() -> str:
    """ Order ids look like ORD1A2B3C4D. """
    return "ORD" + uuid.uuid4().hex[:8].upper()


class OrderService:
    """
    Places orders and reads them back as OrderResponse records.

    One instance is created at startup with the shared database connection
    and handed to the endpoints through a dependency. Every use of the connection holds the service lock, and a
    placement holds it from the first insert through the read-back.
    """

    def __init__(self, conn: Connection):
        self.conn = conn
        self._lock = threading.RLock()

    def place_order(self, order_request: OrderRequest) -> OrderResponse:
        """
        Persist the order and its items in one transaction and return the stored order.
        """
        conn = self.conn
        with self._lock:
            order_id = self._store_order(order_request, conn)
            order_response = self.get_order_response(order_id)
        if order_response is None:
            log_error(f"Order {order_id} was not found after placing it.")
            raise OrderServiceError(f"Order {order_id} could not be read back")

        log_info(f"Order {order_id} placed with {len(order_request.items)} item(s).")
        return order_response

    def _store_order(self, order_request: OrderRequest, conn: Connection) -> str:
        try:
            order_id = generate_order_id()
            # regenerate on the rare collision so order_id stays unique
            while order_exists(order_id=order_id, conn=conn):
                log_warning(f"Order id {order_id} already taken, generating another.")
                order_id = generate_order_id()

            insert_order(
                order_id=order_id,
                customer_name=order_request.customer_name,
                email=order_request.email,
                name=order_request.name or order_request.items[0].name,
                status=STATUS_PLACED,
                order_date=date.today().isoformat(),
                conn=conn
            )
            for item in order_request.items:
                insert_order_item(
                    order_id=order_id,
                    name=item.name,
                    qty=item.qty,
                    price=item.price,
                    conn=conn
                )
            conn.commit()
        except SQLiteError as e:
            conn.rollback()
            log_error(f"Error placing order for {order_request.customer_name}: {e}")
            raise OrderServiceError(f"Could not place order: {e}") from e

        return order_id

    def get_order_response(self, order_id: str) -> OrderResponse | None:
        """ Build the response for one stored order, or None if it does not exist. """
        try:
            with self._lock:
                row = get_order_by_id(order_id=order_id, conn=self.conn)
                if row is None:
                    return None
                return self._to_response(row)
        except SQLiteError as e:
            log_error(f"Error reading order {order_id}: {e}")
            raise OrderServiceError(f"Could not read order {order_id}: {e}") from e

    def get_all_order_responses(self) -> list[OrderResponse]:
        """ Every stored order, oldest first. """
        try:
            with self._lock:
                return [self._to_response(row) for row in get_all_orders(conn=self.conn)]
        except SQLiteError as e:
            log_error(f"Error listing orders: {e}")
            raise OrderServiceError(f"Could not list orders: {e}") from e

    def _to_response(self, row) -> OrderResponse:
        order_id, customer_name, name, status, order_date = row
        items = [
            OrderItemResponse(name=item_name, qty=qty, price=price, total_price=round(price * qty, 2))
            for item_name, qty, price in get_items_for_order(order_id=order_id, conn=self.conn)
        ]
        return OrderResponse(
            order_id=order_id,
            customer_name=customer_name,
            name=name,
            status=status,
            order_date=date.fromisoformat(order_date),
            items=items
        )
