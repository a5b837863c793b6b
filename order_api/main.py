# main.py

import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from order_api.config import Settings, get_settings
from order_api.database import create_connection, create_tables
from order_api.logger import log_info, set_log_level
from order_api.routes import router
from order_api.services import OrderService


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the Order API application. The database connection and the
    OrderService are created on startup and released on shutdown.
    """
    settings = settings or get_settings()
    set_log_level(settings.log_level)

    # Initialize database connection and the order service on startup, close connection on shutdown
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log_info("Creating database connection and tables...")
        conn = create_connection(settings.db_file)
        create_tables(conn=conn)
        # keep the service in app state for use in endpoints
        app.state.order_service = OrderService(conn)
        log_info(f"Starting up {settings.service_name}...")

        yield
        log_info(f"Shutting down {settings.service_name}...")
        app.state.order_service = None
        conn.close()
        log_info("Database connection closed.")

    app = FastAPI(title="Order API", lifespan=lifespan)

    # browser clients such as the shop frontend call from another origin
    cors_origins = settings.cors_origin_list()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials="*" not in cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Set up a middleware to generate request_id for each request and log it
    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        """
        Reuse the caller's Request-ID header or generate one, and echo it back.
        """
        request_id = request.headers.get("Request-ID")
        if request_id:
            log_info(f"Received Request-ID header: {request_id}", request_id=request_id)
        else:
            request_id = str(uuid.uuid4())
            log_info(f"Request ID generated: {request_id}", request_id=request_id)
        request.state.request_id = request_id

        log_info(f"Received request: {request.method} {request.url}", request_id=request_id)

        response = await call_next(request)
        # add the request_id to the response headers for tracking
        response.headers["Request-ID"] = request_id
        log_info(f"Completed request: {request.method} {request.url} with status {response.status_code}", request_id=request_id)
        return response

    app.include_router(router)
    return app


app = create_app()
