import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from grubdash.config import Settings, settings as default_settings
from grubdash.dishes import RESOURCE as DISH_RESOURCE
from grubdash.errors import GrubDashError
from grubdash.metrics import get_metrics_bytes, get_metrics_content_type
from grubdash.models import Dish, Order
from grubdash.orders import RESOURCE as ORDER_RESOURCE
from grubdash.routes import dishes, orders
from grubdash.store import InMemoryStore

logging.basicConfig(
    level=default_settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s ready (records start at id=%d)", app.title, app.state.settings.first_record_id)
    yield
    logger.info(
        "%s stopped with %d dish(es), %d order(s) in memory",
        app.title,
        len(app.state.dish_store.list()),
        len(app.state.order_store.list()),
    )


async def grubdash_error_handler(request: Request, exc: GrubDashError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed envelope (no JSON object, no data object) -> 400 instead of FastAPI's 422."""
    first = exc.errors()[0] if exc.errors() else {}
    where = ".".join(str(part) for part in first.get("loc", ()) if part != "body") or "body"
    message = f"Invalid request body: {where}: {first.get('msg', 'malformed')}"
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == 404:
        message = f"Path not found: {request.url.path}"
    elif exc.status_code == 405:
        message = f"{request.method} not allowed for {request.url.path}"
    else:
        message = str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"error": message}, headers=exc.headers)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": "Something went wrong!"})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API with a fresh dish store and order store."""
    settings = settings or default_settings
    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.dish_store = InMemoryStore(Dish, DISH_RESOURCE, first_id=settings.first_record_id)
    app.state.order_store = InMemoryStore(Order, ORDER_RESOURCE, first_id=settings.first_record_id)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(GrubDashError, grubdash_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(dishes.router)
    app.include_router(orders.router)

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    @app.get("/metrics")
    async def metrics() -> Response:
        """Prometheus scrape endpoint: records created/updated/deleted, pipeline rejections."""
        return Response(
            content=get_metrics_bytes(),
            media_type=get_metrics_content_type(),
        )

    return app


app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run(app, host=default_settings.host, port=default_settings.port)


if __name__ == "__main__":
    main()
