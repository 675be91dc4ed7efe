# product_api/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional, Dict, List

from fastapi import FastAPI, APIRouter, Depends, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, settings as default_settings
from .core import ProductIn, ProductUpdate
from .database import ProductStore
from .interceptors import run_interceptors
from .logging_config import setup_logging
from .logic import (
    list_products_logic, get_product_logic, create_product_logic,
    update_product_logic, delete_product_logic, search_products_logic,
    product_stats_logic,
)
from .models import Product, ProductPage, Message

logger = logging.getLogger(__name__)

WELCOME_TEXT = "Welcome to the Product API! Go to /api/products to see all products."

router = APIRouter()

# ---------------------------
# Dependencies
# ---------------------------
def get_store(request: Request) -> ProductStore:
    return request.app.state.store

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

# ---------------------------
# Routes
# ---------------------------
@router.get("/", response_class=PlainTextResponse)
async def welcome():
    return WELCOME_TEXT

@router.get("/api/products", response_model=ProductPage)
async def list_products(
    category: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    store: ProductStore = Depends(get_store),
    cfg: Settings = Depends(get_settings),
):
    return list_products_logic(
        store, category, page, limit,
        default_page=cfg.default_page, default_limit=cfg.default_limit,
    )

@router.get("/api/products/{product_id}", response_model=Product, responses={404: {"model": Message}})
async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    return get_product_logic(store, product_id)

@router.post("/api/products", status_code=201, response_model=Product, responses={400: {"model": Message}})
async def create_product(payload: Optional[ProductIn] = None, store: ProductStore = Depends(get_store)):
    return create_product_logic(store, payload or ProductIn())

@router.put("/api/products/{product_id}", response_model=Product, responses={404: {"model": Message}})
async def update_product(product_id: str, payload: Optional[ProductUpdate] = None, store: ProductStore = Depends(get_store)):
    return update_product_logic(store, product_id, payload or ProductUpdate())

@router.delete("/api/products/{product_id}", status_code=204, responses={404: {"model": Message}})
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    delete_product_logic(store, product_id)
    return Response(status_code=204)

@router.get("/api/products/search", response_model=List[Product], responses={400: {"model": Message}})
async def search_products(name: Optional[str] = None, store: ProductStore = Depends(get_store)):
    return search_products_logic(store, name)

@router.get("/api/products/stats", response_model=Dict[str, int])
async def product_stats(store: ProductStore = Depends(get_store)):
    return product_stats_logic(store)

# ---------------------------
# Error handlers
# ---------------------------
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )

async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("Invalid request body for %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"message": "Invalid request body"})

async def internal_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Internal Server Error"})

# ---------------------------
# App factory
# ---------------------------
def _static_routes_first(routes: list) -> None:
    """Literal paths win over parameterised ones (/search before /{product_id})."""
    routes.sort(key=lambda route: "{" in getattr(route, "path", ""))

def create_app(settings: Optional[Settings] = None, store: Optional[ProductStore] = None) -> FastAPI:
    cfg = settings or default_settings
    setup_logging(cfg.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Server is running on http://localhost:%s", cfg.port)
        yield
        logger.info("Server shutting down")

    app = FastAPI(title="product-api (in-memory)", lifespan=lifespan)
    app.state.settings = cfg
    app.state.store = store if store is not None else ProductStore()

    @app.middleware("http")
    async def intercept(request: Request, call_next):
        response = run_interceptors(request, cfg)
        if response is not None:
            return response
        return await call_next(request)

    # outermost: preflight requests are answered before the interceptors run
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)

    app.include_router(router)
    _static_routes_first(app.router.routes)
    return app


app = create_app()


def run() -> None:
    import uvicorn
    cfg = app.state.settings
    uvicorn.run(app, host=cfg.host, port=cfg.port, log_level=cfg.log_level.lower())


if __name__ == "__main__":
    run()
