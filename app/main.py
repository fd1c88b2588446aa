# app/main.py
from typing import Optional, Dict, Any

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from .config import settings
from .core import ProductIn
from .database import CatalogStore
from .errors import CatalogError, ErrorKind, error_response
from .logging_config import setup_logging
from .middleware import log_requests, require_api_key
from .models import Product
from . import sdk

MALFORMED_BODY = "Malformed request body"

def get_store(request: Request) -> CatalogStore:
    return request.app.state.store

# ---------------------------
# Product endpoints (all behind the API-key gate)
# ---------------------------
router = APIRouter(prefix="/api/products", tags=["products"], dependencies=[Depends(require_api_key)])

@router.get("")
async def list_products(
    category: Optional[str] = None,
    search: Optional[str] = None,
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    store: CatalogStore = Depends(get_store),
) -> Dict[str, Any]:
    return sdk.list_products_logic(store, category=category, search=search, page=page, limit=limit)

# must stay above /{product_id} so "stats" is never read as an id
@router.get("/stats")
async def product_stats(store: CatalogStore = Depends(get_store)):
    return sdk.product_stats_logic(store)

@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: str, store: CatalogStore = Depends(get_store)):
    return sdk.get_product_logic(store, product_id)

@router.post("", status_code=201, response_model=Product)
async def create_product(payload: Optional[ProductIn] = None, store: CatalogStore = Depends(get_store)):
    return sdk.create_product_logic(store, payload)

@router.put("/{product_id}", response_model=Product)
async def update_product(product_id: str, payload: Optional[ProductIn] = None, store: CatalogStore = Depends(get_store)):
    return sdk.update_product_logic(store, product_id, payload)

@router.delete("/{product_id}")
async def delete_product(product_id: str, store: CatalogStore = Depends(get_store)):
    return sdk.delete_product_logic(store, product_id)

# ---------------------------
# Error mapping
# ---------------------------
async def handle_catalog_error(request: Request, exc: CatalogError):
    return error_response(exc.kind, exc.message)

async def handle_malformed_body(request: Request, exc: RequestValidationError):
    return error_response(ErrorKind.VALIDATION, MALFORMED_BODY)

async def handle_unexpected_error(request: Request, exc: Exception):
    return error_response(ErrorKind.INTERNAL, str(exc))

def create_app(store: Optional[CatalogStore] = None) -> FastAPI:
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    app = FastAPI(title="product-catalog (in-memory demo)")
    app.state.store = store if store is not None else CatalogStore.seeded()

    app.middleware("http")(log_requests)

    app.add_exception_handler(CatalogError, handle_catalog_error)
    app.add_exception_handler(RequestValidationError, handle_malformed_body)
    app.add_exception_handler(Exception, handle_unexpected_error)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Hello World from the Product Catalog API"

    app.include_router(router)
    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=settings.APP_HOST, port=settings.APP_PORT)
