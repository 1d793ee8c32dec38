import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catalog.api import brands, categories, items
from catalog.core.config import settings
from catalog.core.exceptions import CatalogError, ValidationError, error_map
from catalog.db.base import engine
from catalog.services.events import publisher

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s %s starting", settings.PROJECT_NAME, settings.VERSION)
    yield
    await publisher.close()
    await engine.dispose()


app = FastAPI(
    title="Catalog API",
    description="Brands, categories and items of the product catalog",
    version=settings.VERSION,
    lifespan=lifespan,
)


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    content = {"detail": exc.detail}
    if isinstance(exc, ValidationError):
        content["errors"] = exc.errors
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Malformed input is a 400 with a per-field map, like the domain ValidationError.
    return await catalog_error_handler(request, ValidationError(error_map(exc.errors())))


# Routers
app.include_router(brands.router, prefix=settings.API_V1_STR)
app.include_router(categories.router, prefix=settings.API_V1_STR)
app.include_router(items.router, prefix=settings.API_V1_STR)


@app.get("/health")
async def health_check():
    return {"status": "ok", "version": settings.VERSION}
