from pathlib import Path
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from storefront.core.config import Settings, settings
from storefront.core.errors import StoreError
from storefront.core.logging import configure_logging, get_logger
from storefront.db.session import build_engine, create_db_and_tables
from storefront.routers import auth, cart, products, upload

# Import models to ensure they are registered with SQLModel metadata
from storefront.models.user import User
from storefront.models.product import Product

logger = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    app_settings: Settings = app.state.settings
    configure_logging(app_settings.LOG_LEVEL, app_settings.LOG_FORMAT)
    Path(app_settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
    create_db_and_tables(app.state.engine)
    logger.info("startup.ready", upload_dir=app_settings.UPLOAD_DIR)
    yield
    app.state.engine.dispose()


def describe_validation_errors(errors) -> str:
    """One line per bad field, e.g. "itemId: Input should be a valid integer"."""
    parts = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc)
        parts.append(f"{field}: {error.get('msg')}" if field else str(error.get("msg")))
    return "; ".join(parts)


def create_app(app_settings: Settings = settings) -> FastAPI:
    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        version="1.0.0",
        lifespan=lifespan,
        description="Catalog, accounts and per-user carts for the storefront"
    )
    app.state.settings = app_settings
    app.state.engine = build_engine(app_settings.DATABASE_URL)

    @app.get("/", response_class=PlainTextResponse)
    def read_root():
        return "Storefront API is running"

    app.include_router(auth.router, tags=["auth"])
    app.include_router(cart.router, tags=["cart"])
    app.include_router(products.router, tags=["products"])
    app.include_router(upload.router, tags=["upload"])

    # Directory is created in lifespan
    app.mount("/images", StaticFiles(directory=app_settings.UPLOAD_DIR, check_dir=False), name="images")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        if exc.status_code >= 500:
            logger.error("request.failed", path=request.url.path, error=exc.message)
        else:
            logger.warning("request.rejected", path=request.url.path, error=exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, exc.body_key: exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = describe_validation_errors(exc.errors())
        logger.warning("request.invalid", path=request.url.path, error=message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "errors": message},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("request.crashed", path=request.url.path)
        return JSONResponse(status_code=500, content={"success": False, "error": str(exc)})

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("storefront.main:app", host="0.0.0.0", port=settings.PORT)
