from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .api import health, limit_orders, market, portfolio, social
from .cache import TokenInfoCache
from .config import settings
from .logging_config import setup_logging
from .middleware import RequestLoggingMiddleware

setup_logging()

# Create FastAPI app
app = FastAPI(
    title="HashHunt API",
    description="Normalized portfolio and market data over the 1inch API family",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Process-wide token metadata memo, shared by every request
app.state.token_cache = TokenInfoCache(settings.token_cache_max_size)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        return JSONResponse({"error": "Method not allowed"}, status_code=405)
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse({"success": False, "error": message}, status_code=400)


# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(portfolio.router, tags=["Portfolio"])
app.include_router(market.router, tags=["Market"])
app.include_router(limit_orders.router, tags=["Limit Orders"])
app.include_router(social.router, tags=["Social"])


@app.get("/")
async def root():
    """Root endpoint with basic info"""
    return {
        "name": "HashHunt API",
        "version": __version__,
        "description": "Normalized portfolio and market data over the 1inch API family",
        "docs": "/docs",
        "health": "/healthz"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "hashhunt.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level.lower()
    )
