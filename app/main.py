import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.config import settings
from app.core.errors import StoreError, RecordNotFound, ReorderConflict, UploadError
from app.core.rate_limit import limiter
from app.modules.auth import routes as auth_routes
from app.modules.site_settings import routes as site_settings_routes
from app.modules.services import routes as services_routes
from app.modules.team import routes as team_routes
from app.modules.team_categories import routes as team_categories_routes
from app.modules.clients import routes as clients_routes
from app.modules.portfolio import routes as portfolio_routes
from app.modules.gallery import routes as gallery_routes
from app.modules.careers import routes as careers_routes
from app.modules.uploads import routes as uploads_routes
from app.modules.content_file import routes as content_file_routes

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    redirect_slashes=False,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(RecordNotFound)
async def record_not_found_handler(request: Request, exc: RecordNotFound):
    return JSONResponse(status_code=404, content={"detail": "Record not found"})


@app.exception_handler(ReorderConflict)
async def reorder_conflict_handler(request: Request, exc: ReorderConflict):
    return JSONResponse(
        status_code=409,
        content={"detail": "The list was changed by someone else; reload and try again"},
    )


@app.exception_handler(UploadError)
async def upload_error_handler(request: Request, exc: UploadError):
    return JSONResponse(status_code=502, content={"detail": "Image upload failed"})


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    # The content was not loaded; never report this as an empty result
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    if settings.is_production:
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})
    return JSONResponse(status_code=500, content={"detail": str(exc)})


class SecurityHeadersMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"].extend([
                    (b"X-Content-Type-Options", b"nosniff"),
                    (b"X-Frame-Options", b"DENY"),
                    (b"X-XSS-Protection", b"1; mode=block"),
                ])
            await send(message)

        await self.app(scope, receive, send_with_headers)


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include module routes
app.include_router(auth_routes.router, prefix="/api/v1")
app.include_router(site_settings_routes.router, prefix="/api/v1")
app.include_router(services_routes.router, prefix="/api/v1")
app.include_router(team_routes.router, prefix="/api/v1")
app.include_router(team_categories_routes.router, prefix="/api/v1")
app.include_router(clients_routes.router, prefix="/api/v1")
app.include_router(portfolio_routes.router, prefix="/api/v1")
app.include_router(gallery_routes.router, prefix="/api/v1")
app.include_router(careers_routes.router, prefix="/api/v1")
app.include_router(uploads_routes.router, prefix="/api/v1")
app.include_router(content_file_routes.router, prefix="/api/v1")


@app.on_event("startup")
async def startup_event():
    logger.info("Application startup")
    if not settings.admin_password:
        logger.warning("ADMIN_PASSWORD is not set; admin login is disabled")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Application shutdown")


@app.get("/")
async def root():
    return {"message": f"Welcome to {settings.app_name}", "status": "healthy"}


@app.get("/health")
@limiter.exempt
async def health():
    return {"status": "healthy"}


@app.get("/ready")
@limiter.exempt
async def ready():
    """Readiness probe: extend here with store checks if needed."""
    return {"status": "ready"}
