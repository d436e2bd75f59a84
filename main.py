# 📦 main.py

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from prometheus_client import start_http_server
import structlog
import uvicorn

from api.handlers import router as api_router
from catalog.categories import CategoryRegistry
from catalog.repository import TreeRepository
from schemas.schemas import ErrorResponse
from settings import get_settings
from utils.fetch_posts import BloggerClient

log = structlog.get_logger()

settings = get_settings()

# ─────────────────────────────
# API Setup
app = FastAPI(title=settings.app_name, version=settings.version)

# Allow frontend to talk to backend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(api_router)

app.state.repository = TreeRepository.from_seed_file(settings.seed_path)
app.state.categories = CategoryRegistry.from_file(settings.categories_path)
app.state.blog_client = BloggerClient.from_settings(settings)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    log.warning("Rejected request payload", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            status="error",
            message="Invalid request payload.",
            info=jsonable_encoder(exc.errors()),
        ).model_dump(),
    )

# ─────────────────────────────
# Startup event
@app.on_event("startup")
async def startup_event():
    if settings.prometheus_port:
        start_http_server(settings.prometheus_port)
        log.info("Prometheus metrics server started", port=settings.prometheus_port)
    log.info(
        "Campus Grove backend started",
        trees=len(app.state.repository),
        blogger_configured=bool(settings.blogger_api_key),
    )

# ─────────────────────────────
# Main entrypoint
if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
    )
