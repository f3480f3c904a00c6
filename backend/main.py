from __future__ import annotations

import logging
import os
import time
import uuid
from pathlib import Path

from dotenv import load_dotenv

# Load .env from backend directory so template overrides etc. are available
load_dotenv(Path(__file__).resolve().parent / ".env")

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from errors import (
    InvalidSubmissionError,
    ModelTenancyServiceError,
    UnsupportedDocumentTypeError,
    ValidationFailedError,
)
from routes.model_tenancy import router as model_tenancy_router

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
_LOG = logging.getLogger("uvicorn.error")

# Version for /health and /version (Render sets RENDER_GIT_COMMIT)
VERSION = (os.environ.get("RENDER_GIT_COMMIT") or "").strip() or "unknown"

app = FastAPI(title="Housing Forms Backend", version="0.1.0")

# CORS: use ALLOWED_ORIGINS env (comma-separated) if set, else default
_origins_env = os.environ.get("ALLOWED_ORIGINS", "").strip()
if _origins_env:
    ALLOWED_ORIGINS = [o.strip() for o in _origins_env.split(",") if o.strip()]
else:
    ALLOWED_ORIGINS = [
        "https://www.mygov.scot",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())[:8]
        request.state.request_id = request_id
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        _LOG.info(
            "request_id=%s method=%s path=%s status=%s duration_ms=%.0f",
            request_id,
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        response.headers["X-Request-Id"] = request_id
        return response


app.add_middleware(RequestLogMiddleware)
app.include_router(model_tenancy_router)


@app.exception_handler(ModelTenancyServiceError)
async def _service_error(request: Request, exc: ModelTenancyServiceError) -> JSONResponse:
    _LOG.error("service error path=%s: %s", request.url.path, exc.message, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": exc.message})


@app.exception_handler(ValidationFailedError)
async def _validation_failed(request: Request, exc: ValidationFailedError) -> JSONResponse:
    _LOG.info("validation failed path=%s issues=%d", request.url.path, len(exc.issues))
    return JSONResponse(status_code=400, content={"detail": "Validation failed", "issues": exc.issues})


@app.exception_handler(InvalidSubmissionError)
async def _invalid_submission(request: Request, exc: InvalidSubmissionError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(UnsupportedDocumentTypeError)
async def _unsupported_type(request: Request, exc: UnsupportedDocumentTypeError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.on_event("startup")
def startup_log() -> None:
    port = os.environ.get("PORT", "8010")
    host = os.environ.get("HOST", "127.0.0.1")
    _LOG.info("Backend starting on http://%s:%s version=%s", host, port, VERSION)


@app.get("/health")
def health():
    return {"status": "ok", "version": VERSION}


@app.get("/version")
def version():
    return {
        "version": VERSION,
        "source_file": str(Path(__file__).resolve()),
        "render_git_commit": os.getenv("RENDER_GIT_COMMIT", ""),
        "render_service_name": os.getenv("RENDER_SERVICE_NAME", ""),
    }
