from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import json
import logging
import os
from dotenv import load_dotenv
import time

# Load environment variables from .env (project or backend directory) BEFORE reading settings
load_dotenv()
_here = os.path.dirname(os.path.abspath(__file__))
_env_path = os.path.join(os.path.dirname(_here), ".env")
if os.path.exists(_env_path):
    load_dotenv(_env_path)

from mabank.api.banking import router as banking_router
from mabank.config import ApiSettings
from mabank.registry import current_registry

settings = ApiSettings()
logger = logging.getLogger("mabank.api")

app = FastAPI(title=settings.title, version=settings.version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Structured logging with request_id and correlation_id
@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    start = time.time()
    req_id = request.headers.get("X-Request-ID") or hex(int(start * 1e9))[-12:]
    corr = request.headers.get("X-Correlation-ID") or request.query_params.get("correlation_id")
    try:
        response = await call_next(request)
    except Exception as e:
        log = {
            "level": "error",
            "msg": "request_error",
            "method": request.method,
            "path": request.url.path,
            "duration_ms": int((time.time() - start) * 1000),
            "request_id": req_id,
            "correlation_id": corr,
            "error": str(e),
        }
        logger.error(json.dumps(log, ensure_ascii=False))
        raise
    log = {
        "level": "info",
        "msg": "request",
        "method": request.method,
        "path": request.url.path,
        "status": response.status_code,
        "duration_ms": int((time.time() - start) * 1000),
        "request_id": req_id,
        "correlation_id": corr,
    }
    logger.info(json.dumps(log, ensure_ascii=False))
    response.headers["X-Request-ID"] = req_id
    if corr:
        response.headers["X-Correlation-ID"] = corr
    return response


app.include_router(banking_router)


@app.get("/health")
def health() -> dict:
    reg = current_registry()
    if reg is None:
        return {"status": "degraded", "version": app.version, "banks": 0}
    return {"status": "ok", "version": app.version, "banks": len(reg.active())}
