"""Resume Agent API. Generates job-tailored resume content.

Run: uvicorn resume_agent.main:app --reload --port 3001
Docs: http://localhost:3001/docs
"""

import traceback
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from dotenv import load_dotenv
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

load_dotenv(Path(__file__).resolve().parent.parent / ".env")

from resume_agent.config import load_settings  # noqa: E402
from resume_agent.core.knowledge_base import load_knowledge_base  # noqa: E402
from resume_agent.core.logger import logger  # noqa: E402
from resume_agent.middleware import REQUEST_ID_HEADER, RequestIdMiddleware, request_id_var  # noqa: E402
from resume_agent.routes import generator, health  # noqa: E402

settings = load_settings()


@asynccontextmanager
async def lifespan(_: FastAPI):
    kb = load_knowledge_base()
    logger.info(
        f"Resume agent ready: {len(kb.skill_categories)} skill categories, "
        f"{len(kb.technology_patterns)} technologies, "
        f"rate limit {settings.rate_limit_per_minute}/minute"
    )
    yield


app = FastAPI(
    title="Resume Agent API",
    version=settings.service_version,
    description="Generates job-tailored resume content from a job description and an optional profile.",
    lifespan=lifespan,
)

# The limiter lives with the routes that use it; slowapi looks it up on app.state.
app.state.limiter = generator.limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Authorization", REQUEST_ID_HEADER],
    expose_headers=[REQUEST_ID_HEADER],
)
# Added last, so it is the outermost layer and tags every response.
app.add_middleware(RequestIdMiddleware)


# ── Error envelopes: always {"detail": ..., "request_id": ...} ───────


def _error(status_code: int, detail) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "request_id": request_id_var.get("-")},
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    if exc.status_code < 500:
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
    return _error(exc.status_code, exc.detail)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"{request.method} {request.url.path} -> 422: {len(exc.errors())} validation error(s)")
    return _error(422, jsonable_encoder(exc.errors()))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}\n{traceback.format_exc()}")
    return _error(500, "Internal server error")


app.include_router(health.router)
app.include_router(generator.router)
