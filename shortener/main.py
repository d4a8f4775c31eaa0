"""
Auth Service
Handles: user registration, login, JWT issuance
Port: 5000 (PORT)

Routes:
- POST /api/users   register a user
- POST /api/auth    log in and receive a token
- GET  /api/health  liveness probe
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Body, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from . import config
from .database import close_db, init_db
from .dependencies import get_user_store
from .exceptions import INTERNAL_ERROR, AuthServiceError
from .models import LoginResponse, MessageResponse, RegisterResponse
from .repository import UserStore
from .services import authenticate_user, register_user

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("[auth-service] Started on port %s", config.PORT)
    yield
    close_db()


# ── App ───────────────────────────────────────────────────────────────────────
app = FastAPI(title="URL Shortener Auth Service", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_RESPONSES = {
    400: {"model": MessageResponse},
    500: {"model": MessageResponse},
}


# ── Error handlers ────────────────────────────────────────────────────────────

@app.exception_handler(AuthServiceError)
async def auth_service_error(request: Request, exc: AuthServiceError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error(request: Request, exc: RequestValidationError):
    # only reachable when the body is not parseable JSON
    return JSONResponse(status_code=400, content={"message": "Request body must be valid JSON"})


@app.exception_handler(Exception)
async def server_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": INTERNAL_ERROR})


# ── Endpoints ─────────────────────────────────────────────────────────────────

@app.post(
    "/api/users",
    status_code=201,
    response_model=RegisterResponse,
    responses={**ERROR_RESPONSES, 409: {"model": MessageResponse}},
)
def register(payload: Any = Body(None), store: UserStore = Depends(get_user_store)):
    return register_user(payload, store)


@app.post(
    "/api/auth",
    response_model=LoginResponse,
    responses={**ERROR_RESPONSES, 401: {"model": MessageResponse}},
)
def login(payload: Any = Body(None), store: UserStore = Depends(get_user_store)):
    return authenticate_user(payload, store)


@app.get("/api/health", response_class=PlainTextResponse)
def health():
    return "OK"


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("shortener.main:app", host=config.HOST, port=config.PORT)
