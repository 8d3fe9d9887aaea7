from __future__ import annotations

import logging
from datetime import date
from functools import lru_cache
from typing import Optional

from fastapi import Depends, FastAPI, Header, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ...api import call_api, get_api_functions
from ...api.models import ApiCallRequest, ProcessRequest
from ..assistant import AssistantService
from ..auth import AuthenticationError, AuthService
from ..context import ServiceContext

logger = logging.getLogger(__name__)

app = FastAPI(title="Sinc Assistant API", version="0.3.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def _context() -> ServiceContext:
    return ServiceContext()


@lru_cache(maxsize=1)
def get_assistant_service() -> AssistantService:
    return AssistantService(_context())


def get_auth_service() -> AuthService:
    return AuthService(_context())


def get_today() -> date:
    return date.today()


def current_user_id(
    authorization: Optional[str] = Header(default=None),
    auth: AuthService = Depends(get_auth_service),
) -> str:
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise HTTPException(status_code=401, detail="Missing bearer token")
    try:
        return auth.resolve_user_id(token.strip())
    except AuthenticationError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc


@app.exception_handler(RequestValidationError)
async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [{"loc": list(error.get("loc", ())), "msg": error.get("msg", "")} for error in exc.errors()]
    return JSONResponse(status_code=400, content={"errors": errors})


@app.get("/api/health")
async def health() -> JSONResponse:
    return JSONResponse({"status": "OK", "message": "Server is running"})


@app.post("/api/ai/process")
def process_assistant_request(
    request: ProcessRequest,
    user_id: str = Depends(current_user_id),
    service: AssistantService = Depends(get_assistant_service),
    today: date = Depends(get_today),
) -> JSONResponse:
    try:
        response = service.process(user_id, request.text, history=request.history(), today=today)
    except Exception:  # noqa: BLE001
        logger.exception("Assistant processing failed for user %s", user_id)
        return JSONResponse(status_code=500, content={"error": "AI processing failed"})
    return JSONResponse(response.to_dict())


@app.get("/api/functions")
async def list_api_functions() -> JSONResponse:
    return JSONResponse({"functions": [func.describe() for func in get_api_functions()]})


@app.post("/api/functions/{function_name}")
def invoke_api_function(function_name: str, request: ApiCallRequest) -> JSONResponse:
    try:
        result = call_api(function_name, **request.arguments)
    except KeyError as exc:
        logger.warning("API function not found: %s", function_name)
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:  # noqa: BLE001
        logger.exception("API function %s failed", function_name)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    logger.debug("API function %s executed successfully", function_name)
    return JSONResponse({"name": function_name, "result": result})


def run_local_server(host: str = "127.0.0.1", port: int = 8000) -> None:
    import asyncio

    from hypercorn.asyncio import serve
    from hypercorn.config import Config

    config = Config()
    config.bind = [f"{host}:{port}"]
    asyncio.run(serve(app, config))
