"""
FastAPI routes the desktop UI calls on the local backend.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Request

from sophos_dashboard.core.exceptions import (
    AuthError,
    CredentialsAbsentError,
    CredentialsMalformedError,
    FetchError,
    StorageIOError,
)
from sophos_dashboard.dependencies import (
    get_dashboard_commands,
    get_dashboard_data_service,
)
from sophos_dashboard.schemas import AccessTokenPayload, SophosCredentials
from sophos_dashboard.services import CommandError, summarize_endpoints

router = APIRouter()
logger = logging.getLogger(__name__)

_STATUS_BY_CAUSE: dict[type, HTTPStatus] = {
    CredentialsAbsentError: HTTPStatus.NOT_FOUND,
    CredentialsMalformedError: HTTPStatus.UNPROCESSABLE_ENTITY,
    AuthError: HTTPStatus.BAD_GATEWAY,
    FetchError: HTTPStatus.BAD_GATEWAY,
    StorageIOError: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def _to_http_error(exc: CommandError) -> HTTPException:
    status = _STATUS_BY_CAUSE.get(type(exc.__cause__))
    if status is None:
        # load_credentials reports a missing file without an underlying cause.
        status = HTTPStatus.NOT_FOUND if exc.__cause__ is None else HTTPStatus.INTERNAL_SERVER_ERROR
    return HTTPException(status_code=status, detail=exc.message)


@router.get("/health", status_code=HTTPStatus.OK)
async def healthcheck(request: Request) -> dict:
    """Simple health endpoint for the UI shell."""
    return {
        "status": "ok",
        "environment": request.app.state.environment,
        "version": request.app.version,
    }


@router.post("/token", status_code=HTTPStatus.OK)
async def get_access_token(
    commands: Annotated[Any, Depends(get_dashboard_commands)],
) -> dict:
    """Exchange the stored client credentials for a bearer token."""
    try:
        access_token = await commands.get_access_token()
    except CommandError as exc:
        raise _to_http_error(exc) from exc
    return {"access_token": access_token}


@router.post("/endpoints", status_code=HTTPStatus.OK)
async def fetch_endpoints(
    payload: AccessTokenPayload,
    commands: Annotated[Any, Depends(get_dashboard_commands)],
) -> dict:
    """Return the tenant's endpoints, served from cache when fresh."""
    try:
        endpoints = await commands.fetch_endpoints(payload.access_token)
    except CommandError as exc:
        raise _to_http_error(exc) from exc
    return {
        "endpoints": [endpoint.to_wire() for endpoint in endpoints],
        "count": len(endpoints),
    }


@router.post("/endpoints/summary", status_code=HTTPStatus.OK)
async def summarize(
    payload: AccessTokenPayload,
    commands: Annotated[Any, Depends(get_dashboard_commands)],
) -> dict:
    """Return dashboard statistics for the tenant's endpoints."""
    try:
        endpoints = await commands.fetch_endpoints(payload.access_token)
    except CommandError as exc:
        raise _to_http_error(exc) from exc
    return summarize_endpoints(endpoints).model_dump()


@router.get("/dashboard", status_code=HTTPStatus.OK)
async def dashboard_data(
    data_service: Annotated[Any, Depends(get_dashboard_data_service)],
) -> dict:
    """Endpoints plus statistics, falling back to demo data when unavailable."""
    result = await data_service.get_endpoint_data()
    return {
        "success": result.success,
        "source": result.source,
        "error": result.error,
        "endpoints": [endpoint.to_wire() for endpoint in result.data],
        "stats": summarize_endpoints(result.data).model_dump(),
    }


@router.delete("/cache", status_code=HTTPStatus.OK)
async def clear_cache(
    commands: Annotated[Any, Depends(get_dashboard_commands)],
) -> dict:
    """Drop the cached endpoint snapshot."""
    try:
        message = commands.clear_cache()
    except CommandError as exc:
        raise _to_http_error(exc) from exc
    return {"message": message}


@router.get("/credentials", status_code=HTTPStatus.OK)
async def load_credentials(
    commands: Annotated[Any, Depends(get_dashboard_commands)],
) -> dict:
    """Return the stored credentials."""
    try:
        credentials = commands.load_credentials()
    except CommandError as exc:
        raise _to_http_error(exc) from exc
    return credentials.model_dump()


@router.put("/credentials", status_code=HTTPStatus.OK)
async def save_credentials(
    credentials: SophosCredentials,
    commands: Annotated[Any, Depends(get_dashboard_commands)],
) -> dict:
    """Overwrite the stored credentials."""
    try:
        message = commands.save_credentials(credentials)
    except CommandError as exc:
        raise _to_http_error(exc) from exc
    return {"message": message}


@router.get("/credentials/path", status_code=HTTPStatus.OK)
async def secrets_file_path(
    commands: Annotated[Any, Depends(get_dashboard_commands)],
) -> dict:
    """Report where the secrets file is expected."""
    return {"path": commands.get_secrets_file_path()}


__all__ = ["router"]
