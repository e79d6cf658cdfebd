"""Shared route dependencies: settings, bearer authentication."""
from typing import Annotated

from fastapi import Depends, Header, HTTPException, Request

from mylife.core.config import Settings
from mylife.core.security import decode_access_token, parse_bearer


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_user_id_optional(
    settings: Annotated[Settings, Depends(get_app_settings)],
    authorization: Annotated[str | None, Header()] = None,
) -> str | None:
    """Return the user id from a valid bearer token; else None."""
    token = parse_bearer(authorization)
    if token is None:
        return None
    return decode_access_token(token, settings)


def get_current_user_id(
    user_id: Annotated[str | None, Depends(get_current_user_id_optional)],
) -> str:
    if user_id is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user_id


CurrentUserId = Annotated[str, Depends(get_current_user_id)]
