"""Auth routes: signup, login, current user. Stateless bearer tokens."""
from __future__ import annotations

import logging
import re
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mylife.core.config import Settings
from mylife.core.security import create_access_token, hash_password, normalize_email, verify_password
from mylife.db.session import get_db
from mylife.models.user import User
from mylife.routers.deps import CurrentUserId, get_app_settings
from mylife.schemas.auth import AuthOutSchema, LoginSchema, MeOutSchema, SignupSchema, UserOutSchema

router = APIRouter(prefix="/api/auth", tags=["auth"])
logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MIN_PASSWORD_LENGTH = 6
# bcrypt hard limit (UTF-8 bytes)
MAX_PASSWORD_BYTES = 72


@router.post("/signup", response_model=AuthOutSchema, status_code=201)
async def signup(
    body: SignupSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    """Create a user and return a token for it."""
    email = normalize_email(body.email)
    name = body.name.strip()
    password = body.password or ""

    if not email or not name or not password:
        raise HTTPException(status_code=400, detail="Email, name, and password are required")
    if not EMAIL_RE.match(email):
        raise HTTPException(status_code=400, detail="Invalid email address")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise HTTPException(
            status_code=400, detail=f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise HTTPException(status_code=400, detail="Password is too long")

    result = await db.execute(select(User.id).where(User.email == email))
    if result.scalar_one_or_none() is not None:
        raise HTTPException(status_code=400, detail="Email already registered")

    user = User(email=email, name=name, hashed_password=hash_password(password))
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        # lost a race with a concurrent signup for the same email
        await db.rollback()
        raise HTTPException(status_code=400, detail="Email already registered")
    await db.refresh(user)

    logger.info("User signed up: %s", user.id)
    token = create_access_token(user.id, settings)
    return AuthOutSchema(user=UserOutSchema.model_validate(user), token=token)


@router.post("/login", response_model=AuthOutSchema)
async def login(
    body: LoginSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    """Exchange email and password for a fresh token."""
    email = normalize_email(body.email)
    result = await db.execute(select(User).where(User.email == email))
    user = result.scalar_one_or_none()
    if user is None or not verify_password(body.password or "", user.hashed_password):
        raise HTTPException(status_code=401, detail="Invalid email or password")

    token = create_access_token(user.id, settings)
    return AuthOutSchema(user=UserOutSchema.model_validate(user), token=token)


@router.get("/me", response_model=MeOutSchema)
async def me(
    user_id: CurrentUserId,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return MeOutSchema(user=UserOutSchema.model_validate(user))
