"""User registration and identity."""

import uuid

from fastapi import APIRouter, Depends, HTTPException

from fitmaster.api.deps import get_current_user, get_user_repo
from fitmaster.core.security import hash_password
from fitmaster.repositories import UserRepository
from fitmaster.schemas.user import UserCreate, UserRead

router = APIRouter()


@router.post("", response_model=UserRead, status_code=201)
async def register(
    payload: UserCreate,
    users: UserRepository = Depends(get_user_repo),
):
    """Create an account; authenticate afterwards with HTTP Basic (email + password)."""
    if await users.get_by_email(payload.email):
        raise HTTPException(status_code=409, detail="Email already registered")
    return await users.create(payload.email, hash_password(payload.password))


@router.get("/me", response_model=UserRead)
async def me(
    user_id: uuid.UUID = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repo),
):
    user = await users.get(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user
