"""Profile routes."""
from fastapi import APIRouter, Depends

from fittracker.errors import Conflict, NotFound
from fittracker.repositories import DataStore, Record, get_store
from fittracker.schemas.auth import TokenPayload
from fittracker.schemas.user import BMIResponse, UserResponse, UserUpdate
from fittracker.services.auth_service import AuthService
from fittracker.services.body_metrics import bmi_category, calculate_bmi
from fittracker.utils.auth import get_auth_service, get_current_user

router = APIRouter(prefix="/profile", tags=["Profile"])


async def _load_user(store: DataStore, current_user: TokenPayload) -> Record:
    user = await store.users.get(current_user.id)
    if not user:
        raise NotFound("User not found")
    return user


@router.get("", response_model=UserResponse)
async def get_profile(
    store: DataStore = Depends(get_store),
    current_user: TokenPayload = Depends(get_current_user),
):
    """Get the current user's profile."""
    return await _load_user(store, current_user)


@router.put("", response_model=UserResponse)
async def update_profile(
    updates: UserUpdate,
    store: DataStore = Depends(get_store),
    auth_service: AuthService = Depends(get_auth_service),
    current_user: TokenPayload = Depends(get_current_user),
):
    """Update the current user's profile; fields not sent are kept."""
    user = await _load_user(store, current_user)
    update_data = updates.model_dump(exclude_unset=True)

    # Credentials can be replaced but not cleared
    email = update_data.pop("email", None)
    password = update_data.pop("password", None)

    if email is not None and email != user["email"]:
        if await store.users.first(email=email):
            raise Conflict("Email already registered")
        update_data["email"] = email

    if password is not None:
        update_data["password_hash"] = auth_service.hash_password(password)

    updated = await store.users.update(user["id"], update_data)
    if not updated:
        raise NotFound("User not found")

    return updated


@router.get("/bmi", response_model=BMIResponse)
async def get_bmi(
    store: DataStore = Depends(get_store),
    current_user: TokenPayload = Depends(get_current_user),
):
    """Body mass index from the profile's height and weight."""
    user = await _load_user(store, current_user)
    bmi = calculate_bmi(user.get("weight"), user.get("height"))

    return BMIResponse(
        bmi=bmi,
        category=bmi_category(bmi),
        height=user.get("height"),
        weight=user.get("weight"),
    )
