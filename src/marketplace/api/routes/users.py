from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from marketplace.api.dependencies import get_user_service
from marketplace.domain.models import UserCreate, UserPublic
from marketplace.domain.ports import UsernameTakenError
from marketplace.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])

ServiceDep = Annotated[UserService, Depends(get_user_service)]


@router.post("", response_model=UserPublic, status_code=status.HTTP_201_CREATED)
async def register_user(payload: UserCreate, service: ServiceDep) -> UserPublic:
    try:
        user = await service.register(payload)
    except UsernameTakenError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return UserPublic(id=user.id, username=user.username)


@router.get("/{user_id}", response_model=UserPublic)
async def get_user(user_id: int, service: ServiceDep) -> UserPublic:
    user = await service.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")
    return UserPublic(id=user.id, username=user.username)
