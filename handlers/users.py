"""
handlers/users.py
-----------------
HTTP routes for the users collection.
Each route decodes the request, delegates to UserService and shapes the response.
Failures are raised and turned into statuses by handlers/errors.py.
"""

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from models.user import User, decode_id
from services.user_service import UserService
from utils.errors import UserNotFoundError

user_service = UserService()

router = APIRouter(prefix="/users", tags=["users"])


class UserPayload(BaseModel):
    """Body accepted by POST /users and PUT /users/{id}."""

    name: str
    email: str


class UserOut(BaseModel):
    id: str
    name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserOut":
        return cls(**user.to_dict())


def get_user_service() -> UserService:
    return user_service


@router.get("", response_model=list[UserOut])
def list_users(service: UserService = Depends(get_user_service)):
    """Return every user."""
    return [UserOut.from_user(u) for u in service.list_users()]


@router.post("", status_code=201, response_model=UserOut)
def create_user(payload: UserPayload, service: UserService = Depends(get_user_service)):
    """Create a user; the id is generated server-side."""
    user = service.create_user(payload.name, payload.email)
    return UserOut.from_user(user)


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    raw_id = decode_id(user_id)
    user = service.get_user(raw_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return UserOut.from_user(user)


@router.put("/{user_id}", response_model=UserOut)
def update_user(
    user_id: str,
    payload: UserPayload,
    service: UserService = Depends(get_user_service),
):
    """Replace name and email. A missing user is reported as 404."""
    raw_id = decode_id(user_id)
    user = service.update_user(raw_id, payload.name, payload.email)
    return UserOut.from_user(user)


@router.delete("/{user_id}", status_code=204)
def delete_user(user_id: str, service: UserService = Depends(get_user_service)):
    """Delete a user. 404 when nothing was deleted."""
    raw_id = decode_id(user_id)
    if service.delete_user(raw_id) == 0:
        raise UserNotFoundError(user_id)
    return Response(status_code=204)
