"""User registration routes"""

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from api.dependencies import get_db, get_session_token
from domain.schemas import UserCreate
from services import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_user(
    user: UserCreate,
    request: Request,
    session_token: str = Depends(get_session_token),
    db: Session = Depends(get_db),
):
    """
    Register a user and bind it to the caller's session.

    A ``sessionId`` cookie is set only when the server minted a new token.
    Returns 400 when the email is already registered.
    """
    new_user, issued = UserService.register(db, user.name, user.email, session_token or None)

    response = Response(status_code=status.HTTP_201_CREATED)
    if issued:
        settings = request.app.state.settings
        response.set_cookie(
            settings.session_cookie_name,
            new_user.session_id,
            path="/",
            max_age=settings.session_max_age_seconds,
        )
    return response
