"""
API dependencies for dependency injection.

The session factory lives on ``app.state`` (set up by ``create_app``), so
each application instance, including the ones built in tests, owns its store.
"""

from typing import Generator
from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from domain.models import AppUser
from domain.schemas import MealWrite
from services import UserService


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_session_token(request: Request) -> str:
    """Raw session token from the request cookie ("" when absent)"""
    cookie_name = request.app.state.settings.session_cookie_name
    return request.cookies.get(cookie_name) or ""


def get_current_user(
    request: Request,
    session_token: str = Depends(get_session_token),
    db: Session = Depends(get_db),
) -> AppUser:
    """
    Session guard: resolve the cookie to a user or fail with 401.

    Runs before the route's own parameters are validated, so an
    unauthenticated request never reaches the meal store.
    """
    user = UserService.authenticate(db, session_token)
    request.state.user = user
    return user


async def get_meal_body(
    request: Request, user: AppUser = Depends(get_current_user)
) -> MealWrite:
    """
    Decode and validate a meal body once the session guard has passed.

    An anonymous request with a garbled body gets 401, not 422.
    """
    try:
        payload = await request.json()
    except ValueError as exc:
        raise RequestValidationError(
            [
                {
                    "type": "json_invalid",
                    "loc": ("body",),
                    "msg": "JSON decode error",
                    "input": {},
                    "ctx": {"error": str(exc)},
                }
            ]
        )
    try:
        return MealWrite.model_validate(payload)
    except ValidationError as exc:
        raise RequestValidationError(
            [
                {**error, "loc": ("body", *error["loc"])}
                for error in exc.errors(include_url=False)
            ],
            body=payload,
        )
