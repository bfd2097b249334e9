"""
Session API endpoints.

Log-on creates a session, log-out deletes it.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_authentication_service
from api.middleware.auth import get_current_session, get_current_user
from api.models.responses import StandardResponse
from shared.models import AuthenticatedUser

from .exceptions import LogOutError
from .interfaces import IAuthenticationService
from .models import AuthenticatedSession, LogOnInfo, LogOnRequest, SessionInfo

router = APIRouter()


@router.post("", response_model=StandardResponse, status_code=201)
async def create_session(
    request: LogOnRequest,
    service: IAuthenticationService = Depends(get_authentication_service),
) -> JSONResponse:
    """
    Log on with e-mail address and password.

    Every failure gets the same 401 answer.
    """
    result = await service.log_on(LogOnInfo(email=request.email_address, password=request.password))
    if result is None:
        body = StandardResponse(
            success=False,
            message="Authentication failed. E-mail address or password incorrect.",
        )
        return JSONResponse(status_code=401, content=body.model_dump(mode="json"))

    body = StandardResponse(
        success=True,
        message="You have been successfully authenticated.",
        data=result,
    )
    return JSONResponse(status_code=201, content=body.model_dump(mode="json"))


@router.get("", response_model=StandardResponse)
async def get_session(
    user: AuthenticatedUser = Depends(get_current_user),
) -> StandardResponse:
    """Describe the current session."""
    return StandardResponse(
        success=True,
        data=SessionInfo(profile_id=user.id, email=user.email, full_name=user.full_name),
    )


@router.delete("", response_model=StandardResponse)
async def delete_session(
    session: AuthenticatedSession = Depends(get_current_session),
    service: IAuthenticationService = Depends(get_authentication_service),
) -> JSONResponse:
    """Log out, revoking the current session token."""
    try:
        success = await service.log_out(session.user, session.claims)
    except LogOutError as e:
        body = StandardResponse(
            success=False,
            message="There was a problem logging you out.",
            data=e.to_dict(),
        )
        return JSONResponse(status_code=500, content=body.model_dump(mode="json"))

    body = StandardResponse(
        success=success,
        message="You have been successfully logged out." if success else "You have not been logged out.",
    )
    return JSONResponse(status_code=200 if success else 500, content=body.model_dump(mode="json"))
