"""
Profile API endpoints.

Translates profile operations into HTTP responses. Each failure reason
contributes a sentence to the response message; the status code is the
one mapped to the last reason reported.
"""

import logging
from typing import Any, Iterable, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_authentication_service, get_profile_service
from api.middleware.auth import get_current_session, get_current_user
from api.models.responses import StandardResponse
from shared.models import AuthenticatedUser
from modules.sessions.exceptions import LogOutError
from modules.sessions.interfaces import IAuthenticationService
from modules.sessions.models import AuthenticatedSession

from .interfaces import IProfileService
from .models import ConfirmEmailRequest, FailureReason, NewProfile, ProfileChanges

logger = logging.getLogger(__name__)

router = APIRouter()

Outcomes = dict[FailureReason, tuple[int, str]]

CREATE_OUTCOMES: Outcomes = {
    FailureReason.NONE: (201, "Your profile has been created successfully."),
    FailureReason.DUPLICATE_EMAIL: (409, "An account with this e-mail address already exists."),
    FailureReason.INACTIVE_PROFILE: (401, "The account is currently inactive."),
    FailureReason.MISSING_REQUIRED: (400, "A required field is missing from your profile."),
    FailureReason.UNCONFIRMED_EMAIL: (409, "The e-mail address for this account has not been confirmed yet."),
    FailureReason.UNKNOWN: (500, "There was an unknown error creating your profile."),
}

CONFIRM_OUTCOMES: Outcomes = {
    FailureReason.NONE: (200, "Your e-mail address has been confirmed successfully."),
    FailureReason.DUPLICATE_EMAIL: (409, "This e-mail address had already been confirmed."),
    FailureReason.INACTIVE_PROFILE: (401, "This profile is currently inactive."),
    FailureReason.NON_EXISTENT_PROFILE: (
        404,
        "A profile with the given e-mail address and confirmation token was not found.",
    ),
    FailureReason.UNKNOWN: (500, "There was an unknown error confirming your e-mail address."),
}

UPDATE_OUTCOMES: Outcomes = {
    FailureReason.NONE: (200, "Your profile has been updated successfully."),
    FailureReason.DUPLICATE_EMAIL: (409, "An account with this e-mail address already exists."),
    FailureReason.INACTIVE_PROFILE: (401, "This profile is currently inactive."),
    FailureReason.MISSING_REQUIRED: (400, "A required field cannot be left empty."),
    FailureReason.NON_EXISTENT_PROFILE: (404, "Your profile was not found."),
    FailureReason.UNKNOWN: (500, "There was an unknown error updating your profile."),
}

DEACTIVATE_OUTCOMES: Outcomes = {
    FailureReason.NONE: (200, "Your profile has been deactivated."),
    FailureReason.NON_EXISTENT_PROFILE: (404, "Your profile was not found."),
    FailureReason.UNKNOWN: (500, "There was an unknown error deactivating your profile."),
}


def build_response(
    reasons: Iterable[FailureReason],
    outcomes: Outcomes,
    data: Optional[Any] = None,
) -> JSONResponse:
    """Aggregate reported reasons into one StandardResponse."""
    status_code = 500
    success = False
    message = ""
    for reason in reasons:
        status_code, text = outcomes.get(reason, outcomes[FailureReason.UNKNOWN])
        success = reason == FailureReason.NONE
        message += f"{text} "

    body = StandardResponse(success=success, message=message.rstrip(), data=data)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@router.post("", response_model=StandardResponse, status_code=201)
async def create_profile(
    request: NewProfile,
    service: IProfileService = Depends(get_profile_service),
) -> JSONResponse:
    """
    Sign up a new profile.

    The response message lists every reason the signup was refused.
    """
    reasons = await service.create_new_profile(request)
    return build_response(reasons, CREATE_OUTCOMES)


@router.patch("", response_model=StandardResponse)
async def confirm_profile_email(
    request: ConfirmEmailRequest,
    service: IProfileService = Depends(get_profile_service),
) -> JSONResponse:
    """Confirm the e-mail address of a profile with its confirmation token."""
    reason = await service.confirm_profile_email_address(
        request.email_address,
        request.confirmation_token,
    )
    return build_response([reason], CONFIRM_OUTCOMES)


@router.get("", response_model=StandardResponse)
async def get_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> JSONResponse:
    """Get the profile of the current session, without sensitive fields."""
    profile = await service.get_profile(user.id)
    if profile is None:
        return build_response([FailureReason.NON_EXISTENT_PROFILE], UPDATE_OUTCOMES)

    body = StandardResponse(success=True, data=service.clean_profile_for_client(profile))
    return JSONResponse(status_code=200, content=body.model_dump(mode="json"))


@router.put("", response_model=StandardResponse)
async def update_profile(
    request: ProfileChanges,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> JSONResponse:
    """Update the profile of the current session."""
    reason = await service.update_profile(user.id, request)
    return build_response([reason], UPDATE_OUTCOMES)


@router.delete("", response_model=StandardResponse)
async def deactivate_profile(
    session: AuthenticatedSession = Depends(get_current_session),
    service: IProfileService = Depends(get_profile_service),
    auth: IAuthenticationService = Depends(get_authentication_service),
) -> JSONResponse:
    """
    Deactivate the profile of the current session and end the session.

    A deactivated profile can no longer authenticate, so a failure to revoke
    the session token is logged and the deactivation is still reported.
    """
    reason = await service.deactivate_profile(session.user.id)
    if reason == FailureReason.NONE:
        try:
            await auth.log_out(session.user, session.claims)
        except LogOutError:
            logger.exception("Failed to end session %s after deactivation", session.claims.jti)
    return build_response([reason], DEACTIVATE_OUTCOMES)
