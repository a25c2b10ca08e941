"""
FastAPI Endpoints for the smmsg Function

The smmsg endpoint inspects only its own request URL:
- Validates it (rejections become a generic HTTP 400)
- Logs a sanitized copy of it
- Returns a fixed plain-text body

The HTTP method is never inspected and the request body is never read.
Authentication is deliberately not required (anonymous trigger).
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import PlainTextResponse

from smmsg.api.schemas import ErrorResponse
from smmsg.core.exceptions import InvalidURLError
from smmsg.core.sanitizer import sanitize_url
from smmsg.core.setting import settings
from smmsg.core.validators import Invalid, validate_url

logger = logging.getLogger("smmsg")

SUCCESS_BODY = "Relentlessly Practical. Relentlessly Securable."

router = APIRouter()


@router.api_route(
    "/api/smmsg",
    methods=["GET", "POST"],
    response_class=PlainTextResponse,
    status_code=status.HTTP_200_OK,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
    summary="Validate and log the request URL",
    description="Validates the request URL, logs a sanitized copy and returns a fixed message"
)
async def smmsg(request: Request) -> PlainTextResponse:
    """
    Handle an smmsg invocation.

    Raises:
        InvalidURLError: If the request URL fails validation
            (rendered as HTTP 400 by the registered exception handler)
    """
    raw_url = str(request.url)

    allowed_domains = settings.ALLOWED_DOMAINS if settings.DOMAIN_ALLOWLIST_ENABLED else None
    validation = validate_url(
        raw_url,
        allowed_domains=allowed_domains,
        max_length=settings.MAX_URL_LENGTH,
    )
    if isinstance(validation, Invalid):
        raise InvalidURLError(validation.reason)

    # Sanitize the raw URL, not the normalized one, so logs reflect what was sent
    sanitized_url = sanitize_url(raw_url, max_length=settings.MAX_LOGGED_URL_LENGTH)
    logger.info(f'Http function processed request for url "{sanitized_url}"')

    return PlainTextResponse(SUCCESS_BODY)
