"""API routes implementation."""

from fastapi import APIRouter, Request

from smolurl.common.validators import LinkRequest
from smolurl.result import Err

from ..errors import error_response
from .schemas import CreateLinkRequest, CreateLinkResponse, ErrorResponse

router = APIRouter()


@router.post(
    "/url",
    response_model=CreateLinkResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid url or code"},
        409: {"model": ErrorResponse, "description": "Code already in use"},
        503: {"model": ErrorResponse, "description": "Storage unavailable"},
    },
    summary="Create short link",
    description="Create a short link. Optionally provide a custom code.",
)
async def create_link(request: Request, body: CreateLinkRequest):
    """Create a short link."""
    service = request.app.state.service
    config = request.app.state.config

    result = await service.create_link(LinkRequest(url=body.url, code=body.code))

    if isinstance(result, Err):
        return error_response(result.error, config.is_production)

    created = result.value
    return CreateLinkResponse(
        code=created.link.code,
        url=created.link.url,
        created_at=created.link.created_at,
        link=created.short_url,
    )
