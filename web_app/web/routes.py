"""Browser-facing routes: redirects, the fallback page and health."""

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from ..api.schemas import HealthResponse

router = APIRouter()

ERROR_PAGE = """<!DOCTYPE html>
<html lang="en">
<head><meta charset="utf-8"><title>smolurl - link not found</title></head>
<body>
<h1>Link not found</h1>
<p>This short link does not exist. Check the address and try again.</p>
</body>
</html>
"""


@router.get("/error", response_class=HTMLResponse, include_in_schema=False)
async def error_page():
    """Default fallback destination for unknown codes."""
    return HTMLResponse(content=ERROR_PAGE, status_code=status.HTTP_200_OK)


@router.get("/health", include_in_schema=False)
async def health_check(request: Request):
    """Health check endpoint (simple version for load balancers)."""
    service = request.app.state.service

    health = await service.health_check()

    body = HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        database="healthy" if health["database"] else "unhealthy",
        cache="healthy" if health["cache"] else "unhealthy",
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK if health["overall"] else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(),
    )


@router.get("/{code}", include_in_schema=False)
async def redirect_to_url(request: Request, code: str):
    """Redirect to the stored URL, or to the fallback page for unknown codes."""
    service = request.app.state.service

    target = await service.resolve(code)

    return RedirectResponse(url=target.location, status_code=status.HTTP_302_FOUND)
