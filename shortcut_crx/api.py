from functools import lru_cache
from urllib.parse import quote

from fastapi import Depends, FastAPI, Response, status
from fastapi.responses import JSONResponse

from shortcut_crx.app_factory import create_generator
from shortcut_crx.generator.application.services.extension_generator import (
    ExtensionGenerator,
)
from shortcut_crx.generator.domain.exceptions import (
    IconDownloadError,
    InvalidInputError,
    InvalidUrlError,
    ShortcutError,
)
from shortcut_crx.logger import get_logger
from shortcut_crx.models import ErrorResponse, GenerateRequest, StatusResponse
from shortcut_crx.settings import get_settings

logger = get_logger(__name__)

app = FastAPI(
    title="Site Shortcut Generator",
    description="Turns any web page URL into an installable browser extension.",
)


@lru_cache()
def get_generator() -> ExtensionGenerator:
    return create_generator(get_settings())


def content_disposition(filename: str) -> str:
    """
    Attachment header for ``filename``.

    Header values must be latin-1, so non-ASCII hostnames get an IDNA
    fallback plus an RFC 5987 ``filename*`` parameter.
    """
    try:
        fallback = filename.encode("idna").decode("ascii")
    except UnicodeError:
        fallback = filename.encode("ascii", "replace").decode("ascii")
    fallback = fallback.replace("\\", "_").replace('"', "_")

    if fallback == filename:
        return f'attachment; filename="{filename}"'
    encoded = quote(filename, safe="")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{encoded}"


def _error_response(status_code: int, error: ShortcutError) -> JSONResponse:
    body = ErrorResponse(
        detail=error.message, error_code=error.error_code, context=error.context
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.post(
    "/generate",
    response_class=Response,
    responses={
        200: {"content": {"application/x-chrome-extension": {}}},
        400: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def generate_extension(
    request: GenerateRequest, generator: ExtensionGenerator = Depends(get_generator)
):
    """Build the signed extension for ``request.url`` and return it as a download."""
    logger.info(f"Received generate request for URL: {request.url}")

    try:
        extension = await generator.generate(request.url)
    except (InvalidInputError, InvalidUrlError) as e:
        logger.warning(f"Rejected input {request.url!r}: {e.message}")
        return _error_response(status.HTTP_400_BAD_REQUEST, e)
    except IconDownloadError as e:
        logger.error(f"Icon download failed for {request.url}: {e}")
        return _error_response(status.HTTP_502_BAD_GATEWAY, e)
    except ShortcutError as e:
        logger.exception(f"Could not generate extension for {request.url}: {e}")
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, e)

    return Response(
        content=extension.content,
        media_type=extension.content_type,
        headers={
            "Content-Disposition": content_disposition(extension.filename)
        },
    )


@app.get("/", response_model=StatusResponse)
async def root():
    settings = get_settings()
    return StatusResponse(
        message="Site shortcut generator is running.",
        service=settings.service_name,
        version=settings.service_version,
    )
