import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from cpibridge.bootstrap.deps import get_http_app
from cpibridge.bootstrap.rest_models import ErrorResponse
from cpibridge.core.models.errors import (
    CodecError,
    DecodeError,
    DocumentError,
    EncodeError,
    PayloadTooLarge,
)


app = get_http_app()
log = logging.getLogger("bootstrap.handlers.errors")


def _reply(status_code: int, message: str, exc: Exception, stage: str | None = None) -> JSONResponse:
    body = ErrorResponse(message=message, error=str(exc), stage=stage)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(CodecError)
async def codec_error(request: Request, exc: CodecError) -> JSONResponse:
    log.error(f"{request.method} {request.url.path}: {exc}")

    if isinstance(exc, EncodeError):
        return _reply(500, "Failed to encode data", exc)

    if isinstance(exc, PayloadTooLarge):
        return _reply(413, "Failed to decode data", exc)

    stage = exc.stage.value if isinstance(exc, DecodeError) else None
    return _reply(400, "Failed to decode data", exc, stage)


@app.exception_handler(DocumentError)
async def document_error(request: Request, exc: DocumentError) -> JSONResponse:
    log.error(f"{request.method} {request.url.path}: {exc}")
    return _reply(400, "Decoded data is not a valid object", exc)


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    log.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return _reply(500, "Internal server error", exc)
