import logging
import time

from fastapi import Depends
from fastapi.responses import JSONResponse

from cpibridge.bootstrap.deps import get_http_app, get_service
from cpibridge.bootstrap.rest_models import (
    ConvertResponse,
    DataRequest,
    DebugResponse,
    ErrorResponse,
    HealthResponse,
)
from cpibridge.core.service.bridge import BridgeService


app = get_http_app()
log = logging.getLogger("bootstrap.handlers.api")


def _missing_data() -> JSONResponse:
    log.error('Missing "data" field in POST body')
    body = ErrorResponse(message='Missing "data" field in request body')
    return JSONResponse(status_code=400, content=body.model_dump())


def _dump(service: BridgeService, encoded: str) -> DebugResponse:
    log.info(f"Decoding {len(encoded)} chars")
    result = service.dump(encoded)
    return DebugResponse(
        message="Data decoded successfully",
        data=result.data,
        files=result.files
    )


def _convert(service: BridgeService, encoded: str) -> ConvertResponse:
    log.info(f"Converting {len(encoded)} chars for the IDE")
    result = service.convert(encoded)

    if result.warning is None:
        message = "Data converted and opened in Contiva IDE"
    else:
        message = "Data converted successfully (browser opening failed)"

    return ConvertResponse(
        message=message,
        contivaData=result.payload.to_dict(),
        encoded=result.encoded,
        encodedLength=len(result.encoded),
        url=result.url,
        warning=result.warning
    )


@app.get("/debug/{data:path}", response_model=DebugResponse)
async def debug_from_path(data: str, service: BridgeService = Depends(get_service)):
    return _dump(service, data)


@app.post("/debug", response_model=DebugResponse)
async def debug_from_body(body: DataRequest, service: BridgeService = Depends(get_service)):
    if not body.data:
        return _missing_data()
    return _dump(service, body.data)


@app.get("/contiva/{data:path}", response_model=ConvertResponse)
async def contiva_from_path(data: str, service: BridgeService = Depends(get_service)):
    return _convert(service, data)


@app.post("/contiva", response_model=ConvertResponse)
async def contiva_from_body(body: DataRequest, service: BridgeService = Depends(get_service)):
    if not body.data:
        return _missing_data()
    return _convert(service, body.data)


@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(uptime=time.monotonic() - app.state.started_at)
