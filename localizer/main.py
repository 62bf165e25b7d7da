import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, UploadFile, File, HTTPException

from .config import settings
from .lookup import localize_string, localize_string_with_default, resolve
from .models import HealthResponse, LocalizeRequest, LocalizeResponse, NormalizeResponse
from .normalize import DecodeError, decode_bytes, from_entries, from_mapping

logger = logging.getLogger(__name__)


def configure_logging():
    logging.basicConfig(format="%(asctime)s - %(levelname)s - %(message)s")
    logging.getLogger("localizer").setLevel(settings.log_level.upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    yield


app = FastAPI(
    lifespan=lifespan,
    title="localizer",
    description="Canonical translation tables and suffix-tolerant key lookup",
    version="0.1.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/normalize", response_model=NormalizeResponse)
async def normalize_translations(file: UploadFile = File(...)):
    if not (file.filename or "").lower().endswith(tuple(settings.allowed_extensions)):
        raise HTTPException(status_code=422, detail="Only JSON translation files are supported")

    raw = await file.read(settings.max_upload_bytes + 1)
    if len(raw) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail=f"File exceeds {settings.max_upload_bytes} bytes")

    try:
        document = decode_bytes(raw)
    except DecodeError as exc:
        logger.warning("Rejected %s: %s", file.filename, exc)
        raise HTTPException(status_code=422, detail=exc.errors())

    localization = from_entries(document.entries)
    return {
        "localization": dict(localization),
        "report": {
            "shape": document.shape,
            "encoding": document.encoding,
            "entries": len(document.entries),
            "keys": len(localization),
            "collisions": len(document.entries) - len(localization),
        },
    }

@app.post("/localize", response_model=LocalizeResponse)
def localize(request: LocalizeRequest):
    localization = from_mapping(request.localization)
    if request.default is None:
        value = localize_string(request.key, localization)
    else:
        value = localize_string_with_default(request.default, request.key, localization)
    return {
        "key": request.key,
        "value": value,
        "found": resolve(request.key, localization) is not None,
    }
