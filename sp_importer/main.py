import base64
import hashlib
import os
from functools import lru_cache

from fastapi import Depends, FastAPI, UploadFile, File, HTTPException

from .batch import discover_script_files
from .decoding import decode_bytes, encode_text, split_lines
from .importer import import_lines
from .index import TranslationMemory, build_index
from .models import ImportResponse, HealthResponse
from .rules import SPREADSHEET_EXTENSIONS
from . import __version__

SCRIPT_DIR_ENV = "SP_IMPORTER_SCRIPT_DIR"

app = FastAPI(
    title="sp-importer",
    description="Recover existing translations from script dumps into CSV translation files",
    version=__version__,
)


@lru_cache(maxsize=1)
def get_index() -> TranslationMemory:
    script_dir = os.environ.get(SCRIPT_DIR_ENV)
    if not script_dir:
        raise HTTPException(status_code=503, detail=f"{SCRIPT_DIR_ENV} is not set")
    return build_index(discover_script_files(script_dir))


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/import", response_model=ImportResponse)
async def import_csv(file: UploadFile = File(...), index: TranslationMemory = Depends(get_index)):
    if not file.filename.endswith(SPREADSHEET_EXTENSIONS):
        raise HTTPException(status_code=422, detail="Only CSV files are supported")

    raw = await file.read()
    text, encoding = decode_bytes(raw)
    result = import_lines(split_lines(text), index, path=file.filename)

    out_bytes, encoding = encode_text(result.content, encoding)
    return {
        "imported_csv": {
            "sha256": hashlib.sha256(out_bytes).hexdigest(),
            "encoding": encoding,
            "content_b64": base64.b64encode(out_bytes).decode("ascii"),
        },
        "report": {
            "matched": result.matched,
            "modified": result.modified,
            "pinned_source": result.pinned_source,
        },
    }
