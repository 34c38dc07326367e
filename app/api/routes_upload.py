import logging
from fastapi import APIRouter, UploadFile, File, HTTPException
from starlette.concurrency import run_in_threadpool
from app.models.report import UploadResult
from app.services.extract import extract_text, ExtractError
from app.utils.storage import save_secure, save_extracted

log = logging.getLogger("upload")

router = APIRouter(tags=["upload"])

@router.post("/upload", response_model=UploadResult)
async def upload(file: UploadFile = File(...)):
    doc_id, path = await save_secure(file)
    try:
        # rasterising and OCR are CPU-bound; keep them off the event loop
        text = await run_in_threadpool(extract_text, path)
    except ExtractError:
        raise HTTPException(status_code=422, detail="Upload failed. Please try again.")
    save_extracted(doc_id, text)
    log.info("Extracted %d characters for doc=%s", len(text), doc_id)
    return UploadResult(doc_id=doc_id, text=text)
