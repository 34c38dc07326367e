import os, uuid, tempfile, logging
from fastapi import UploadFile, HTTPException
import magic
from app.core import config
from app.core.config import ALLOWED_EXTENSIONS, MIME_ALLOW, EXTRACTED_FILENAME

log = logging.getLogger("storage")

def doc_dir(doc_id: str) -> str:
    # doc ids are hex; anything else could escape DATA_DIR
    if not doc_id.isalnum():
        raise HTTPException(status_code=400, detail="Invalid document ID")
    return os.path.join(config.DATA_DIR, doc_id)

def _upload_ext(file: UploadFile) -> str:
    ext = os.path.splitext(file.filename or "")[1].lower()
    if ext not in ALLOWED_EXTENSIONS:
        raise HTTPException(status_code=400, detail="Only PDF or image files are allowed")
    return ext

async def _spool(file: UploadFile) -> str:
    """Stream the upload to a temp file in 1 MB chunks and return its path."""
    with tempfile.NamedTemporaryFile(delete=False) as tmp:
        while True:
            chunk = await file.read(1 << 20)  # 1 MB
            if not chunk:
                break
            tmp.write(chunk)
    return tmp.name

def _sniffed_mime(path: str, ext: str) -> str:
    # trust the bytes, not the client's Content-Type
    file_mime = magic.Magic(mime=True).from_file(path)
    if file_mime not in MIME_ALLOW[ext]:
        os.remove(path)
        raise HTTPException(
            status_code=400,
            detail=f"Unexpected MIME type: {file_mime} for {ext}"
        )
    return file_mime

async def save_secure(file: UploadFile) -> tuple[str, str]:
    """
    Validate an uploaded PDF/image and move it to DATA_DIR/<doc_id>/original.<ext>.
    Returns (doc_id, stored path).
    """
    ext = _upload_ext(file)
    tmp_path = await _spool(file)
    file_mime = _sniffed_mime(tmp_path, ext)

    doc_id = uuid.uuid4().hex[:12]
    target = doc_dir(doc_id)
    os.makedirs(target, mode=0o700, exist_ok=True)
    dest = os.path.join(target, f"original{ext}")
    os.replace(tmp_path, dest)
    log.info("Stored upload doc=%s mime=%s", doc_id, file_mime)
    return doc_id, dest

def save_extracted(doc_id: str, text: str) -> str:
    path = os.path.join(doc_dir(doc_id), EXTRACTED_FILENAME)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    return path

def load_extracted(doc_id: str) -> str:
    path = os.path.join(doc_dir(doc_id), EXTRACTED_FILENAME)
    if not os.path.isfile(path):
        raise HTTPException(status_code=404, detail="No extracted text found")
    with open(path, encoding="utf-8") as f:
        return f.read()
