import os
from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import FileResponse
from app.utils.storage import doc_dir

router = APIRouter(tags=["download"])

@router.get("/download")
def download(
    doc_id: str = Query(..., description="Document ID returned by /upload"),
    filename: str = Query(..., description="File in the doc folder, e.g. extracted.txt or original.pdf")
):
    if os.path.basename(filename) != filename:
        raise HTTPException(status_code=400, detail="Invalid filename")
    path = os.path.join(doc_dir(doc_id), filename)
    if not os.path.isfile(path):
        raise HTTPException(status_code=404, detail="File not found")
    return FileResponse(path, filename=filename)
