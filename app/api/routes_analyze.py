import os
from fastapi import APIRouter, HTTPException
from app.models.report import AnalysisInput, AnalysisResult, Report
from app.services.analyze import analyze, analyze_document
from app.utils.storage import doc_dir

router = APIRouter(tags=["analyze"])

@router.post("/analyze", response_model=AnalysisResult)
def analyze_text(body: AnalysisInput):
    # AnalysisInput is strict, so non-string text is a 422 before we get here
    return analyze(body.text)

@router.post("/analyze/{doc_id}", response_model=Report)
def analyze_stored(doc_id: str):
    if not os.path.isdir(doc_dir(doc_id)):
        raise HTTPException(status_code=404, detail="Document not found")
    return analyze_document(doc_id)
