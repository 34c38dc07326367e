# tests/conftest.py
from __future__ import annotations
import io
import shutil
import tempfile
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.core import config

import fitz  # PyMuPDF
from PIL import Image

OCR_TEXT = "Scanned page text. Is it readable? It has 2 lines."

# --------------------------------------------------------------------
# Fixtures for temporary DATA_DIR so tests don't pollute real data dir
# --------------------------------------------------------------------
@pytest.fixture(scope="session")
def tmp_data_dir() -> Generator[str, None, None]:
    d = tempfile.mkdtemp(prefix="test-data-")
    yield d
    shutil.rmtree(d, ignore_errors=True)

@pytest.fixture(autouse=True, scope="session")
def patch_data_dir(tmp_data_dir):
    # Override app's DATA_DIR during tests
    config.DATA_DIR = tmp_data_dir

# --------------------------------------------------------------------
# FastAPI test client available as fixture `client`
# --------------------------------------------------------------------
@pytest.fixture(scope="session")
def client() -> TestClient:
    return TestClient(app)

# --------------------------------------------------------------------
# Helpers to create in-memory sample PDF and PNG
# --------------------------------------------------------------------
def _pdf_bytes(text: str | None) -> bytes:
    doc = fitz.open()
    page = doc.new_page()
    if text:
        page.insert_text((72, 100), text, fontsize=12)
    data = doc.tobytes()
    doc.close()
    return data

def _png_bytes() -> bytes:
    img = Image.new("RGB", (120, 40), "white")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()

@pytest.fixture
def sample_pdf_bytes() -> bytes:
    return _pdf_bytes("This is a sample sentence. Another one follows.")

@pytest.fixture
def blank_pdf_bytes() -> bytes:
    return _pdf_bytes(None)

@pytest.fixture
def sample_png_bytes() -> bytes:
    return _png_bytes()

# --------------------------------------------------------------------
# Stub OCR: avoid requiring a Tesseract binary during tests
# --------------------------------------------------------------------
@pytest.fixture(autouse=True)
def stub_ocr(monkeypatch):
    from app.services import extract as extract_mod

    calls = []

    def _fake_ocr(image):
        calls.append(image.size)
        return OCR_TEXT

    monkeypatch.setattr(extract_mod, "ocr_image", _fake_ocr)
    return calls

@pytest.fixture
def ocr_text() -> str:
    return OCR_TEXT
