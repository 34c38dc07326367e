import logging
import os
import fitz          # PyMuPDF
import pytesseract
from PIL import Image
from app.core.config import IMAGE_EXTENSIONS, OCR_LANG, PDF_OCR_DPI

log = logging.getLogger("extract")

class ExtractError(RuntimeError):
    ...

def ocr_image(image: Image.Image) -> str:
    """Run Tesseract over a Pillow image."""
    return pytesseract.image_to_string(image, lang=OCR_LANG)

def _ocr_page(page) -> str:
    pix = page.get_pixmap(dpi=PDF_OCR_DPI)
    image = Image.frombytes("RGB", (pix.width, pix.height), pix.samples)
    return ocr_image(image)

def _pdf_text(path: str) -> str:
    pages: list[str] = []
    with fitz.open(path) as doc:
        for i, page in enumerate(doc):
            text = (page.get_text("text") or "").strip()
            if not text:
                # scanned page, no text layer
                log.warning("Page %d of %s has no embedded text, falling back to OCR", i, path)
                text = _ocr_page(page).strip()
            if text:
                pages.append(text)
    return "\n\n".join(pages)

def _image_text(path: str) -> str:
    with Image.open(path) as img:
        # OCR wants a plain RGB/L image; palette and alpha modes confuse it
        if img.mode not in ("RGB", "L"):
            img = img.convert("RGB")
        return ocr_image(img).strip()

def extract_text(path: str) -> str:
    """
    Return the plain text of a PDF or image file.
    PDFs use their embedded text layer page by page, OCR'ing pages that have none.
    """
    ext = os.path.splitext(path)[1].lower()
    try:
        if ext == ".pdf":
            return _pdf_text(path)
        if ext in IMAGE_EXTENSIONS:
            return _image_text(path)
    except (RuntimeError, OSError, pytesseract.TesseractError, Image.DecompressionBombError) as e:
        log.exception("Text extraction failed for %s", path)
        raise ExtractError(f"Could not extract text from {os.path.basename(path)}: {e}") from e

    raise ExtractError(f"Unsupported extension: {ext}")
