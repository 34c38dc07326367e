import os

MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_MB", "10")) * 1024 * 1024  # 10 MB soft cap
DATA_DIR = os.getenv("DATA_DIR", "data")

IMAGE_EXTENSIONS = {'.png', '.jpg', '.jpeg', '.gif', '.bmp', '.tif', '.tiff', '.webp'}
ALLOWED_EXTENSIONS = {'.pdf'} | IMAGE_EXTENSIONS
MIME_ALLOW = {
    ".pdf": {"application/pdf"},
    ".png": {"image/png"},
    ".jpg": {"image/jpeg"},
    ".jpeg": {"image/jpeg"},
    ".gif": {"image/gif"},
    ".bmp": {"image/bmp", "image/x-ms-bmp"},
    ".tif": {"image/tiff"},
    ".tiff": {"image/tiff"},
    ".webp": {"image/webp"},
}

EXTRACTED_FILENAME = "extracted.txt"

# OCR
OCR_LANG = os.getenv("OCR_LANG", "eng")
PDF_OCR_DPI = 300  # rasterisation for pages without embedded text

# Analyzer configuration
WORDS_PER_MINUTE = 200
LONG_SENTENCE_WORDS = 20      # avg words per sentence before warning
QUESTION_MIN_WORDS = 100
NUMBERS_MIN_WORDS = 200
PARAGRAPH_MIN_WORDS = 150
MIN_PARAGRAPHS = 3
BULLET_MIN_WORDS = 300

READABILITY_HARD = 30   # below: very complex
READABILITY_FAIR = 60   # below: could be simpler

ENGAGEMENT_BASE = 50
ENGAGEMENT_WEIGHTS = {
    "question": 10,
    "number": 10,
    "bullet": 5,
    "readable": 15,
    "paragraphs": 10,
}
