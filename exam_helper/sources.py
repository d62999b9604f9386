"""Text extraction for the supported upload types.

Each extractor turns raw file bytes into one string; ``get_extractor`` picks
one by MIME type.
"""
import io
import logging
import os

import mammoth
import pandas as pd
from PyPDF2 import PdfReader

from .config import (
    CSV_DELIMITERS, EXTENSION_MIME_TYPES, MIME_CSV, MIME_PDF, MIME_PLAIN_TEXT,
    MIME_WORD,
)
from .errors import ExtractionError, UnsupportedFileTypeError

logger = logging.getLogger(__name__)


class PlainTextExtractor:
    mime_type = MIME_PLAIN_TEXT

    def extract(self, data: bytes) -> str:
        return data.decode("utf-8", errors="ignore")


class CsvExtractor:
    mime_type = MIME_CSV

    def extract(self, data: bytes) -> str:
        raw = data.decode("utf-8", errors="ignore")
        if not raw.strip():
            return ""
        try:
            delimiter = _guess_delimiter(raw)
            # cells stay text so whole numbers with gaps are not turned into floats
            frame = pd.read_csv(io.StringIO(raw), sep=delimiter, dtype=str,
                                skip_blank_lines=True, on_bad_lines="warn")
        except pd.errors.EmptyDataError:
            return ""
        rows = []
        for row in frame.itertuples(index=False):
            cells = [str(v) for v in row if not pd.isna(v)]
            rows.append(" ".join(cells))
        return " ".join(rows)


class WordDocExtractor:
    mime_type = MIME_WORD

    def extract(self, data: bytes) -> str:
        result = mammoth.extract_raw_text(io.BytesIO(data))
        for message in result.messages:
            logger.warning("Word extraction: %s", message)
        return result.value


class PdfExtractor:
    mime_type = MIME_PDF

    def extract(self, data: bytes) -> str:
        reader = PdfReader(io.BytesIO(data))
        total = len(reader.pages)
        logger.info("PDF loaded successfully. Pages: %d", total)
        pages = []
        for number, page in enumerate(reader.pages, 1):
            logger.debug("Extracting text from page %d of %d", number, total)
            pages.append((page.extract_text() or "") + "\n\n")
        return "".join(pages)


def _guess_delimiter(raw):
    # the delimiter seen most often in the header row wins
    header = raw.lstrip().split("\n", 1)[0]
    counts = {d: header.count(d) for d in CSV_DELIMITERS}
    best = max(CSV_DELIMITERS, key=lambda d: counts[d])
    return best if counts[best] else ","


EXTRACTORS = {
    extractor.mime_type: extractor
    for extractor in (PlainTextExtractor(), CsvExtractor(), WordDocExtractor(), PdfExtractor())
}

SUPPORTED_MIME_TYPES = tuple(EXTRACTORS)


def resolve_mime_type(declared, filename=""):
    """Return a supported MIME type for an upload or raise UnsupportedFileTypeError.

    Falls back to the file extension only when the browser sent no useful type.
    """
    if declared in EXTRACTORS:
        return declared
    if not declared or declared == "application/octet-stream":
        ext = os.path.splitext(filename or "")[1].lower()
        if ext in EXTENSION_MIME_TYPES:
            return EXTENSION_MIME_TYPES[ext]
    raise UnsupportedFileTypeError(declared)


def get_extractor(mime_type):
    try:
        return EXTRACTORS[mime_type]
    except KeyError:
        raise UnsupportedFileTypeError(mime_type) from None


def extract_text(data, mime_type):
    extractor = get_extractor(mime_type)
    try:
        return extractor.extract(data)
    except Exception as exc:
        logger.error("Error extracting text from %s file: %s", mime_type, exc)
        raise ExtractionError(mime_type, exc) from exc
