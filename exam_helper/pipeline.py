"""Runs extraction and every generator, returning one StudyMaterials value."""
import logging

from .errors import ProcessingError
from .mcq import generate_mcqs
from .models import StudyMaterials
from .qna import generate_qna
from .sources import extract_text, resolve_mime_type
from .summarizer import generate_summary
from .terms import extract_key_terms
from .text_utils import document_title

logger = logging.getLogger(__name__)


def _report(on_stage, message):
    if on_stage is not None:
        on_stage(message)


def analyze_text(text, rng=None, on_stage=None):
    """Derive key terms, summary, MCQs and Q&A from already extracted text."""
    try:
        _report(on_stage, "Analyzing document content...")
        key_terms = extract_key_terms(text)

        _report(on_stage, "Generating summary...")
        summary = generate_summary(text, key_terms)

        _report(on_stage, "Creating multiple choice questions...")
        mcqs = generate_mcqs(text, key_terms, rng=rng)

        _report(on_stage, "Preparing questions and answers...")
        qna = generate_qna(text, key_terms)
    except Exception as exc:
        logger.exception("Processing error")
        raise ProcessingError(exc) from exc

    return StudyMaterials(
        title=document_title(text),
        key_terms=tuple(key_terms),
        summary=summary,
        mcqs=tuple(mcqs),
        qna=tuple(qna),
    )


def process_document(data, mime_type, filename="", rng=None, on_stage=None):
    """Extract text from an uploaded file and analyze it.

    Raises UnsupportedFileTypeError before touching the bytes, ExtractionError
    when the reader fails and ProcessingError when a generator fails.
    """
    mime_type = resolve_mime_type(mime_type, filename)
    _report(on_stage, f"Extracting text from {mime_type} file...")
    text = extract_text(data, mime_type)
    logger.info("Extracted %d characters from %s", len(text), filename or mime_type)
    return analyze_text(text, rng=rng, on_stage=on_stage)
