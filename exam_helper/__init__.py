from .errors import ExamHelperError, ExtractionError, ProcessingError, UnsupportedFileTypeError
from .models import MCQItem, QnAItem, StudyMaterials
from .pipeline import analyze_text, process_document

__all__ = [
    "ExamHelperError",
    "ExtractionError",
    "ProcessingError",
    "UnsupportedFileTypeError",
    "MCQItem",
    "QnAItem",
    "StudyMaterials",
    "analyze_text",
    "process_document",
]
