class ExamHelperError(Exception):
    """Base error for anything that stops an upload from producing study aids."""


class UnsupportedFileTypeError(ExamHelperError):
    def __init__(self, mime_type=""):
        self.mime_type = mime_type
        super().__init__("Please upload a text, PDF, Word document, or CSV file")


class ExtractionError(ExamHelperError):
    def __init__(self, mime_type, cause):
        self.mime_type = mime_type
        super().__init__(f"Failed to extract text from {mime_type} file: {cause}")


class ProcessingError(ExamHelperError):
    def __init__(self, cause):
        super().__init__(f"Error processing document content: {cause}")
