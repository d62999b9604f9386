# Tuning constants for the study-aid pipeline

# ---------- Key terms ----------
MAX_KEY_TERMS = 20
MIN_TERM_LENGTH = 3          # tokens must be longer than this
TRIGRAM_WEIGHT = 3
BIGRAM_WEIGHT = 1

# ---------- Summary ----------
SUMMARY_RATIO = 0.25
MIN_SUMMARY_SENTENCES = 3
LEAD_SENTENCES = 3
LEAD_SCORE = 3
EARLY_SCORE = 2
LATE_SCORE = 1.5
BODY_SCORE = 1
EARLY_FRACTION = 0.1
LATE_FRACTION = 0.8

# ---------- Questions ----------
MAX_MCQS = 10
MAX_QNA_TERMS = 8
SHORT_SENTENCE_LENGTH = 20
MAIN_TOPIC_MIN_SENTENCES = 5
CONCLUSION_MIN_SENTENCES = 10

# ---------- Documents ----------
MIME_PLAIN_TEXT = "text/plain"
MIME_CSV = "text/csv"
MIME_WORD = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
MIME_PDF = "application/pdf"

EXTENSION_MIME_TYPES = {
    ".txt": MIME_PLAIN_TEXT,
    ".csv": MIME_CSV,
    ".docx": MIME_WORD,
    ".pdf": MIME_PDF,
}

CSV_DELIMITERS = [",", "\t", "|", ";"]

# ---------- Downloads ----------
UNTITLED_DOCUMENT = "Untitled Document"
SUMMARY_FILENAME = "document-summary.txt"
MCQ_FILENAME = "mcq-questions.txt"
QNA_FILENAME = "question-answers.txt"
