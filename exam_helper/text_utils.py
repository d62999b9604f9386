import re

# Common functional words ignored when ranking terms
STOP_WORDS = frozenset([
    "the", "a", "an", "and", "or", "but", "is", "in", "it", "to", "i", "that", "had",
    "on", "for", "were", "was", "of", "be", "this", "with", "by", "as", "at", "from",
    "they", "are", "have", "has", "been", "not", "their", "there", "which", "when", "who",
    "what", "where", "why", "how", "all", "any", "both", "each", "few", "more", "most",
    "some", "such", "than", "too", "very", "can", "will", "just", "should", "now",
])

_SENTENCE_BREAK = re.compile(r"[.!?]+")
_NON_WORD = re.compile(r"[^\w\s]")


def split_sentences(text):
    """Split on runs of sentence punctuation, dropping blank pieces.

    Pieces keep their surrounding whitespace so callers can still see the
    line breaks that separated them.
    """
    if not text:
        return []
    return [s for s in _SENTENCE_BREAK.split(text) if s.strip()]


def tokenize(text):
    cleaned = _NON_WORD.sub("", text.lower())
    return cleaned.split()


def contains_term(sentence, term):
    return term.lower() in sentence.lower()


def document_title(text):
    # first non-blank line
    for line in (text or "").split("\n"):
        if line.strip():
            return line.strip()
    return ""
