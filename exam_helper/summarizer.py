import logging
import math

from .config import (
    BODY_SCORE, EARLY_FRACTION, EARLY_SCORE, LATE_FRACTION, LATE_SCORE,
    LEAD_SCORE, LEAD_SENTENCES, MIN_SUMMARY_SENTENCES, SUMMARY_RATIO,
)
from .text_utils import contains_term, split_sentences

logger = logging.getLogger(__name__)


def position_score(index, total):
    # opening sentences usually carry the topic
    if index < LEAD_SENTENCES:
        return LEAD_SCORE
    if index < total * EARLY_FRACTION:
        return EARLY_SCORE
    if index > total * LATE_FRACTION:
        return LATE_SCORE
    return BODY_SCORE


def term_score(sentence, key_terms):
    return sum(1 for term in key_terms if contains_term(sentence, term))


def summary_length(total):
    return max(math.ceil(total * SUMMARY_RATIO), MIN_SUMMARY_SENTENCES)


def _join(sentences):
    return ". ".join(sentences) + "."


def generate_summary(text, key_terms):
    """Pick the highest scoring sentences and return them in document order."""
    sentences = [s.strip() for s in split_sentences(text)]
    if not sentences:
        return ""
    if len(sentences) <= MIN_SUMMARY_SENTENCES:
        return _join(sentences)

    total = len(sentences)
    scores = [
        position_score(i, total) * (term_score(s, key_terms) + 1)
        for i, s in enumerate(sentences)
    ]
    # sorted() is stable, so equal scores stay in document order
    ranked = sorted(range(total), key=lambda i: scores[i], reverse=True)
    chosen = sorted(ranked[:summary_length(total)])
    logger.info("Summary keeps %d of %d sentences", len(chosen), total)
    return _join([sentences[i] for i in chosen])
