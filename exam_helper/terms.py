"""Key-term extraction by weighted word and phrase frequency."""
import logging
from collections import Counter

from .config import BIGRAM_WEIGHT, MAX_KEY_TERMS, MIN_TERM_LENGTH, TRIGRAM_WEIGHT
from .text_utils import STOP_WORDS, tokenize

logger = logging.getLogger(__name__)


def _is_content_word(word):
    return len(word) > MIN_TERM_LENGTH and word not in STOP_WORDS


def count_words(words):
    return Counter(w for w in words if _is_content_word(w))


def count_phrases(words):
    # trigrams only require their outer words to be non-stop words
    phrases = Counter()
    for i in range(len(words) - 1):
        first, second = words[i], words[i + 1]
        if _is_content_word(first) and _is_content_word(second):
            phrases[f"{first} {second}"] += BIGRAM_WEIGHT

        if i < len(words) - 2:
            third = words[i + 2]
            if (len(first) > MIN_TERM_LENGTH and len(second) > MIN_TERM_LENGTH
                    and len(third) > MIN_TERM_LENGTH
                    and first not in STOP_WORDS and third not in STOP_WORDS):
                phrases[f"{first} {second} {third}"] += TRIGRAM_WEIGHT
    return phrases


def extract_key_terms(text: str, limit: int = MAX_KEY_TERMS) -> list:
    """Return up to ``limit`` lowercase words and 2-3 word phrases, best first.

    Ties keep first-seen order, with single words ahead of phrases.
    """
    words = tokenize(text or "")
    combined = {**count_words(words), **count_phrases(words)}
    ranked = sorted(combined.items(), key=lambda item: item[1], reverse=True)
    terms = [term for term, _ in ranked[:limit]]
    logger.info("Extracted %d key terms from %d tokens", len(terms), len(words))
    return terms
