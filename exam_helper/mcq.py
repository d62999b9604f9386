"""Multiple-choice questions built from key-term sentences."""
import logging
import random

from .config import MAX_MCQS
from .models import MCQItem
from .text_utils import contains_term, split_sentences

logger = logging.getLogger(__name__)

# ---------- Templates ----------
PHRASE_QUESTION = 'Which of the following best describes "{}" as mentioned in the document?'
WORD_QUESTION = "According to the document, what is true about {}?"

PHRASE_DISTRACTORS = [
    "{} refers to an unrelated concept not covered in this document.",
    "{} is a contradictory element in the document.",
    "{} is mentioned but not significant to the main topic.",
]

WORD_DISTRACTORS = [
    "{} is not relevant to the main subject of this document.",
    "{} represents an opposing viewpoint to the document's main argument.",
    "{} is a minor concept that appears only once in the document.",
]


def _is_phrase(term):
    return len(term.split(" ")) > 1


def find_term_sentences(sentences, key_terms):
    """Map each term to the indexes of the sentences mentioning it; unmatched terms are left out."""
    found = {}
    for term in key_terms:
        hits = [i for i, s in enumerate(sentences) if contains_term(s, term)]
        if hits:
            found[term] = hits
    return found


def build_context(sentences, index):
    target = sentences[index]
    if 0 < index < len(sentences) - 1:
        return f"{sentences[index - 1]}. {target}. {sentences[index + 1]}"
    return target


def build_question(term, target):
    if _is_phrase(term):
        question = PHRASE_QUESTION.format(term)
        distractors = PHRASE_DISTRACTORS
    else:
        question = WORD_QUESTION.format(term)
        distractors = WORD_DISTRACTORS
    options = [target.strip()] + [d.format(term) for d in distractors]
    return question, options


def generate_mcqs(text, key_terms, rng=None):
    """Create up to ten questions; ``rng`` only needs a ``shuffle`` method."""
    rng = rng or random
    sentences = split_sentences(text)
    term_sentences = find_term_sentences(sentences, key_terms)
    selected = list(term_sentences)[:min(len(key_terms), MAX_MCQS)]

    mcqs = []
    for number, term in enumerate(selected, 1):
        index = term_sentences[term][0]
        question, options = build_question(term, sentences[index])
        correct = options[0]
        shuffled = list(options)
        rng.shuffle(shuffled)
        mcqs.append(MCQItem(
            id=number,
            question=question,
            options=tuple(shuffled),
            correct_answer=shuffled.index(correct),
            context=build_context(sentences, index),
        ))
    logger.info("Generated %d MCQs from %d key terms", len(mcqs), len(key_terms))
    return mcqs
