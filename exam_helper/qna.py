import logging

from .config import (
    CONCLUSION_MIN_SENTENCES, MAIN_TOPIC_MIN_SENTENCES, MAX_QNA_TERMS,
    SHORT_SENTENCE_LENGTH,
)
from .models import QnAItem
from .text_utils import contains_term, split_sentences

logger = logging.getLogger(__name__)

QUESTION_VARIANTS = [
    "What is explained about {} in the document?",
    "How does the document describe {}?",
    "What information does the document provide about {}?",
    "What role does {} play according to the text?",
]

MAIN_TOPIC_QUESTION = "What is the main topic of this document?"
CONCLUSION_QUESTION = "What conclusion can be drawn from this document?"


def group_paragraphs(sentences):
    """Group consecutive sentences; a line break or a short sentence closes the group."""
    paragraphs = []
    current = []
    for sentence in sentences:
        current.append(sentence)
        if "\n" in sentence or len(sentence) < SHORT_SENTENCE_LENGTH:
            paragraphs.append(current)
            current = []
    if current:
        paragraphs.append(current)
    return paragraphs


def find_paragraph(paragraphs, term):
    for paragraph in paragraphs:
        if any(contains_term(s, term) for s in paragraph):
            return paragraph
    return None


def generate_qna(text, key_terms):
    sentences = split_sentences(text)
    paragraphs = group_paragraphs(sentences)
    items = []

    # template index counts skipped terms too
    for term_index, term in enumerate(key_terms[:MAX_QNA_TERMS]):
        paragraph = find_paragraph(paragraphs, term)
        if paragraph is None:
            continue
        template = QUESTION_VARIANTS[term_index % len(QUESTION_VARIANTS)]
        items.append(QnAItem(
            id=len(items) + 1,
            question=template.format(term),
            answer=" ".join(paragraph).strip(),
        ))

    if len(sentences) > MAIN_TOPIC_MIN_SENTENCES:
        items.append(QnAItem(
            id=len(items) + 1,
            question=MAIN_TOPIC_QUESTION,
            answer=" ".join(sentences[:3]).strip(),
        ))
        if len(sentences) > CONCLUSION_MIN_SENTENCES:
            items.append(QnAItem(
                id=len(items) + 1,
                question=CONCLUSION_QUESTION,
                answer=" ".join(sentences[-3:]).strip(),
            ))

    logger.info("Generated %d Q&A pairs", len(items))
    return items
