from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class MCQItem:
    id: int
    question: str
    options: Tuple[str, ...]
    correct_answer: int
    context: str = ""

    @property
    def answer(self) -> str:
        return self.options[self.correct_answer]


@dataclass(frozen=True)
class QnAItem:
    id: int
    question: str
    answer: str


@dataclass(frozen=True)
class StudyMaterials:
    """Everything derived from one document, built after all stages finish."""
    title: str = ""
    key_terms: Tuple[str, ...] = field(default_factory=tuple)
    summary: str = ""
    mcqs: Tuple[MCQItem, ...] = field(default_factory=tuple)
    qna: Tuple[QnAItem, ...] = field(default_factory=tuple)
