from .config import MCQ_FILENAME, QNA_FILENAME, SUMMARY_FILENAME, UNTITLED_DOCUMENT


def option_letter(index):
    return chr(ord("A") + index)


def _title(materials):
    return materials.title or UNTITLED_DOCUMENT


def summary_text(materials):
    return (
        f"DOCUMENT SUMMARY: {_title(materials)}\n\n{materials.summary}\n\n"
        f"KEY TERMS:\n{', '.join(materials.key_terms)}"
    )


def mcq_text(materials):
    blocks = []
    for mcq in materials.mcqs:
        options = "\n".join(
            f"   {option_letter(i)}. {opt}" for i, opt in enumerate(mcq.options)
        )
        blocks.append(
            f"{mcq.id}. {mcq.question}\n{options}\n\n"
            f"Correct Answer: {option_letter(mcq.correct_answer)}\n"
        )
    return f"MULTIPLE CHOICE QUESTIONS FOR: {_title(materials)}\n\n" + "\n".join(blocks)


def qna_text(materials):
    blocks = [f"{item.id}. {item.question}\n\nAnswer: {item.answer}\n" for item in materials.qna]
    return f"QUESTIONS AND ANSWERS FOR: {_title(materials)}\n\n" + "\n".join(blocks)


# tab -> (file name, renderer)
DOWNLOADS = {
    "summary": (SUMMARY_FILENAME, summary_text),
    "mcqs": (MCQ_FILENAME, mcq_text),
    "qna": (QNA_FILENAME, qna_text),
}


def download_for(tab, materials):
    """Return ``(filename, content)`` for the given tab."""
    filename, render = DOWNLOADS[tab]
    return filename, render(materials)
