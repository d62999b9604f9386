# ExamHelper.py
# EXAM HELPER
# Streamlit app: upload one document -> Summary / Key Terms / MCQs / Q&A, each downloadable

import logging

import streamlit as st

from exam_helper.errors import ExamHelperError
from exam_helper.export import download_for, option_letter
from exam_helper.pipeline import process_document
from exam_helper.session import StudySession

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# ---------- Page config ----------
st.set_page_config(page_title="EXAM HELPER", page_icon="📘", layout="wide")

# ---------- Header ----------
st.title("📘 Exam Helper", anchor="main-title")
st.caption("Upload documents to generate summary, questions, and study materials")
st.markdown("---")

# ---------- Session State ----------
if "study" not in st.session_state:
    st.session_state.study = StudySession()
study = st.session_state.study

# ---------- Sidebar input ----------
st.sidebar.header("📥 Upload your document")
uploaded_file = st.sidebar.file_uploader(
    "PDF, Word, Text, or CSV files", type=["pdf", "docx", "txt", "csv"]
)


def upload_key(u):
    # file_id changes when the same file is selected again
    return (u.file_id, u.name, u.size)


def run_upload(u):
    label = f"{u.name} — {u.size / 1024:.2f} KB • {u.type}"
    token = study.begin(source_key=upload_key(u), label=label)
    progress = st.progress(0)
    status = st.empty()
    stages = []

    def on_stage(message):
        stages.append(message)
        status.caption(message)
        progress.progress(min(95, 20 * len(stages)))

    try:
        materials = process_document(u.getvalue(), u.type, filename=u.name, on_stage=on_stage)
    except ExamHelperError as exc:
        logger.warning("Upload %s failed: %s", u.name, exc)
        study.fail(token, str(exc))
    else:
        progress.progress(100)
        study.complete(token, materials)
    finally:
        status.empty()
        progress.empty()


# regenerate once per file so shuffled options stay stable across reruns
if uploaded_file and study.needs_processing(upload_key(uploaded_file)):
    with st.spinner("Processing..."):
        run_upload(uploaded_file)

if study.error:
    st.error(study.error)


def download_button(tab, materials):
    filename, content = download_for(tab, materials)
    st.download_button("⬇️ Download", content, file_name=filename, mime="text/plain", key=f"dl_{tab}")


# ---------- Main UI ----------
materials = study.materials
if materials is None:
    st.info("Upload a text, PDF, Word document, or CSV file in the left sidebar. "
            "The app will generate a Summary, MCQs and Q&A from its content.")
else:
    if study.materials_label:
        st.write(f"📄 {study.materials_label}")

    tabs = st.tabs(["🧠 Summary", "📝 MCQs", "❓ Q&A"])

    # SUMMARY
    with tabs[0]:
        st.header(materials.title or "Document Summary")
        download_button("summary", materials)
        st.write(materials.summary)
        if materials.key_terms:
            st.subheader("Key Terms")
            st.write(", ".join(materials.key_terms))

    # MCQS
    with tabs[1]:
        st.header("Multiple Choice Questions")
        download_button("mcqs", materials)
        if not materials.mcqs:
            st.warning("No key terms matched any sentence, so no questions could be built.")
        for item in materials.mcqs:
            st.subheader(f"Question {item.id}")
            st.markdown(item.question)
            for i, option in enumerate(item.options):
                st.markdown(f"**{option_letter(i)}.** {option}")
            st.markdown(f"**Correct Answer:** {option_letter(item.correct_answer)}")
            st.markdown("")

    # Q&A
    with tabs[2]:
        st.header("Questions & Answers")
        download_button("qna", materials)
        for item in materials.qna:
            st.subheader(f"Question {item.id}")
            st.markdown(item.question)
            with st.expander("Answer", expanded=True):
                st.write(item.answer)

# ---------- Footer ----------
st.markdown("---")
st.caption("Exam Helper · Made with ❤️ for students")
