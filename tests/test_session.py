"""
Tests for upload ordering
"""
from exam_helper.models import StudyMaterials
from exam_helper.session import StudySession


class TestStudySession:
    """Test generation-guarded results"""

    def test_complete_current_upload(self):
        session = StudySession()
        token = session.begin(("id-1", "notes.txt", 10), label="notes.txt")
        assert session.complete(token, StudyMaterials(summary="ok"))
        assert session.materials.summary == "ok"
        assert session.materials_key == ("id-1", "notes.txt", 10)
        assert session.materials_label == "notes.txt"
        assert not session.needs_processing(("id-1", "notes.txt", 10))

    def test_superseded_result_dropped(self):
        """Only the latest upload may publish results"""
        session = StudySession()
        old = session.begin()
        new = session.begin()
        assert not session.complete(old, StudyMaterials(summary="old"))
        assert session.materials is None
        assert session.complete(new, StudyMaterials(summary="new"))
        assert session.materials.summary == "new"

    def test_failure_keeps_previous_results(self):
        session = StudySession()
        session.complete(session.begin(), StudyMaterials(summary="good"))
        token = session.begin()
        assert session.fail(token, "Failed to extract text from application/pdf file: broken")
        assert session.materials.summary == "good"
        assert session.error.startswith("Failed to extract")

    def test_new_upload_clears_error(self):
        session = StudySession()
        session.fail(session.begin(), "bad")
        session.begin()
        assert session.error == ""

    def test_superseded_error_dropped(self):
        session = StudySession()
        old = session.begin()
        session.begin()
        assert not session.fail(old, "late failure")
        assert session.error == ""

    def test_failed_upload_keeps_label_of_shown_results(self):
        """Results stay labelled with the file that produced them"""
        session = StudySession()
        session.complete(session.begin(("id-a", "a.txt", 10), label="a.txt"), StudyMaterials(summary="A"))
        token = session.begin(("id-b", "b.pdf", 20), label="b.pdf")
        session.fail(token, "broken")

        assert session.materials.summary == "A"
        assert session.materials_label == "a.txt"
        assert session.materials_key == ("id-a", "a.txt", 10)
        assert session.source_key == ("id-a", "a.txt", 10)

    def test_retry_after_failure(self):
        """Selecting the failed file again processes it again"""
        session = StudySession()
        failed = ("id-b", "b.pdf", 20)
        session.fail(session.begin(failed, label="b.pdf"), "broken")

        # same selection on a rerun is not retried
        assert not session.needs_processing(failed)
        # re-selecting the file gives it a new upload id
        retry = ("id-b2", "b.pdf", 20)
        assert session.needs_processing(retry)

        token = session.begin(retry, label="b.pdf")
        assert session.error == ""
        assert session.complete(token, StudyMaterials(summary="B"))
        assert session.materials_label == "b.pdf"
        assert not session.needs_processing(retry)
