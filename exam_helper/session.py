"""Per-user upload state.

Every upload gets a generation number; results and errors reported for an
older generation are dropped, so the most recent upload always wins.
"""
import logging

logger = logging.getLogger(__name__)


class StudySession:
    def __init__(self):
        self.generation = 0
        self.materials = None
        self.error = ""
        self.source_key = None
        self.failed_key = None
        # the upload that produced ``materials``
        self.materials_key = None
        self.materials_label = ""
        self._pending_label = ""

    def needs_processing(self, source_key):
        return source_key not in (self.source_key, self.failed_key)

    def begin(self, source_key=None, label=""):
        """Start a new upload and return its generation token."""
        self.generation += 1
        self.error = ""
        self.source_key = source_key
        self.failed_key = None
        self._pending_label = label
        return self.generation

    def is_current(self, token):
        return token == self.generation

    def complete(self, token, materials):
        if not self.is_current(token):
            logger.info("Dropping result of superseded upload %d", token)
            return False
        self.materials = materials
        self.materials_key = self.source_key
        self.materials_label = self._pending_label
        return True

    def fail(self, token, message):
        # previous good results stay visible under their own label
        if not self.is_current(token):
            logger.info("Dropping error of superseded upload %d", token)
            return False
        self.error = message
        self.failed_key = self.source_key
        self.source_key = self.materials_key
        return True
