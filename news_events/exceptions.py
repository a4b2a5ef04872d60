"""
Exceptions raised by the news & events service layer.

Views translate these into user-visible messages; nothing here is retried
automatically.
"""


class NewsEventError(Exception):
    """Base class for news & events failures."""


class DocumentNotFound(NewsEventError):
    """The addressed document does not exist in the document store."""

    def __init__(self, doc_id):
        self.doc_id = doc_id
        super().__init__(f"No document found with docId {doc_id}")


class SubmissionError(NewsEventError):
    """A create/edit submit was aborted; the message is safe to show users."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DeletionError(NewsEventError):
    """The document itself could not be deleted."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
