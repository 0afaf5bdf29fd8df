"""Feedback log: ordered in-memory mirror of the ``feedback`` collection."""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional

from devfeedback.database.store import Store
from devfeedback.logging.config import get_logger

logger = get_logger(__name__)

COLLECTION_NAME = "feedback"


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, matching what the store returns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass(frozen=True)
class Feedback:
    """A feedback item about one developer."""

    feedback_id: str
    dev_id: str
    text: str
    timestamp: Optional[datetime]

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Feedback":
        return cls(
            feedback_id=document.get("feedbackId") or "",
            dev_id=document.get("devId") or "",
            text=document.get("feedbackText") or "",
            timestamp=document.get("timestamp"),
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            "feedbackId": self.feedback_id,
            "devId": self.dev_id,
            "feedbackText": self.text,
            "timestamp": self.timestamp,
        }

    def describe(self) -> str:
        stamp = self.timestamp.strftime("%Y-%m-%d %H:%M:%S") if self.timestamp else "unknown"
        return f"[{stamp}] Developer ID: {self.dev_id} | Feedback: {self.text}"


class FeedbackLog:
    """
    Ordered list of feedback, hydrated from the store on construction.

    Stored feedback is not checked against the developer registry, so
    records edited outside the tool may reference unknown developers.
    """

    def __init__(self, store: Store):
        self.collection = store.collection(COLLECTION_NAME)
        self._items: List[Feedback] = []
        self.hydrate()

    def hydrate(self) -> int:
        """
        Append every stored feedback item in storage order without re-persisting.

        Returns:
            Number of feedback items loaded
        """
        documents = self.collection.find()
        for document in documents:
            self._items.append(Feedback.from_document(document))
        logger.info(f"Loaded {len(documents)} feedback records from store")
        return len(documents)

    def add_feedback(
        self,
        dev_id: str,
        text: str,
        feedback_id: Optional[str] = None,
    ) -> Feedback:
        """
        Record feedback at the tail of the log and persist it.

        Args:
            dev_id: Developer the feedback is about
            text: Free-text feedback
            feedback_id: Identifier to use; a random UUID when omitted

        Returns:
            The new feedback record

        Raises:
            StoreError: If the write fails (nothing is appended)
        """
        feedback = Feedback(
            feedback_id=feedback_id or str(uuid.uuid4()),
            dev_id=dev_id,
            text=text,
            timestamp=utcnow(),
        )
        self.collection.insert_one(feedback.to_document())
        self._items.append(feedback)
        logger.info(f"Added feedback {feedback.feedback_id} for developer {dev_id}")
        return feedback

    def display_feedback(self) -> List[str]:
        """Formatted lines for every feedback item, in insertion order."""
        if not self._items:
            return ["No feedback records found."]
        return [item.describe() for item in self._items]

    def for_developer(self, dev_id: str) -> List[Feedback]:
        return [item for item in self._items if item.dev_id == dev_id]

    def __iter__(self) -> Iterator[Feedback]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
