"""SQLAlchemy models backing the ``developers`` and ``feedback`` collections."""

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


class DeveloperDocument(Base):
    """Stored developer record."""

    __tablename__ = "developers"

    # Surrogate key; defines storage-native order
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    dev_id: Mapped[Optional[str]] = mapped_column("devId", String(255), nullable=True, index=True)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    project: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "DeveloperDocument":
        return cls(
            dev_id=document.get("devId"),
            name=document.get("name"),
            project=document.get("project"),
        )

    def to_document(self) -> Dict[str, Any]:
        return {"devId": self.dev_id, "name": self.name, "project": self.project}

    def __repr__(self) -> str:
        return f"<DeveloperDocument(devId={self.dev_id}, name={self.name})>"


class FeedbackDocument(Base):
    """Stored feedback record."""

    __tablename__ = "feedback"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    feedback_id: Mapped[Optional[str]] = mapped_column("feedbackId", String(64), nullable=True)
    dev_id: Mapped[Optional[str]] = mapped_column("devId", String(255), nullable=True, index=True)
    feedback_text: Mapped[Optional[str]] = mapped_column("feedbackText", Text, nullable=True)
    timestamp: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "FeedbackDocument":
        return cls(
            feedback_id=document.get("feedbackId"),
            dev_id=document.get("devId"),
            feedback_text=document.get("feedbackText"),
            timestamp=document.get("timestamp"),
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            "feedbackId": self.feedback_id,
            "devId": self.dev_id,
            "feedbackText": self.feedback_text,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:
        return f"<FeedbackDocument(feedbackId={self.feedback_id}, devId={self.dev_id})>"


COLLECTIONS = {
    DeveloperDocument.__tablename__: DeveloperDocument,
    FeedbackDocument.__tablename__: FeedbackDocument,
}
