"""Persistent store and its document models."""

from devfeedback.database.models import Base, DeveloperDocument, FeedbackDocument
from devfeedback.database.store import Collection, Store, mask_url

__all__ = ["Base", "DeveloperDocument", "FeedbackDocument", "Collection", "Store", "mask_url"]
