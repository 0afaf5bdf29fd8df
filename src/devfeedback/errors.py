"""Exceptions raised by the feedback loop."""


class DevFeedbackError(Exception):
    """Base class for all feedback loop errors."""


class StoreError(DevFeedbackError):
    """A store operation failed (connection, read or write)."""


class DuplicateDeveloperError(DevFeedbackError):
    """A developer with the same ID is already registered."""

    def __init__(self, dev_id: str):
        super().__init__(f"Developer already exists: {dev_id}")
        self.dev_id = dev_id


class DeveloperNotFoundError(DevFeedbackError):
    """No developer with the given ID is registered."""

    def __init__(self, dev_id: str):
        super().__init__(f"Developer not found: {dev_id}")
        self.dev_id = dev_id
