"""Feedback log and reporting."""

from devfeedback.feedback.log import Feedback, FeedbackLog
from devfeedback.feedback.reporting import FeedbackReporter

__all__ = ["Feedback", "FeedbackLog", "FeedbackReporter"]
