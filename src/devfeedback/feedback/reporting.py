"""Feedback reporting and export."""

import csv
import json
from collections import Counter
from io import StringIO
from typing import Any, Dict

from devfeedback.feedback.log import FeedbackLog
from devfeedback.logging.config import get_logger

logger = get_logger(__name__)

EXPORT_FIELDS = ["feedbackId", "devId", "feedbackText", "timestamp"]


class FeedbackReporter:
    """Generates summaries and exports from the feedback log."""

    def __init__(self, log: FeedbackLog):
        self.log = log

    def summary(self) -> Dict[str, Any]:
        """
        Count feedback overall and per developer.

        Returns:
            Dictionary with ``total_feedback`` and ``per_developer``, the latter
            keyed by developer ID in order of first appearance
        """
        counts = Counter(item.dev_id for item in self.log)
        return {
            "total_feedback": len(self.log),
            "per_developer": dict(counts),
        }

    def export_to_csv(self) -> str:
        """Export the log to a CSV string, in insertion order."""
        output = StringIO()
        writer = csv.writer(output)
        writer.writerow(EXPORT_FIELDS)

        for item in self.log:
            writer.writerow([
                item.feedback_id,
                item.dev_id,
                item.text,
                item.timestamp.isoformat() if item.timestamp else "",
            ])

        logger.debug(f"Exported {len(self.log)} feedback records to CSV")
        return output.getvalue()

    def export_to_json(self) -> str:
        """Export the log to a JSON string, in insertion order."""
        data = []
        for item in self.log:
            document = item.to_document()
            document["timestamp"] = item.timestamp.isoformat() if item.timestamp else None
            data.append(document)

        logger.debug(f"Exported {len(data)} feedback records to JSON")
        return json.dumps(data, indent=2)
