"""Per-file cleanup workflow.

- CleanupProcessor: Orchestrates resolution, policy, classification and
  synthesis for one probed file
- CleanupResult: Record handed back to callers
- TraceLog: Append-only rationale lines
"""

from track_cleanup.workflow.models import CleanupResult, directive_to_dict
from track_cleanup.workflow.processor import CleanupProcessor
from track_cleanup.workflow.trace import TraceLog

__all__ = [
    "CleanupProcessor",
    "CleanupResult",
    "TraceLog",
    "directive_to_dict",
]
