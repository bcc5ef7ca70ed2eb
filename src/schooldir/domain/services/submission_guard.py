"""Tracks add-school submissions that are still talking to the collaborators.

One guard is shared by every request the application serves, so a form that
is posted twice while the first post is still uploading or creating gets
turned away instead of creating the school a second time.
"""

import hashlib
import json

from schooldir.domain.entities.school import ImageAttachment, SchoolDraft


def submission_key(draft: SchoolDraft, image: ImageAttachment | None = None) -> str:
    """Fingerprint a submission by its normalized payload and attached image."""
    digest = hashlib.sha256(json.dumps(draft.to_payload(), sort_keys=True).encode("utf-8"))
    if image is not None:
        digest.update(hashlib.sha256(image.content).digest())
    return digest.hexdigest()


class SubmissionGuard:
    """Set of submission keys currently in flight."""

    def __init__(self) -> None:
        self._in_flight: set[str] = set()

    def __contains__(self, key: str) -> bool:
        return key in self._in_flight

    def __len__(self) -> int:
        return len(self._in_flight)

    def acquire(self, key: str) -> bool:
        """Mark ``key`` as in flight. Returns False if it already was."""
        if key in self._in_flight:
            return False
        self._in_flight.add(key)
        return True

    def release(self, key: str) -> None:
        self._in_flight.discard(key)
