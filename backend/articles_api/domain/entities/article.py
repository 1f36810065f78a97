"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class Article:
    """Core domain entity representing a published article.

    ``id`` and the timestamps are assigned by the server; ``author_id`` is the
    reference used by the per-author listing.
    """

    title: str
    author_id: str
    content: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, **changes: object) -> None:
        """Apply the given field changes and refresh the updated_at timestamp.

        Only ``title``, ``author_id`` and ``content`` can be changed; identity
        and creation time are fixed for the lifetime of the record.
        """
        for name, value in changes.items():
            if name not in _MUTABLE_FIELDS:
                raise AttributeError(f"Article field '{name}' cannot be updated")
            setattr(self, name, value)
        self.updated_at = datetime.now(timezone.utc)


_MUTABLE_FIELDS = frozenset({"title", "author_id", "content"})
