"""Data models for the ito link service."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Link:
    """A stored alias -> target URL mapping."""
    
    id: int
    alias: str
    target_url: str
    
    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "alias": self.alias,
            "target_url": self.target_url,
        }
    
    @classmethod
    def from_row(cls, row) -> "Link":
        """Create from an ``(id, alias, target_url)`` database row."""
        return cls(id=row[0], alias=row[1], target_url=row[2])
