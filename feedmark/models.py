# feedmark/models.py

from dataclasses import dataclass
from typing import Any, Mapping

ENTITY = "Entity"
LINK = "Link"
TWITTER_USERNAME = "Twitter username"


@dataclass(frozen=True)
class Span:
    start: int
    end: int
    type: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Span":
        return cls(start=data["start"], end=data["end"], type=data["type"])

    def overlaps(self, other: "Span") -> bool:
        return not (self.end <= other.start or other.end <= self.start)

    def fits(self, feed_length: int) -> bool:
        """
        Return True if the offsets are ints with 0 <= start <= end <= feed_length.
        """
        for offset in (self.start, self.end):
            if isinstance(offset, bool) or not isinstance(offset, int):
                return False
        return 0 <= self.start <= self.end <= feed_length
