"""Domain entity representing a participant."""

from dataclasses import dataclass


@dataclass
class Participant:
    """A named entity that can be linked to activities."""

    id: str
    name: str

    def snapshot(self) -> "Participant":
        """Return a detached copy suitable for embedding in an activity."""

        return Participant(id=self.id, name=self.name)


__all__ = ["Participant"]
