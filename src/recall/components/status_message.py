from dataclasses import dataclass


@dataclass(slots=True)
class StatusMessage:
    """Single line of feedback text shown under the board."""
    text: str = ""
