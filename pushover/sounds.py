"""Notification sound table."""

from types import MappingProxyType
from typing import Mapping

DEFAULT_SOUNDS: Mapping[str, str] = MappingProxyType(
    {
        "pushover": "Pushover (default)",
        "bike": "Bike",
        "bugle": "Bugle",
        "cashregister": "Cash Register",
        "classical": "Classical",
        "cosmic": "Cosmic",
        "falling": "Falling",
        "gamelan": "Gamelan",
        "incoming": "Incoming",
        "intermission": "Intermission",
        "magic": "Magic",
        "mechanical": "Mechanical",
        "pianobar": "Piano Bar",
        "siren": "Siren",
        "spacealarm": "Space Alarm",
        "tugboat": "Tug Boat",
        "alien": "Alien Alarm (long)",
        "climb": "Climb (long)",
        "persistent": "Persistent (long)",
        "echo": "Pushover Echo (long)",
        "updown": "Up Down (long)",
        "none": "None (silent)",
    }
)


class SoundTable:
    """
    Holds the current sound id -> label mapping.

    The mapping is never edited in place: ``replace`` swaps in a new
    read-only snapshot, so readers see either the old or the new table.
    """

    def __init__(self, sounds: Mapping[str, str] | None = None) -> None:
        self._snapshot: Mapping[str, str] = MappingProxyType(
            dict(DEFAULT_SOUNDS if sounds is None else sounds)
        )

    @property
    def snapshot(self) -> Mapping[str, str]:
        return self._snapshot

    def replace(self, sounds: Mapping[str, str]) -> Mapping[str, str]:
        """Swap in a new table and return it."""
        self._snapshot = MappingProxyType(dict(sounds))
        return self._snapshot

    def __contains__(self, sound: object) -> bool:
        return sound in self._snapshot

    def __len__(self) -> int:
        return len(self._snapshot)

    def label(self, sound: str) -> str | None:
        return self._snapshot.get(sound)
