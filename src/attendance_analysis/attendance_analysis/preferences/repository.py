from __future__ import annotations

from typing import Optional, Protocol


class PreferencesRepository(Protocol):
    def load(self, profile: str) -> Optional[str]:
        """Raw stored JSON for a profile, or None when nothing was saved."""

        raise NotImplementedError

    def save(self, profile: str, payload: str) -> None:
        raise NotImplementedError

    def delete(self, profile: str) -> bool:
        raise NotImplementedError
