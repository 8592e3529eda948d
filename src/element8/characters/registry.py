from __future__ import annotations

from typing import Iterable, List

from element8.components.character import CharacterProfile
from element8.exceptions import UnknownCharacterError


class CharacterRegistry:
    """In-memory collection of character profiles keyed by lowercase key.

    Registering a key that already exists replaces the stored profile. There
    is no removal: profiles live for the lifetime of the registry.
    """

    def __init__(self, profiles: Iterable[CharacterProfile] = ()) -> None:
        self._profiles: dict[str, CharacterProfile] = {}
        for profile in profiles:
            self.register(profile)

    def register(self, profile: CharacterProfile) -> None:
        self._profiles[profile.key.lower()] = profile

    def profile(self, key: str) -> CharacterProfile | None:
        return self._profiles.get(key.lower())

    def require(self, key: str) -> CharacterProfile:
        profile = self.profile(key)
        if profile is None:
            raise UnknownCharacterError(key)
        return profile

    def profiles_for_keys(self, keys: Iterable[str]) -> List[CharacterProfile]:
        return [self.require(key) for key in keys]

    def all_profiles(self) -> tuple[CharacterProfile, ...]:
        return tuple(self._profiles.values())

    def all_profiles_sorted_by_name(self) -> List[CharacterProfile]:
        return sorted(self._profiles.values(), key=lambda p: (p.display_name.casefold(), p.key))

    def keys(self) -> tuple[str, ...]:
        return tuple(self._profiles.keys())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)
