"""Registry of language profiles, looked up by name or file extension."""

from pathlib import Path

from .base import LanguageProfile


class ProfileRegistry:
    """Registry of available language profiles."""

    def __init__(self):
        self._profiles: dict[str, LanguageProfile] = {}
        self._extension_map: dict[str, LanguageProfile] = {}

    def register(self, profile: LanguageProfile) -> None:
        """Register a profile, replacing any profile with the same name."""
        key = profile.name.lower()
        previous = self._profiles.get(key)
        if previous is not None:
            for ext in previous.extensions:
                if self._extension_map.get(ext.lower()) is previous:
                    del self._extension_map[ext.lower()]

        self._profiles[key] = profile
        for ext in profile.extensions:
            self._extension_map[ext.lower()] = profile

    def get_profile(self, name: str) -> LanguageProfile | None:
        """Get profile by language name."""
        return self._profiles.get(name.lower())

    def get_profile_for_file(self, file_path: Path | str) -> LanguageProfile | None:
        """Get the profile that handles a file, by its extension."""
        ext = Path(file_path).suffix.lower()
        return self._extension_map.get(ext)

    @property
    def profiles(self) -> list[LanguageProfile]:
        return list(self._profiles.values())

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._profiles


def create_default_registry() -> ProfileRegistry:
    """Create registry with all built-in profiles."""
    from .c import C
    from .java import JAVA
    from .python import PYTHON
    from .typescript import TYPESCRIPT

    registry = ProfileRegistry()

    registry.register(JAVA)
    registry.register(TYPESCRIPT)
    registry.register(PYTHON)
    registry.register(C)

    return registry
