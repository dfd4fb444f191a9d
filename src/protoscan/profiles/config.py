"""Loading extra language profiles from YAML."""

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .base import LanguageProfile
from .registry import ProfileRegistry, create_default_registry

logger = logging.getLogger(__name__)

# Fields stored as frozensets on LanguageProfile; the remaining list fields become tuples
SET_FIELDS = {"body_opener_keywords", "modifier_keywords", "declaration_keywords", "type_keywords"}


class ProfileConfigError(Exception):
    """A profile file could not be read or did not validate."""

    def __init__(self, path: Path | str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = Path(path)
        self.message = message


class ProfileConfig(BaseModel):
    """One entry under ``languages:``. Unset fields come from ``extends`` or the defaults."""
    model_config = ConfigDict(extra="forbid")

    extends: str | None = Field(None, description="Built-in or earlier profile to inherit from")
    extensions: list[str] | None = None

    annotation_prefix: str | None = None
    whitespace_after_prefix: bool | None = None
    annotation_args_across_lines: bool | None = None
    annotation_exclusions: list[str] | None = None

    delimiter_pairs: list[tuple[str, str]] | None = None
    generic_brackets: tuple[str, str] | None = None

    string_quotes: list[str] | None = None
    escape_char: str | None = None
    line_comment_symbols: list[str] | None = None
    block_comment_symbols: list[tuple[str, str]] | None = None
    block_comments_nest: bool | None = None
    identifier_extra_chars: str | None = None

    terminators: list[str] | None = None
    body_openers: list[str] | None = None
    body_opener_keywords: list[str] | None = None
    line_break_ends: bool | None = None

    parameter_style: Literal["c", "pascal"] | None = None
    type_separator: str | None = None
    return_type_separators: list[str] | None = None
    default_value_separators: list[str] | None = None
    modifier_keywords: list[str] | None = None
    declaration_keywords: list[str] | None = None
    type_keywords: list[str] | None = None
    parameter_markers: list[str] | None = None
    empty_parameter_markers: list[str] | None = None
    allow_unnamed_parameters: bool | None = None
    trailing_comma: bool | None = None

    access_keywords: list[str] | None = None
    default_access_level: str | None = None
    underscore_is_private: bool | None = None

    def profile_fields(self) -> dict:
        """Explicitly set fields converted to LanguageProfile's value types.

        Only fields present in the file are returned, so an explicit
        ``annotation_prefix: null`` still switches annotations off.
        """
        fields = {}
        for key, value in self.model_dump(exclude_unset=True, exclude={"extends"}).items():
            if key in SET_FIELDS:
                value = frozenset(value or ())
            elif isinstance(value, list):
                value = tuple(tuple(item) if isinstance(item, (list, tuple)) else item
                              for item in value)
            fields[key] = value
        return fields


def build_profile(name: str, config: ProfileConfig, base: LanguageProfile | None = None) -> LanguageProfile:
    """Build a profile from its config, on top of ``base`` when one is given."""
    fields = config.profile_fields()
    if base is None:
        return LanguageProfile(name=name, **fields)
    return base.derive(name=name, **fields)


def load_profiles(
    path: Path | str,
    registry: ProfileRegistry | None = None,
) -> list[LanguageProfile]:
    """Load and validate every profile in a YAML file.

    ``extends`` names are resolved against ``registry`` (the built-ins by
    default) and against profiles defined earlier in the same file.
    """
    path = Path(path)
    if not path.exists():
        raise ProfileConfigError(path, "Profile file not found")

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ProfileConfigError(path, f"Invalid YAML: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("languages", {}), dict):
        raise ProfileConfigError(path, "Expected a 'languages' mapping at the top level")

    registry = registry or create_default_registry()
    defined: dict[str, LanguageProfile] = {}
    profiles = []

    for name, entry in (data.get("languages") or {}).items():
        try:
            config = ProfileConfig.model_validate(entry or {})
        except ValidationError as e:
            raise ProfileConfigError(path, f"Invalid profile {name!r}: {e}") from e

        base = None
        if config.extends:
            base = defined.get(config.extends.lower()) or registry.get_profile(config.extends)
            if base is None:
                raise ProfileConfigError(
                    path, f"Profile {name!r} extends unknown profile {config.extends!r}"
                )

        profile = build_profile(str(name), config, base)

        defined[profile.name.lower()] = profile
        profiles.append(profile)
        logger.debug("Loaded profile %r from %s", profile.name, path)

    return profiles


def load_registry(path: Path | str | None = None) -> ProfileRegistry:
    """Default registry, with the profiles from ``path`` registered on top."""
    registry = create_default_registry()
    if path is None:
        return registry

    for profile in load_profiles(path, registry):
        registry.register(profile)
    return registry
