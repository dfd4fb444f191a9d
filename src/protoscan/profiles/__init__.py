"""Language profiles for the prototype detector."""

from .base import LanguageProfile
from .c import C
from .config import ProfileConfig, ProfileConfigError, load_profiles, load_registry
from .java import JAVA
from .python import PYTHON
from .registry import ProfileRegistry, create_default_registry
from .typescript import TYPESCRIPT

__all__ = [
    "LanguageProfile",
    "ProfileRegistry",
    "create_default_registry",
    "ProfileConfig",
    "ProfileConfigError",
    "load_profiles",
    "load_registry",
    "JAVA",
    "TYPESCRIPT",
    "PYTHON",
    "C",
]
