"""Prototype detection entry points."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable

from ..profiles.base import LanguageProfile
from ..profiles.registry import ProfileRegistry, create_default_registry
from .annotations import skip_annotations
from .boundary import find_boundary
from .errors import DetectionError
from .models import DetectionResult, Prototype
from .normalizer import build_prototype
from .parameters import parse_declaration
from .scanner import TokenBuffer

logger = logging.getLogger(__name__)


def detect_prototype(
    text: str,
    profile: LanguageProfile,
    start: int = 0,
    end: int | None = None,
) -> Prototype:
    """Detect the prototype of the declaration that starts at ``start``.

    ``text[start:end]`` is the source right after a documentation comment.
    Offsets in the result and in any raised DetectionError are offsets
    into ``text``.
    """
    buffer = TokenBuffer(text, profile, start, end)
    annotations, index = skip_annotations(buffer)
    boundary = find_boundary(buffer, index)
    parts = parse_declaration(buffer, boundary.start, boundary.stop)

    first = annotations[0].start if annotations else buffer.offset(boundary.start)
    if boundary.ender:
        last = buffer.end_offset(boundary.after)
    else:
        last = buffer.end_offset(boundary.stop)
    prototype = build_prototype(
        profile,
        tuple(annotations) + parts.annotations,
        parts,
        boundary.ender,
        boundary.ender_kind,
        first,
        last,
    )
    logger.debug("Detected %s prototype %r with %d parameter(s)",
                 profile.name, prototype.name, len(prototype.parameters))
    return prototype


def try_detect(
    text: str,
    profile: LanguageProfile,
    start: int = 0,
    end: int | None = None,
    source_file: str | None = None,
) -> DetectionResult:
    """Like detect_prototype, but a failure is returned instead of raised."""
    try:
        prototype = detect_prototype(text, profile, start, end)
    except DetectionError as e:
        return DetectionResult(start=start, error=e, source_file=source_file)
    return DetectionResult(start=start, prototype=prototype, source_file=source_file)


class PrototypeDetector:
    """Detects prototypes by language name, one span or many at once."""

    def __init__(self, registry: ProfileRegistry | None = None, max_workers: int = 4):
        self.registry = registry or create_default_registry()
        self.max_workers = max_workers

    def profile(self, language: str) -> LanguageProfile:
        profile = self.registry.get_profile(language)
        if profile is None:
            raise KeyError(f"Unknown language: {language}")
        return profile

    def detect(
        self,
        text: str,
        language: str,
        start: int = 0,
        end: int | None = None,
        source_file: str | None = None,
    ) -> DetectionResult:
        return try_detect(text, self.profile(language), start, end, source_file)

    def detect_many(
        self,
        spans: Iterable[tuple[str, str, int]],
        source_file: str | None = None,
    ) -> list[DetectionResult]:
        """Detect independent ``(text, language, start)`` spans concurrently.

        Results come back in input order. A failed span is logged and
        recorded in its result; it never affects the others.
        """
        jobs = [(text, self.profile(language), start) for text, language, start in spans]
        results: list[DetectionResult | None] = [None] * len(jobs)

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {
                executor.submit(try_detect, text, profile, start, None, source_file): position
                for position, (text, profile, start) in enumerate(jobs)
            }

            for future in as_completed(futures):
                result = future.result()
                results[futures[future]] = result
                if not result.success:
                    logger.warning("Detection failed at offsets %d-%d: %s",
                                   result.error.start, result.error.end, result.error.message)

        return results
