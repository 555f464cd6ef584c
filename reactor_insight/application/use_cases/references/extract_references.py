"""Static extraction of data element references from component settings."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, Final

from reactor_insight.application.use_cases.shaping import truncate
from reactor_insight.domain.entities import Reference

logger = logging.getLogger(__name__)

# Group 2: name inside _satellite.getVar('...') / ("..."). Group 3: name inside %...%.
REFERENCE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"""(_satellite\.getVar\(['"](.*?)['"])|%(.*?)%"""
)


def _iter_string_leaves(value: Any) -> Iterator[str]:
    if isinstance(value, str):
        yield value
    elif isinstance(value, Mapping):
        for nested in value.values():
            yield from _iter_string_leaves(nested)
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        for entry in value:
            yield from _iter_string_leaves(entry)


def _settings_texts(settings: Any) -> list[str]:
    """Return the texts to scan: decoded JSON strings first, then the raw settings.

    Escaped quotes hide ``getVar`` calls from the raw text, so the decoded
    strings carry source order; the raw pass only adds what they miss.
    """

    if not isinstance(settings, str):
        return []
    try:
        decoded = json.loads(settings)
    except ValueError:
        return [settings]
    if isinstance(decoded, str):
        return [settings]
    return [*_iter_string_leaves(decoded), settings]


def _scan(text: str) -> Iterator[str]:
    for match in REFERENCE_PATTERN.finditer(text):
        name = match.group(2) or match.group(3)
        if name:
            yield name


def extract_references(components: Iterable[Any]) -> list[Reference]:
    """Return every distinct data element reference found in ``components``.

    Records equal in all four fields collapse into one; otherwise the order
    of first appearance is kept. A component that cannot be read is skipped.
    """

    seen: set[Reference] = set()
    references: list[Reference] = []

    for raw_component in components:
        component = truncate(raw_component)
        try:
            attributes = component.attributes
            type_name = attributes.get("name")
            descriptor = attributes.get("delegate_descriptor_id")
            found = [
                Reference(
                    component_id=component.id,
                    match_name=name,
                    type_name=type_name if isinstance(type_name, str) else "",
                    delegate_descriptor_id=descriptor if isinstance(descriptor, str) else "",
                )
                for text in _settings_texts(attributes.get("settings"))
                for name in _scan(text)
            ]
        except (AttributeError, TypeError, RecursionError) as exc:
            logger.debug("Skipping unreadable component %s: %s", component.id, exc)
            continue

        for reference in found:
            if reference not in seen:
                seen.add(reference)
                references.append(reference)

    return references


__all__ = ["REFERENCE_PATTERN", "extract_references"]
