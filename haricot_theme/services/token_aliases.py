from __future__ import annotations

import logging
from typing import Any, Mapping

logger = logging.getLogger(__name__)

# (legacy, semantic) pairs. Semantic names are the canonical storage keys.
SPACING_ALIASES: tuple[tuple[str, str], ...] = (
    ("xxxs", "spacingMicro"),
    ("xxs", "spacingTight"),
    ("xs", "spacingCompact"),
    ("sm", "spacingStandard"),
    ("md", "spacingComfortable"),
    ("lg", "spacingRoomy"),
    ("xl", "spacingSpacious"),
    ("xxl", "spacingHero"),
)

RADII_ALIASES: tuple[tuple[str, str], ...] = (
    ("sm", "radiusControl"),
    ("md", "radiusCard"),
    ("lg", "radiusSurface"),
    ("round", "radiusPill"),
)

TYPOGRAPHY_ALIASES: tuple[tuple[str, str], ...] = (
    ("display", "typeDisplay"),
    ("title", "typeTitle"),
    ("heading", "typeHeading"),
    ("subheading", "typeSubheading"),
    ("body", "typeBody"),
    ("extraSmall", "typeBodySmall"),
    ("small", "typeCaption"),
    ("tiny", "typeMicro"),
)

ALIAS_GROUPS: dict[str, tuple[tuple[str, str], ...]] = {
    "spacing": SPACING_ALIASES,
    "radii": RADII_ALIASES,
    "typography": TYPOGRAPHY_ALIASES,
}

# Legacy-only keys with a fixed value and no semantic counterpart.
ALIAS_CONSTANTS: dict[str, dict[str, int]] = {
    "spacing": {"none": 0},
    "radii": {},
    "typography": {},
}


def _aliases(group: str) -> tuple[tuple[str, str], ...]:
    try:
        return ALIAS_GROUPS[group]
    except KeyError as exc:
        raise ValueError(f"Unknown aliased token group: {group}.") from exc


def semantic_key(group: str, key: str) -> str:
    """Resolve a key given in either naming scheme to its semantic name."""
    for legacy, semantic in _aliases(group):
        if key in (legacy, semantic):
            return semantic
    raise KeyError(f"{group} has no token named {key!r}.")


def legacy_key(group: str, key: str) -> str:
    for legacy, semantic in _aliases(group):
        if key in (legacy, semantic):
            return legacy
    raise KeyError(f"{group} has no token named {key!r}.")


def known_keys(group: str) -> frozenset[str]:
    keys: set[str] = set(ALIAS_CONSTANTS.get(group, {}))
    for legacy, semantic in _aliases(group):
        keys.add(legacy)
        keys.add(semantic)
    return frozenset(keys)


def fold_aliases(group: str, values: Mapping[str, Any]) -> dict[str, Any]:
    """
    Collapse a mapping that may use either naming scheme into semantic keys only.

    When both names of one slot are present and disagree, the semantic value wins.
    Legacy constants (spacing ``none``) are dropped; keys outside the group pass through.
    """
    folded: dict[str, Any] = {}
    paired: set[str] = set(ALIAS_CONSTANTS.get(group, {}))
    for legacy, semantic in _aliases(group):
        paired.update((legacy, semantic))
        if semantic in values:
            folded[semantic] = values[semantic]
            if legacy in values and values[legacy] != values[semantic]:
                logger.debug(
                    "token_aliases.conflict",
                    extra={
                        "group": group,
                        "legacy": legacy,
                        "semantic": semantic,
                        "legacy_value": values[legacy],
                        "semantic_value": values[semantic],
                    },
                )
        elif legacy in values:
            folded[semantic] = values[legacy]
    for key, value in values.items():
        if key not in paired:
            folded[key] = value
    return folded


def expand_aliases(group: str, values: Mapping[str, Any]) -> dict[str, Any]:
    """Dual-aliased view of a mapping: every slot under both names, plus legacy constants."""
    folded = fold_aliases(group, values)
    expanded: dict[str, Any] = dict(ALIAS_CONSTANTS.get(group, {}))
    for legacy, semantic in _aliases(group):
        if semantic in folded:
            expanded[legacy] = folded[semantic]
            expanded[semantic] = folded[semantic]
    for key, value in folded.items():
        expanded.setdefault(key, value)
    return expanded


def merge_aliased(group: str, base: Mapping[str, Any], overrides: Mapping[str, Any] | None) -> dict[str, Any]:
    """Layer ``overrides`` over ``base`` slot by slot; each side may use either naming scheme."""
    merged = fold_aliases(group, base)
    if overrides:
        merged.update(fold_aliases(group, overrides))
    return merged


def set_aliased(group: str, values: Mapping[str, Any], key: str, value: Any) -> dict[str, Any]:
    updated = fold_aliases(group, values)
    updated[semantic_key(group, key)] = value
    return updated
