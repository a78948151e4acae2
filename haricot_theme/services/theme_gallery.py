from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Literal, Mapping

from haricot_theme.schemas.custom_themes import CustomThemeRecord
from haricot_theme.schemas.tokens import ThemeTokens
from haricot_theme.services.custom_themes import normalize_custom_theme_to_tokens
from haricot_theme.services.theme_registry import theme_definitions

GallerySource = Literal["mine", "builtIn", "public"]


@dataclass(frozen=True)
class GalleryThemeItem:
    id: str
    source: GallerySource
    label: str
    description: str
    tokens: ThemeTokens
    theme_name: str | None = None
    share_code: str | None = None
    custom_theme: CustomThemeRecord | None = None


def _records(themes: Iterable[CustomThemeRecord | Mapping[str, Any]] | None) -> list[CustomThemeRecord]:
    records = [
        theme if isinstance(theme, CustomThemeRecord) else CustomThemeRecord.model_validate(theme)
        for theme in themes or ()
    ]
    # newest first; records without a creation time sort last
    return sorted(records, key=lambda record: record.creationTime or 0, reverse=True)


def _custom_item(record: CustomThemeRecord, source: GallerySource, description: str) -> GalleryThemeItem:
    prefix = "mine" if source == "mine" else "public"
    return GalleryThemeItem(
        id=f"{prefix}-{record.shareCode}",
        source=source,
        label=record.name,
        description=description,
        tokens=normalize_custom_theme_to_tokens(record),
        share_code=record.shareCode,
        custom_theme=record,
    )


def build_theme_gallery(
    my_themes: Iterable[CustomThemeRecord | Mapping[str, Any]] | None,
    public_themes: Iterable[CustomThemeRecord | Mapping[str, Any]] | None,
    labels: Mapping[str, tuple[str, str]] | None = None,
) -> list[GalleryThemeItem]:
    """
    Everything the gallery can show: the user's own themes, the built-ins, then
    community themes the user does not already own.

    ``labels`` maps a built-in theme name to a localized ``(label, description)``.
    """
    labels = labels or {}
    mine = [_custom_item(record, "mine", f"Share code: {record.shareCode}") for record in _records(my_themes)]

    built_in: list[GalleryThemeItem] = []
    for name, definition in theme_definitions().items():
        label, description = labels.get(name, (definition.label, definition.description))
        built_in.append(
            GalleryThemeItem(
                id=f"builtin-{name}",
                source="builtIn",
                label=label,
                description=description,
                tokens=definition.tokens,
                theme_name=name,
            )
        )

    my_codes = {item.share_code for item in mine}
    community = [
        _custom_item(record, "public", f"Community theme · {record.shareCode}")
        for record in _records(public_themes)
        if record.shareCode not in my_codes
    ]
    return [*mine, *built_in, *community]


def gallery_initial_index(
    items: list[GalleryThemeItem],
    focus_id: str | None = None,
    custom_share_code: str | None = None,
    active_theme_name: str | None = None,
) -> int:
    if not items:
        return 0
    if focus_id:
        for index, item in enumerate(items):
            if item.id == focus_id:
                return index
    if custom_share_code:
        for index, item in enumerate(items):
            if item.share_code == custom_share_code:
                return index
    for index, item in enumerate(items):
        if active_theme_name is not None and item.theme_name == active_theme_name:
            return index
    return 0
