"""Markdown rendering of classified release notes."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from rushnotes.core.classifier import group_log_items

if TYPE_CHECKING:
    from rushnotes.models.release import ClassifiedEntry, LogItem, TypeGroup

# Section order and heading glyph per commit type
TYPE_META: tuple[tuple[str, str], ...] = (
    ("feat", "🆕"),
    ("fix", "🐛"),
    ("refactor", "🔨"),
    ("perf", "⚡"),
    ("test", "✅"),
    ("chore", "🔧"),
    ("revert", "🔙"),
    ("docs", "📖"),
    ("style", "💄"),
    ("other", "🔖"),
)

BREAKING_MARKER = "**BREAKING** "


def render_entry(entry: ClassifiedEntry) -> str:
    """Render one entry as a markdown bullet line."""
    marker = BREAKING_MARKER if entry.breaking else ""
    return f"- {marker}**{entry.scope}**: {entry.subject}\n"


def render_markdown(groups: TypeGroup) -> str:
    """Render grouped entries as markdown sections.

    Sections follow the fixed TYPE_META order; types without entries are
    skipped, so an empty mapping renders to an empty string.

    Args:
        groups: Classified entries keyed by type tag.

    Returns:
        The markdown document.
    """
    parts: list[str] = []
    for type_tag, emoji in TYPE_META:
        entries = groups.get(type_tag)
        if not entries:
            continue
        parts.append(f"## {emoji} {type_tag} \n")
        parts.extend(render_entry(entry) for entry in entries)
    return "".join(parts)


def convert_logs_to_markdown(log_items: Iterable[LogItem]) -> str:
    """Classify log items and render them as markdown."""
    return render_markdown(group_log_items(log_items))
