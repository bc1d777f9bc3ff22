# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Spreadsheet (.ods) output for word statistics.

The report contains one sheet with a `Word` and a `Count` column, a bold
header row that stays frozen while scrolling, and autofilter dropdowns.
"""

import re
from pathlib import Path
from typing import Any, Iterable, cast

from odfdo import Document
from odfdo.cell import Cell
from odfdo.column import Column
from odfdo.config_elements import ConfigItem, ConfigItemMapEntry
from odfdo.element import Element
from odfdo.row import Row
from odfdo.style import Style
from odfdo.table import Table

from text_analyzer.hash_utils import md5_text


_XML_ILLEGAL_CHARS_RE = re.compile(
    # XML 1.0 disallows most C0 control chars except TAB, LF, CR.
    r"[\x00-\x08\x0B\x0C\x0E-\x1F]"
    # Surrogates are never valid Unicode scalar values.
    r"|[\uD800-\uDFFF]"
    # Noncharacters.
    r"|[\uFFFE\uFFFF]"
)


def _xml_safe_text(value: Any) -> str:
    """Return a string that is safe to embed in XML/ODS.

    lxml (used by odfdo) rejects NULL bytes and some control characters, which
    can survive tokenization of binary-ish input.
    """

    if value is None:
        return ""

    return _XML_ILLEGAL_CHARS_RE.sub("", str(value))


def _make_style_name(prefix: str, scope: str, *, suffix: str = "") -> str:
    """Return a stable, ODF-friendly style name."""

    scope_key = re.sub(r"[^A-Za-z0-9_]", "_", scope or "")
    scope_key = scope_key.strip("_")[:40] or "x"
    digest = md5_text(scope)[:8]
    if suffix:
        suffix = re.sub(r"[^A-Za-z0-9_]", "_", suffix)
    parts = [prefix, scope_key, digest]
    if suffix:
        parts.append(suffix)
    return "_".join(p for p in parts if p)


def _insert_automatic_style(doc: Document, style: Style | None) -> Style | None:
    """Insert style into document automatic-styles so viewers can apply it."""

    if style is None:
        return None
    try:
        doc.insert_style(style, automatic=True)
        return style
    except Exception:
        return None


def _set_config_item(entry: Element, *, name: str, config_type: str, value: str | int | bool) -> None:
    existing = None
    for item in entry.get_elements("config:config-item"):
        if isinstance(item, ConfigItem) and item.name == name:
            existing = item
            break
    if existing is None:
        existing = ConfigItem(name=name, config_type=config_type, value=value)
        entry.append(existing)
    else:
        existing.config_type = config_type
        existing.value = value


def _freeze_first_row_in_settings(doc: Document) -> None:
    """Best-effort: configure view settings to freeze the first row in each sheet.

    LibreOffice/Calc stores freeze pane configuration in settings.xml under
    ooo:view-settings -> Views -> Tables.
    """

    try:
        table_names = [t.name for t in doc.body.tables if getattr(t, "name", None)]
        if not table_names:
            return

        view_settings = doc.settings.get_element(
            '//config:config-item-set[@config:name="ooo:view-settings"]'
        )
        if view_settings is None:
            return

        views = view_settings.get_element(
            'config:config-item-map-indexed[@config:name="Views"]'
        )
        if views is None:
            return

        view_entry = views.get_element("config:config-item-map-entry")
        if view_entry is None:
            return

        tables_map = view_entry.get_element(
            'config:config-item-map-named[@config:name="Tables"]'
        )
        if tables_map is None:
            return

        template = tables_map.get_element("config:config-item-map-entry")
        if template is None:
            return
        template_entry = cast(ConfigItemMapEntry, template)

        for child in list(tables_map.children):
            tables_map.delete(child)

        for name in table_names:
            entry = cast(ConfigItemMapEntry, template_entry.clone)
            entry.name = name

            # Freeze first row (row index 1), no frozen columns.
            _set_config_item(entry, name="HorizontalSplitMode", config_type="short", value=0)
            _set_config_item(entry, name="HorizontalSplitPosition", config_type="int", value=0)
            _set_config_item(entry, name="VerticalSplitMode", config_type="short", value=2)
            _set_config_item(entry, name="VerticalSplitPosition", config_type="int", value=1)

            tables_map.append(entry)
    except Exception:
        # Never fail report generation because of viewer-specific settings.
        return


def _col_letters(index_1_based: int) -> str:
    """Convert 1-based column index to spreadsheet letters (A, B, ..., AA, ...)."""

    if index_1_based <= 0:
        return "A"
    n = index_1_based
    out: list[str] = []
    while n:
        n, rem = divmod(n - 1, 26)
        out.append(chr(ord("A") + rem))
    return "".join(reversed(out))


def _enable_autofilter(doc: Document, sheet_name: str, ncols: int, nrows: int) -> None:
    """Best-effort: enable auto filter dropdowns for a sheet."""

    try:
        safe_name = sheet_name.replace("'", "''")
        addr = f"'{safe_name}'.A1:{_col_letters(ncols)}{max(1, nrows)}"

        db_ranges = Element.from_tag("table:database-ranges")
        db = Element.from_tag("table:database-range")
        db.set_attribute("table:name", _make_style_name("db", sheet_name))
        db.set_attribute("table:target-range-address", addr)
        db.set_attribute("table:display-filter-buttons", "true")
        db.set_attribute("table:contains-header", "true")
        db_ranges.append(db)

        doc.body.append(db_ranges)
    except Exception:
        return


def _append_header(doc: Document, table: Table, sheet_name: str, titles: list[str]) -> None:
    try:
        header_style = cast(
            Style,
            Style(
                "table-cell",
                name=_make_style_name("hdr", sheet_name),
                area="text",
                bold=True,
            ),
        )
    except Exception:
        header_style = None
    header_style = _insert_automatic_style(doc, header_style)

    header = Row()
    for title in titles:
        cell = Cell(value=_xml_safe_text(title))
        if header_style is not None:
            cell.style = header_style.name
        header.append_cell(cell)

    # A table-header-rows group is treated as the sheet header by most viewers.
    hdr_group = Element.from_tag("table:table-header-rows")
    hdr_group.append(header)
    table.append(hdr_group)


def _append_word_column_width(doc: Document, table: Table, sheet_name: str, chars: int) -> None:
    # 0.12 cm per character, clamped to [3cm, 24cm]; the count column keeps
    # the default width.
    width_cm = max(3.0, min(chars * 0.12, 24.0))
    try:
        col_style = cast(
            Style,
            Style(
                "table-column",
                name=_make_style_name("col", sheet_name, suffix="1"),
                area="table-column",
                width=f"{width_cm:.2f}cm",
            ),
        )
    except Exception:
        return
    col_style = _insert_automatic_style(doc, col_style)
    if col_style is not None:
        table.append(Column(style=col_style.name))
        table.append(Column())


def build_statistics_document(
    entries: Iterable[tuple[str, int]],
    *,
    sheet_name: str = "Words",
    label_title: str = "Word",
) -> Document:
    """
    Build a spreadsheet with one row per `(label, count)` entry.

    Args:
        entries:
            Rows in the order they should appear.
        sheet_name:
            Name of the single sheet.
        label_title:
            Header of the label column.

    Returns:
        The unsaved odfdo document.
    """

    rows = list(entries)

    doc = Document("spreadsheet")

    # odfdo creates a default empty sheet; remove it so the output only
    # contains our sheet.
    for table in list(doc.body.tables):
        doc.body.delete(table)

    table = Table(sheet_name)
    longest = max([len(label_title)] + [len(label) for label, _count in rows])
    _append_word_column_width(doc, table, sheet_name, longest)
    _append_header(doc, table, sheet_name, [label_title, "Count"])

    for label, count in rows:
        row = Row()
        row.append_cell(Cell(value=_xml_safe_text(label)))
        row.append_cell(Cell(value=int(count)))
        table.append_row(row)

    doc.body.append(table)

    _freeze_first_row_in_settings(doc)
    _enable_autofilter(doc, sheet_name, 2, 1 + len(rows))

    return doc


def write_statistics_ods(path: Path, entries: Iterable[tuple[str, int]]) -> Path:
    """Write word statistics to an `.ods` file and return its path."""

    doc = build_statistics_document(entries)
    path.parent.mkdir(parents=True, exist_ok=True)
    doc.save(path)
    return path
