from __future__ import annotations

from rich.text import Text

from dfview.models.disk import DiskRecord, DiskReport
from dfview.services.formatting import format_size, render_bar, usage_bar
from dfview.tui.theme import style_name

EMPTY_MESSAGE = "No mounted filesystems found."


def render_record(record: DiskRecord) -> Text:
    used_bar, avail_bar = render_bar(usage_bar(record.use_percent))

    text = Text()
    text.append(record.filesystem, style=style_name("filesystem"))
    text.append("\n")
    _field(text, "├─ Size: ", format_size(record.size_bytes), "size")
    _field(text, "├─ Used: ", format_size(record.used_bytes), "used")
    _field(text, "├─ Available: ", format_size(record.available_bytes), "available")
    _field(text, "├─ Usage: ", f"{record.use_percent}%", "percent")
    _field(text, "├─ Mounted on: ", record.mount_point, "mount")
    text.append("└─ [")
    text.append(used_bar, style=style_name("used"))
    text.append(avail_bar, style=style_name("available"))
    text.append("]\n\n")
    return text


def render_report(report: DiskReport, devices_only: bool = False) -> Text:
    if devices_only:
        report = report.devices_only()

    # Warnings only refer to records, so an empty report has none.
    if not report.records:
        return Text(EMPTY_MESSAGE + "\n")

    out = Text()
    for r in report.records:
        out.append_text(render_record(r))
    for w in report.warnings:
        out.append(f"! {w.message}\n", style=style_name("warning"))
    return out


def render_error(message: str) -> Text:
    return Text(f"Error: {message}\n", style=style_name("error"))


def _field(text: Text, label: str, value: str, role: str) -> None:
    text.append(label)
    text.append(value, style=style_name(role))
    text.append("\n")
