"""Render a ValidationReport as plain text."""

from typing import Any

from .LinkStatus import LinkStatus
from .ValidationReport import ValidationReport


def render_text(report: ValidationReport | dict[str, Any]) -> str:
    """Deterministic human-readable summary; no timestamps or colors.

    Accepts the report itself or its ``to_dict()`` serialization, which is what
    the CLI receives as command output.
    """
    data = report.to_dict() if isinstance(report, ValidationReport) else report
    broken_links = data["broken_links"]
    ambiguous = sum(1 for b in broken_links if b["status"] == LinkStatus.AMBIGUOUS.value)

    lines = [
        f"Checked {data['total_links']} links in {data['guides_checked']} guides under {data['root']}",
        f"  resolved:  {data['resolved_links']}",
        f"  external:  {data['external_links']}",
        f"  broken:    {len(broken_links) - ambiguous}",
        f"  ambiguous: {ambiguous}",
    ]
    if data["skipped_links"]:
        lines.append(f"  skipped:   {data['skipped_links']}")

    if broken_links:
        lines.append("")
        lines.append("Broken links:")
        for entry in broken_links:
            label = "ambiguous" if entry["status"] == LinkStatus.AMBIGUOUS.value else "broken"
            line = f"  {entry['source']}:{entry['line_number']}: [{entry['label']}]({entry['target']}) {label}"
            if entry["detail"]:
                line += f" ({entry['detail']})"
            lines.append(line)

    if data["load_errors"]:
        lines.append("")
        lines.append("Skipped files:")
        lines.extend(f"  {error}" for error in data["load_errors"])

    lines.append("")
    lines.append("PASSED" if data["passed"] else "FAILED")
    return "\n".join(lines) + "\n"
