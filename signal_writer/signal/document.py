# Renders a GenerationRecord into the fixed plain-text signal document.

from __future__ import annotations
from datetime import date
from typing import List, Optional, Tuple

from .types import GenerationRecord, Severity, clean_site_info

# label, record attribute
SECTIONS: Tuple[Tuple[str, str], ...] = (
    ("SIGNAL TITLE", "title"),
    ("SIGNAL DESCRIPTION", "description"),
    ("RISK ASSESSMENT", "risk"),
    ("ROOT CAUSE ANALYSIS", "root_cause"),
    ("CORRECTIVE ACTIONS", "actions"),
    ("COMMENTS", "comments"),
    ("MONITORING PLAN", "monitoring"),
)

FOOTER_RULE = "---"


def render_footer(site_info: Optional[str], severity: Severity | str, today: date) -> str:
    lines: List[str] = [FOOTER_RULE, f"Generated on: {today.isoformat()}"]
    site = clean_site_info(site_info)
    if site:
        lines.append(f"Site(s): {site}")
    lines.append(f"Risk Severity: {Severity.parse(severity).value}")
    return "\n".join(lines)


def assemble(
    record: GenerationRecord,
    site_info: Optional[str],
    severity: Severity | str,
    today: Optional[date] = None,
) -> str:
    body = "\n\n".join(f"{label}:\n{getattr(record, attr)}" for label, attr in SECTIONS)
    return f"{body}\n\n{render_footer(site_info, severity, today or date.today())}"
