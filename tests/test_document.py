# ===============================================
# tests/test_document.py
# Fixed sections, footer, determinism
# ===============================================

from datetime import date

from signal_writer.signal import GenerationRecord, Severity, assemble

DAY = date(2025, 3, 14)

REC = GenerationRecord(
    title="T",
    description="D",
    risk="R",
    rootCause="RC",
    actions="A",
    comments="C",
    monitoring="M",
)

EXPECTED_BODY = """\
SIGNAL TITLE:
T

SIGNAL DESCRIPTION:
D

RISK ASSESSMENT:
R

ROOT CAUSE ANALYSIS:
RC

CORRECTIVE ACTIONS:
A

COMMENTS:
C

MONITORING PLAN:
M

---
Generated on: 2025-03-14
"""


def test_with_site():
    doc = assemble(REC, "Site 202", Severity.HIGH, today=DAY)
    assert doc == EXPECTED_BODY + "Site(s): Site 202\nRisk Severity: High"


def test_without_site_omits_site_line():
    doc = assemble(REC, None, "Low", today=DAY)
    assert doc == EXPECTED_BODY + "Risk Severity: Low"
    assert "Site(s):" not in assemble(REC, "  ", "Low", today=DAY)


def test_deterministic_for_fixed_date():
    a = assemble(REC, "Site 7", "Medium", today=DAY)
    b = assemble(REC, "Site 7", "Medium", today=DAY)
    assert a == b


def test_defaults_to_today():
    doc = assemble(REC, None, "Medium")
    assert f"Generated on: {date.today().isoformat()}" in doc
