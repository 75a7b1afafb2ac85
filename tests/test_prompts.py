# ===============================================
# tests/test_prompts.py
# Instruction payload: site branch vs placeholder branch
# ===============================================

import pytest

from signal_writer.signal import Severity, build_prompt, build_request
from signal_writer.signal.prompts import RECORD_FIELDS, RECORD_SCHEMA

DESC = "Subject withdrawal rate at Site 202 exceeds protocol expectation"
NEUTRAL_DESC = "Query response times are much slower than the study average"


def test_site_present_is_pinned_at_least_twice():
    prompt = build_prompt(DESC, "Site 202", Severity.HIGH)
    # once from the description itself, plus the site line and both guidelines
    assert prompt.count("Site 202") >= 3
    assert 'SITE INFORMATION: "Site 202"' in prompt
    assert 'The Signal Description MUST reference the site information: "Site 202"' in prompt
    assert "Do not replace it with generic placeholder names" in prompt
    assert "Site ABC" not in prompt


def test_site_present_with_neutral_description():
    prompt = build_prompt(NEUTRAL_DESC, "Sites 101 and 102", "Low")
    assert prompt.count("Sites 101 and 102") >= 2


@pytest.mark.parametrize("site", [None, "", "   "])
def test_site_absent_uses_placeholders(site):
    prompt = build_prompt(NEUTRAL_DESC, site, Severity.MEDIUM)
    assert '"Site ABC", "Site XYZ" or similar placeholder names' in prompt
    assert "SITE INFORMATION" not in prompt
    assert "MUST reference the site information" not in prompt


@pytest.mark.parametrize("severity", list(Severity))
def test_common_template(severity):
    prompt = build_prompt(NEUTRAL_DESC, None, severity)
    assert f'INPUT: "{NEUTRAL_DESC}"' in prompt
    assert f"- Risk Severity: {severity.value}" in prompt
    assert "Do NOT use random figures, hypothetical numbers, or specific counts" in prompt
    assert "DO NOT include any text outside the JSON structure" in prompt
    for key in RECORD_FIELDS:
        assert f'"{key}"' in prompt


def test_description_embedded_verbatim():
    desc = '  Visit dates "cluster" on Mondays;  odd spacing  '
    assert f'INPUT: "{desc}"' in build_prompt(desc, None, "High")


def test_builder_is_pure():
    assert build_prompt(DESC, "Site 202", "High") == build_prompt(DESC, "Site 202", Severity.HIGH)


def test_unknown_severity_rejected():
    with pytest.raises(ValueError):
        build_prompt(DESC, None, "Critical")


def test_build_request_carries_schema():
    req = build_request(DESC, None, "Medium")
    assert req.payload == build_prompt(DESC, None, "Medium")
    assert req.schema == RECORD_SCHEMA
    assert len(req.schema) == 7
