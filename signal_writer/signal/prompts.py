# Instruction payload for the generation service.
# The wording here is the whole contract with the model; the site branch
# decides whether the final document names a real site or a placeholder.

from __future__ import annotations
import json
from typing import Dict, List, Optional

from .types import GenerationRequest, Severity, clean_site_info

ROLE_PREAMBLE = (
    "You are an expert Clinical Data Manager specializing in Risk-Based Monitoring "
    "and signal writing for clinical trials."
)

SIGNAL_STRUCTURE = """\
Create a professional clinical signal following this structure:

SIGNAL TITLE: [Clear, specific title]

SIGNAL DESCRIPTION: [100-word high-level summary of the risk to study team]

RISK ASSESSMENT:
[Detailed explanation of the observed atypicality in clinical context, including statistical findings and their clinical interpretation. Discuss potential impact on trial integrity/patient safety]

ROOT CAUSE ANALYSIS:
[Potential underlying causes of the observed atypicality]

CORRECTIVE ACTIONS:
[Specific, time-bound actions with clear ownership and deadlines]

COMMENTS:
[Brief elaboration on subjects within the associated site responsible for making the site an outlier]

MONITORING PLAN:
[Ongoing monitoring strategy to track resolution]
"""

BASE_GUARDRAILS = [
    "Do NOT use random figures, hypothetical numbers, or specific counts",
    "Keep information specific to the actual risk being highlighted",
    "Focus on actionable intelligence rather than arbitrary statistics",
]

PLACEHOLDER_SITES = '"Site ABC", "Site XYZ"'

# key -> what the model should put there
RECORD_SCHEMA: Dict[str, str] = {
    "title": "Signal title here",
    "description": "100-word signal description summary",
    "risk": "Combined risk assessment with statistical context and clinical interpretation",
    "rootCause": "Root cause analysis",
    "actions": "Corrective actions list",
    "comments": "Comments on subjects/factors at site",
    "monitoring": "Monitoring plan details",
}

RECORD_FIELDS = tuple(RECORD_SCHEMA)

RESPONSE_RULES = (
    "Your entire response MUST be a single, valid JSON object. "
    "DO NOT include any text outside the JSON structure."
)


def _site_guidelines(site_info: str) -> List[str]:
    return [
        f'ALWAYS use the specific site information provided: "{site_info}" throughout the signal, '
        "especially in the Signal Description. Do not replace it with generic placeholder names",
        *BASE_GUARDRAILS,
        f'The Signal Description MUST reference the site information: "{site_info}"',
    ]


def _placeholder_guidelines() -> List[str]:
    return [
        f"Use {PLACEHOLDER_SITES} or similar placeholder names instead of specific site numbers",
        *BASE_GUARDRAILS,
    ]


def format_schema(schema: Dict[str, str] = RECORD_SCHEMA) -> str:
    return json.dumps(schema, indent=2)


def _render(description: str, severity: Severity, site_line: str, guidelines: List[str]) -> str:
    sections = [
        ROLE_PREAMBLE,
        "Transform this brief atypicality description into a comprehensive clinical signal narrative:",
        f'INPUT: "{description}"' + (f"\n{site_line}" if site_line else ""),
        f"VARIABLES TO INCORPORATE:\n- Risk Severity: {severity.value}",
        SIGNAL_STRUCTURE.strip(),
        "IMPORTANT GUIDELINES:\n" + "\n".join(f"- {g}" for g in guidelines),
        "Respond with a JSON object in this exact format, with exactly these seven keys:\n"
        + format_schema(),
        RESPONSE_RULES,
    ]
    return "\n\n".join(sections) + "\n"


def build_prompt(description: str, site_info: Optional[str], severity: Severity | str) -> str:
    """Build the instruction payload for one signal.

    `description` is embedded verbatim. A non-blank `site_info` is pinned
    into the payload twice (general rule and description rule); without it
    the model is told to use placeholder site names.
    """
    level = Severity.parse(severity)
    site = clean_site_info(site_info)
    if site:
        return _render(description, level, f'SITE INFORMATION: "{site}"', _site_guidelines(site))
    return _render(description, level, "", _placeholder_guidelines())


def build_request(description: str, site_info: Optional[str], severity: Severity | str) -> GenerationRequest:
    return GenerationRequest(
        payload=build_prompt(description, site_info, severity),
        schema=dict(RECORD_SCHEMA),
    )
