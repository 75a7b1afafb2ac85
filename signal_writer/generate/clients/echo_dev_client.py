# Dummy model client for local dev and testing without API calls.
# Replies with a fenced seven-field record built from the prompt it was given.

import json
import re
from typing import Any, Dict, List, Tuple

from ..types import Message, ModelParams

_INPUT = re.compile(r'^INPUT: "(.*)"$', re.MULTILINE)
_SITE = re.compile(r'^SITE INFORMATION: "(.*)"$', re.MULTILINE)
_SEVERITY = re.compile(r"^- Risk Severity: (\w+)$", re.MULTILINE)


class EchoDevClient:
    def __init__(self):
        self.model = "echo-dev"

    def set_model(self, model: str):
        self.model = model

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        user_inputs = [m.content for m in messages if m.role == "user"]
        prompt = user_inputs[-1] if user_inputs else ""
        record = self._record(prompt)
        text = "```json\n" + json.dumps(record, indent=2) + "\n```"
        meta = {"engine": "echo", "model": self.model, "max_tokens": params.max_tokens}
        return text, meta

    def _record(self, prompt: str) -> Dict[str, str]:
        found = _INPUT.search(prompt)
        observation = found.group(1) if found else "(no input)"
        site_match = _SITE.search(prompt)
        site = site_match.group(1) if site_match else "Site ABC"
        sev_match = _SEVERITY.search(prompt)
        severity = sev_match.group(1) if sev_match else "Medium"
        return {
            "title": f"[ECHO] Atypicality at {site}",
            "description": f"[ECHO] {site}: {observation}",
            "risk": f"[ECHO] {severity} risk to trial integrity pending review.",
            "rootCause": "[ECHO] Root cause to be determined.",
            "actions": "[ECHO] Site contact and targeted data review.",
            "comments": f"[ECHO] Subjects at {site} to be reviewed.",
            "monitoring": "[ECHO] Re-assess at next central monitoring review.",
        }
