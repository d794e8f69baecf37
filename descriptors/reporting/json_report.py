from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Dict, List

from descriptors.context import NormalizeConfig
from descriptors.ir import Notation, ParseOutcome

TOOL_NAME = "mdnorm"
TOOL_VERSION = "0.1.0"


def build_json_report(outcomes: List[ParseOutcome], config: NormalizeConfig) -> Dict:
    ordered = sorted(outcomes, key=lambda o: o.line)
    parsed = [o for o in ordered if o.ok]
    failed = [o for o in ordered if not o.ok]
    by_notation = {n.value: 0 for n in Notation}
    for outcome in ordered:
        by_notation[outcome.notation.value] += 1

    return {
        "tool": {"name": TOOL_NAME, "version": TOOL_VERSION},
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "config": {"on_error": config.on_error},
        "summary": {
            "total": len(ordered),
            "parsed": len(parsed),
            "failed": len(failed),
            "by_notation": by_notation,
        },
        "descriptors": [_build_descriptor_entry(o) for o in parsed],
        "errors": [_build_error_entry(o) for o in failed],
    }


def write_json_report(path: str, report: Dict) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(report, f, indent=2)


def _build_descriptor_entry(outcome: ParseOutcome) -> Dict:
    descriptor = outcome.descriptor
    return {
        "line": outcome.line,
        "input": outcome.raw,
        "notation": outcome.notation.value,
        "param_types": descriptor.param_types,
        "return_type": descriptor.return_type,
        "descriptor": descriptor.render(),
    }


def _build_error_entry(outcome: ParseOutcome) -> Dict:
    error = outcome.error
    return {
        "line": outcome.line,
        "input": outcome.raw,
        "notation": outcome.notation.value,
        "error": type(error).__name__,
        "message": error.reason,
    }
