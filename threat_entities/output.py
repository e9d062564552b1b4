"""Output helpers (records, pretty printing, exit codes)."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .models import ValidationOutcome

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_USAGE = 2


def outcome_record(raw: Any, outcome: ValidationOutcome) -> dict[str, Any]:
    return {"input": raw, **outcome.to_dict()}


def exit_code_from_outcomes(outcomes: Iterable[ValidationOutcome]) -> int:
    return EXIT_OK if all(o.ok for o in outcomes) else EXIT_REJECTED


def format_pretty(raw: str, outcome: ValidationOutcome) -> str:
    if outcome.ok:
        return f"✅ {raw} -> {outcome.value}  [{outcome.fingerprint}]"
    return f"❌ {raw}: {outcome.error}"
