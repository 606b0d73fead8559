from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable

from sorbent_core.presets import FIELD_NAMES, PRESET_FIELDS, is_allowed

Translator = Callable[..., str]

# Default English strings for backward compatibility when translator is not provided.
_VALIDATION_EN = {
    "validation.field_unknown": "{field} is not a known input",
    "validation.field_required": "{field} is required",
    "validation.field_number": "{field} must be a number",
    "validation.field_finite": "{field} must be finite",
    "validation.field_not_preset": "{field} must be one of {allowed}",
    "validation.static_pressure_unused": "max_static_pressure is not used by the calculation",
}


def _tr(translator: Translator | None, key: str, **kwargs: Any) -> str:
    if translator is None:
        raw = _VALIDATION_EN.get(key, key)
        return raw.format(**kwargs) if kwargs else raw
    return translator(key, **kwargs)


@dataclass(frozen=True)
class ValidationResult:
    errors: list[str]
    warnings: list[str]
    field_status: dict[str, str]

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


def is_finite(value: Any) -> bool:
    try:
        num = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(num)


def _allowed_text(values: tuple[float, ...]) -> str:
    return ", ".join(f"{float(v):g}" for v in values)


def validate_selection(data: dict[str, Any], *, translator: Translator | None = None) -> ValidationResult:
    """
    Checks a UI selection against the closed preset sets before it reaches the engine.
    """
    errors: list[str] = []
    warnings: list[str] = []
    statuses: dict[str, str] = {}

    for name in sorted(set(data) - set(FIELD_NAMES)):
        errors.append(_tr(translator, "validation.field_unknown", field=name))
        statuses[name] = "INVALID"

    for field in PRESET_FIELDS:
        name = field.name
        if name not in data or data[name] is None or data[name] == "":
            if not field.selectable:
                statuses[name] = "OK"
                continue
            errors.append(_tr(translator, "validation.field_required", field=name))
            statuses[name] = "INVALID"
            continue

        val = data[name]
        if isinstance(val, bool) or not isinstance(val, (int, float)):
            errors.append(_tr(translator, "validation.field_number", field=name))
            statuses[name] = "INVALID"
            continue
        if not is_finite(val):
            errors.append(_tr(translator, "validation.field_finite", field=name))
            statuses[name] = "INVALID"
            continue

        if not is_allowed(name, val):
            if field.selectable:
                errors.append(
                    _tr(
                        translator,
                        "validation.field_not_preset",
                        field=name,
                        allowed=_allowed_text(field.values),
                    )
                )
                statuses[name] = "INVALID"
                continue
            warnings.append(_tr(translator, "validation.static_pressure_unused"))
        statuses[name] = "OK"

    return ValidationResult(errors=errors, warnings=warnings, field_status=statuses)
