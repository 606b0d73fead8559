"""
sorbent_core: расчётное ядро калькулятора сорбентных картриджей.

- пресеты входных параметров (закрытые множества значений)
- расчёт производных величин (площадь, скорость, время контакта, масса сорбента, замены в неделю)
- классификация итогового показателя по полосам bad/okay/good/great
- перебор всех комбинаций пресетов

UI (Streamlit) является внешним потребителем ядра и сюда не импортируется.
"""

from .classification import BANDS, classify
from .engine import (
    DegenerateResultError,
    DerivedOutputs,
    Evaluation,
    InputParameters,
    default_inputs,
    evaluate,
    evaluate_selection,
)
from .presets import PRESET_FIELDS, default_selection, get_field, is_allowed

__all__ = [
    "BANDS",
    "PRESET_FIELDS",
    "DegenerateResultError",
    "DerivedOutputs",
    "Evaluation",
    "InputParameters",
    "classify",
    "default_inputs",
    "default_selection",
    "evaluate",
    "evaluate_selection",
    "get_field",
    "is_allowed",
]
