import json
import math
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Any

from x3test.errors import OutputWriteError


def dump_json(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


def write_json(path: Path, data: Any) -> None:
    # Serialize before opening: the target is left untouched if encoding fails.
    content = dump_json(data)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as exc:
        raise OutputWriteError(path, exc.strerror or str(exc)) from exc


def js_round(value: float) -> int:
    """Math.round: halves round towards +infinity."""
    return math.floor(value + 0.5)


def js_fixed(value: float, digits: int) -> float:
    """parseFloat(value.toFixed(digits)): exact binary value, halves round up."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
