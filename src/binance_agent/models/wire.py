import math
import re
from typing import Annotated, Any

from pydantic import BeforeValidator, ValidationInfo

# Binance sends prices and quantities as quoted JSON numbers.
_DECIMAL_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

# Validation context passed by the decoder: numeric fields must arrive quoted.
WIRE_CONTEXT = {"wire": True}


def is_wire(info: ValidationInfo) -> bool:
    return bool(info.context and info.context.get("wire"))


def parse_decimal(value: Any, info: ValidationInfo) -> float:
    if isinstance(value, str):
        if not _DECIMAL_PATTERN.fullmatch(value):
            raise ValueError(f"not a decimal number: {value!r}")
        number = float(value)
    elif is_wire(info):
        raise ValueError(f"expected a quoted decimal, got {type(value).__name__}")
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        number = float(value)
    else:
        raise ValueError(f"not a decimal number: {value!r}")

    if not math.isfinite(number):
        raise ValueError(f"decimal out of range: {value!r}")
    if number < 0:
        raise ValueError(f"negative decimal: {value!r}")
    return number


DecimalString = Annotated[float, BeforeValidator(parse_decimal)]
