from pydantic import ValidationError

from binance_agent.core.errors import DecodeError
from binance_agent.core.interfaces import Frame
from binance_agent.models import WIRE_CONTEXT, DepthDiff, Trade


def decode_trade(frame: Frame) -> Trade:
    try:
        return Trade.model_validate_json(frame, context=WIRE_CONTEXT, by_alias=True, by_name=False)
    except ValidationError as e:
        raise DecodeError("trade", _describe(e)) from e


def decode_depth(frame: Frame) -> DepthDiff:
    try:
        return DepthDiff.model_validate_json(frame, context=WIRE_CONTEXT, by_alias=True, by_name=False)
    except ValidationError as e:
        raise DecodeError("depth update", _describe(e)) from e


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or '<frame>'}: {err['msg']}"
        for err in error.errors()
    )
