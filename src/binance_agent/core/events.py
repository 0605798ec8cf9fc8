from dataclasses import dataclass
from enum import Enum

from binance_agent.models import DepthDiff


class Side(str, Enum):
    BID = "bid"
    ASK = "ask"


@dataclass(frozen=True)
class BookLevelUpdate:
    side: Side
    event_time: int
    price: float
    quantity: float

    @property
    def is_removal(self) -> bool:
        return self.quantity == 0


def level_updates(diff: DepthDiff, side: Side) -> list[BookLevelUpdate]:
    """Split one side of a depth diff into level updates, in wire order."""
    entries = diff.bids if side is Side.BID else diff.asks
    return [
        BookLevelUpdate(side=side, event_time=diff.event_time, price=e.price, quantity=e.quantity)
        for e in entries
    ]
