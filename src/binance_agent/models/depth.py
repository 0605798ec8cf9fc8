from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationInfo, model_validator

from .wire import DecimalString, is_wire


class BookEntry(BaseModel):
    """One price level. A quantity of zero means the level was removed."""

    model_config = ConfigDict(frozen=True)

    price: DecimalString
    quantity: DecimalString

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data: Any, info: ValidationInfo) -> Any:
        # On the wire each level is ["price", "quantity"], never an object
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError(f"wrong number of fields in book entry: {len(data)} != 2")
            return {"price": data[0], "quantity": data[1]}
        if is_wire(info):
            raise ValueError("book entry must be a [price, quantity] array")
        return data

    @property
    def is_removal(self) -> bool:
        return self.quantity == 0


class DepthDiff(BaseModel):
    """
    Order book changes since the previous ``<symbol>@depth@100ms`` event.

    Wire format (https://binance-docs.github.io/apidocs/spot/en/#diff-depth-stream):

        {
          "e": "depthUpdate", // Event type
          "E": 123456789,     // Event time
          "s": "BNBBTC",      // Symbol
          "U": 157,           // First update ID in event
          "u": 160,           // Final update ID in event
          "b": [["0.0024", "10"]],   // Bids to be updated
          "a": [["0.0026", "100"]]   // Asks to be updated
        }
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["depthUpdate"] = Field(alias="e")
    event_time: StrictInt = Field(alias="E")
    symbol: Optional[str] = Field(default=None, alias="s")
    first_update_id: Optional[StrictInt] = Field(default=None, alias="U")
    last_update_id: StrictInt = Field(alias="u")
    bids: tuple[BookEntry, ...] = Field(alias="b")
    asks: tuple[BookEntry, ...] = Field(alias="a")
