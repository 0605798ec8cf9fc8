from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from .wire import DecimalString


class Trade(BaseModel):
    """
    A completed trade from the ``<symbol>@trade`` stream.

    Wire format (https://binance-docs.github.io/apidocs/spot/en/#trade-streams):

        {
          "e": "trade",     // Event type
          "E": 123456789,   // Event time
          "s": "BNBBTC",    // Symbol
          "t": 12345,       // Trade ID
          "p": "0.001",     // Price
          "q": "100",       // Quantity
          "b": 88,          // Buyer order ID
          "a": 50,          // Seller order ID
          "T": 123456785,   // Trade time
          "m": true,        // Is the buyer the market maker?
          "M": true         // Ignore
        }
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["trade"] = Field(alias="e")
    event_time: StrictInt = Field(alias="E")
    symbol: Optional[str] = Field(default=None, alias="s")
    id: StrictInt = Field(alias="t")
    price: DecimalString = Field(alias="p")
    quantity: DecimalString = Field(alias="q")
    buyer_order_id: StrictInt = Field(alias="b")
    seller_order_id: StrictInt = Field(alias="a")
    trade_time: StrictInt = Field(alias="T")
    is_buyer_maker: bool = Field(default=False, alias="m")
