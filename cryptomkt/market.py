"""Market facade.

A Market binds a CryptoMktApi to a market name (e.g. "ETHCLP") and exposes
the market data and order operations of that market.
"""

import logging

from cryptomkt.api import CryptoMktApi
from cryptomkt.errors import MalformedResource
from cryptomkt.types import (
    Book,
    MarketName,
    NumericInput,
    Order,
    OrdersInstant,
    OrderState,
    OrderType,
    Params,
    RequestMethod,
    Ticker,
    Trade,
    full_precision_string,
)

log = logging.getLogger(__name__)


class Market:
    """Access to a single market of the exchange.

    Examples:
        .. code-block:: python

            from cryptomkt import CryptoMktClient, OrderType

            client = CryptoMktClient("<API Key>", "<Secret Key>")
            market = client.create_market("ETHCLP")
            print(market.get_current_ticker())
            print(market.get_orders_book(OrderType.BUY))

    """

    def __init__(self, api: CryptoMktApi, name: MarketName):
        self._api = api
        self._name = name

    def __repr__(self) -> str:
        return f"Market({self._name!r})"

    @property
    def name(self) -> MarketName:
        return self._name

    def get_name(self) -> MarketName:
        return self._name

    ### ------------------------------------------------ Public ------------------------------------------------

    def get_current_ticker(self) -> Ticker:
        """Get the current state of the market.

        Returns:
            Ticker: High, low, ask, bid, last price and volume

        Raises:
            MalformedResource: If the exchange returns no ticker for this market

        Endpoint:
            GET /v1/ticker

        """
        response = self._api.call(
            RequestMethod.GET,
            "ticker",
            {"market": self._name},
            list[Ticker],
            is_public=True,
        )
        if not response.data:
            raise MalformedResource(f"No ticker returned for market {self._name}")
        return response.data[0]

    def get_orders_book(
        self, order_type: OrderType, page: int = 0, limit: int = 20
    ) -> list[Book]:
        """Get the active orders of one side of the order book.

        Endpoint:
            GET /v1/book

        """
        params = self.__page_params(page, limit)
        params["type"] = order_type.value
        return self._api.call(
            RequestMethod.GET, "book", params, list[Book], is_public=True
        ).data

    def get_trades(
        self, start: str, end: str, page: int = 0, limit: int = 20
    ) -> list[Trade]:
        """Get the trades executed between two dates (``YYYY-MM-DD``).

        Endpoint:
            GET /v1/trades

        """
        params = self.__page_params(page, limit)
        params["start"] = start
        params["end"] = end
        return self._api.call(
            RequestMethod.GET, "trades", params, list[Trade], is_public=True
        ).data

    ### ------------------------------------------------ Orders ------------------------------------------------

    def get_user_orders_by_state(
        self, state: OrderState, page: int = 0, limit: int = 20
    ) -> list[Order]:
        """Get the active or executed orders owned by the credentials.

        Endpoint:
            GET /v1/orders/active
            GET /v1/orders/executed

        """
        return self._api.call(
            RequestMethod.GET,
            state.endpoint,
            self.__page_params(page, limit),
            list[Order],
        ).data

    def create_order(
        self, order_type: OrderType, amount: NumericInput, price: NumericInput
    ) -> Order:
        """Place a limit order.

        Args:
            order_type: OrderType.BUY or OrderType.SELL
            amount: Amount of crypto currency
            price: Limit price

        Returns:
            Order: The created order

        Endpoint:
            POST /v1/orders/create

        """
        params = {
            "market": self._name,
            "amount": full_precision_string(amount),
            "price": full_precision_string(price),
            "type": order_type.value,
        }
        order = self._api.call(RequestMethod.POST, "orders/create", params, Order).data
        log.info("Created %s order %s on %s", order_type.value, order.id, self._name)
        return order

    def get_order_status(self, order_id: str) -> Order:
        """Get the status of an order.

        Endpoint:
            GET /v1/orders/status

        """
        return self._api.call(
            RequestMethod.GET, "orders/status", {"id": order_id}, Order
        ).data

    def cancel_order(self, order_id: str) -> Order:
        """Cancel an order.

        Endpoint:
            POST /v1/orders/cancel

        """
        order = self._api.call(
            RequestMethod.POST, "orders/cancel", {"id": order_id}, Order
        ).data
        log.info("Cancelled order %s on %s", order_id, self._name)
        return order

    ### ------------------------------------------------ Instant Exchange ------------------------------------------------

    def get_order_instant(
        self, order_type: OrderType, amount: NumericInput
    ) -> OrdersInstant:
        """Get a quote for an Instant Exchange order.

        Endpoint:
            GET /v1/orders/instant/get

        """
        return self._api.call(
            RequestMethod.GET,
            "orders/instant/get",
            self.__instant_params(order_type, amount),
            OrdersInstant,
        ).data

    def create_order_instant(self, order_type: OrderType, amount: NumericInput) -> str:
        """Buy or sell on the Instant Exchange.

        Endpoint:
            POST /v1/orders/instant/create

        """
        return self._api.call(
            RequestMethod.POST,
            "orders/instant/create",
            self.__instant_params(order_type, amount),
            str,
        ).data

    """ Private helpers """

    def __page_params(self, page: int, limit: int) -> Params:
        return {"market": self._name, "page": str(int(page)), "limit": str(int(limit))}

    def __instant_params(self, order_type: OrderType, amount: NumericInput) -> Params:
        return {
            "market": self._name,
            "amount": full_precision_string(amount),
            "type": order_type.value,
        }
