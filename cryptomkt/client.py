"""High level CryptoMkt client.

Examples:
    .. code-block:: python

        from cryptomkt import CryptoMktClient

        client = CryptoMktClient("<API Key>", "<Secret Key>")
        for market in client.get_markets():
            print(market.name, market.get_current_ticker())

"""

import logging

from cryptomkt.api import CryptoMktApi
from cryptomkt.executors import HttpExecutor
from cryptomkt.helpers import DEFAULT_DOMAIN
from cryptomkt.market import Market
from cryptomkt.types import (
    Balance,
    MarketName,
    NumericInput,
    Payment,
    PaymentOrderRequest,
    Params,
    RequestMethod,
)

log = logging.getLogger(__name__)


class CryptoMktClient:
    """Entry point for market discovery, balances and payment orders."""

    def __init__(
        self,
        api_key: str | None = None,
        secret_key: str | None = None,
        executor: HttpExecutor | None = None,
        domain: str = DEFAULT_DOMAIN,
    ):
        """Initialize the client.

        Args:
            api_key: API key (only needed for private endpoints)
            secret_key: Secret key (only needed for private endpoints)
            executor: Custom HTTP executor (optional, uses default if not provided)
            domain: Base URL of the API

        """
        self._api = CryptoMktApi(
            api_key=api_key, secret_key=secret_key, executor=executor, domain=domain
        )

    @property
    def api(self) -> CryptoMktApi:
        return self._api

    def get_markets(self) -> list[Market]:
        """List the markets available on the exchange.

        Endpoint:
            GET /v1/market

        """
        names = self._api.call(
            RequestMethod.GET, "market", {}, list[MarketName], is_public=True
        ).data
        return [Market(self._api, name) for name in names]

    def create_market(self, name: MarketName) -> Market:
        """Return the Market facade for ``name`` without contacting the exchange."""
        return Market(self._api, name)

    def get_balance(self) -> list[Balance]:
        """Get the available and accounted balance of every wallet.

        Endpoint:
            GET /v1/balance

        """
        return self._api.call(RequestMethod.GET, "balance", {}, list[Balance]).data

    def create_payment_order(
        self,
        to_receive: NumericInput,
        to_receive_currency: str,
        payment_receiver: str,
        external_id: str | None = None,
        callback_url: str | None = None,
        error_url: str | None = None,
        success_url: str | None = None,
        refund_email: str | None = None,
    ) -> Payment:
        """Create a payment order, returning its QR and payment URLs.

        Args:
            to_receive: Amount to receive
            to_receive_currency: Currency of ``to_receive``
            payment_receiver: Email of the account receiving the payment
            external_id: Caller reference
            callback_url: URL notified on every status change
            error_url: Redirect URL on error
            success_url: Redirect URL on success
            refund_email: Contact email for refunds

        Endpoint:
            POST /v1/payment/new_order

        """
        request = PaymentOrderRequest(
            to_receive=to_receive,
            to_receive_currency=to_receive_currency,
            payment_receiver=payment_receiver,
            external_id=external_id,
            callback_url=callback_url,
            error_url=error_url,
            success_url=success_url,
            refund_email=refund_email,
        )
        payment = self._api.call(
            RequestMethod.POST, "payment/new_order", request.to_params(), Payment
        ).data
        log.info("Created payment order %s", payment.id)
        return payment

    def payment_order_status(self, payment_id: str | int) -> Payment:
        """Get the status of a payment order.

        Endpoint:
            GET /v1/payment/status

        """
        return self._api.call(
            RequestMethod.GET, "payment/status", {"id": str(payment_id)}, Payment
        ).data

    def get_payment_orders(
        self,
        start_date: str,
        end_date: str,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[Payment]:
        """List the payment orders created between two dates (``DD/MM/YYYY``).

        Endpoint:
            GET /v1/payment/orders

        """
        params: Params = {"start_date": start_date, "end_date": end_date}
        if page is not None:
            params["page"] = str(page)
        if limit is not None:
            params["limit"] = str(limit)
        return self._api.call(
            RequestMethod.GET, "payment/orders", params, list[Payment]
        ).data
