"""Client of the settlement api, which issues invoices for channels."""
from datetime import datetime, timezone
from decimal import Decimal
import json
from typing import List, Optional, Dict
import urllib.request
from urllib.error import HTTPError, URLError
from urllib.parse import urljoin

from lndpay.lib.data_types import Invoice, Limits
from lndpay.lib.exceptions import SettlementAPIError
from lndpay import settings

import logging
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def _decimal(value, default: Optional[Decimal] = None) -> Decimal:
    # amounts may be encoded as json strings or numbers
    if value is None:
        if default is None:
            raise SettlementAPIError("missing amount in response")
        return default
    return Decimal(str(value))


class SettlementClient(object):
    """Talks json to the settlement api."""

    def __init__(self, api_url: str, headers: Optional[Dict[str, str]] = None,
                 timeout: float = settings.REQUEST_TIMEOUT_SEC):
        """
        :param api_url: base url, relative paths are resolved against it
        :param headers: additional headers sent with every request
        :param timeout: request timeout in seconds
        """
        if not api_url:
            raise ValueError("api url is not specified")
        # urljoin drops the last path segment without a trailing slash
        self.api_url = api_url if api_url.endswith('/') else api_url + '/'
        self.headers = headers or {}
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> 'SettlementClient':
        return cls(config['settlement']['api_url'])

    def _call(self, path: str, method: str = 'GET', body=None):
        url = urljoin(self.api_url, path)
        data = None
        headers = {'Accept': 'application/json'}
        headers.update(self.headers)
        if body is not None:
            data = json.dumps(body).encode('utf-8')
            headers['Content-Type'] = 'application/json'

        request = urllib.request.Request(
            url, data=data, headers=headers, method=method)
        logger.debug(f"{method} {url}")
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                text = response.read().decode('utf-8')
        except HTTPError as e:
            raise SettlementAPIError(f"{e.code} {e.reason}") from e
        except URLError as e:
            raise SettlementAPIError(
                f"{e.reason} on performing {method} request to {url}") from e

        try:
            result = json.loads(text, parse_float=Decimal)
        except ValueError as e:
            raise SettlementAPIError(f"{e} on reading response") from e

        if isinstance(result, dict) and result.get('error'):
            raise SettlementAPIError(result['error'])
        return result

    def limits(self) -> Limits:
        """Returns the payment limits of the settlement api."""
        response = self._call('limits')
        return Limits(
            min_payment_amount=_decimal(response.get('minPaymentAmount')),
            min_channel_capacity=_decimal(
                response.get('minChannelCapacity'), Decimal(0)),
            channel_reserve_multiplier=_decimal(
                response.get('channelReserveMultiplier'),
                settings.DEFAULT_CHANNEL_RESERVE_MULTIPLIER),
        )

    def remote_addresses(self) -> List[str]:
        """Returns the addresses (pubkey@host) of the settlement nodes."""
        response = self._call('addresses')
        return [a['address'] for a in response]

    def issue_invoices(self, account_id: int,
                       channel_points: List[str]) -> List[Invoice]:
        """
        Issues an invoice to be paid via each of the channel points.

        :param account_id: account to be credited
        :param channel_points: channel points the invoices are paid through
        :return: invoices
        :raises SettlementAPIError:
        """
        body = {
            'externalId': str(datetime.now(timezone.utc)),
            'chanPoints': list(channel_points),
        }
        response = self._call(
            f'accounts/{account_id}/invoices', method='POST', body=body)
        return [Invoice(
            channel_point=i['chanPoint'],
            payment_request=i['paymentRequest'],
            node_id=i['nodeId'],
        ) for i in response]
