import os
from decimal import Decimal

from lndpay.lib.data_types import Channel, ChannelPayment, Invoice, Limits
from lndpay.lib.exceptions import PaymentFailure

# testing base folder
test_dir = os.path.dirname(os.path.realpath(__file__))
bin_dir = os.path.join(test_dir, 'bin')
graph_definitions_dir = os.path.join(test_dir, 'graph_definitions')
test_data_dir = os.path.join(test_dir, 'test_data')

test_graphs_paths = {
    'star_3': os.path.join(graph_definitions_dir, 'star_3.py'),
}

MIN_PAYMENT_AMOUNT = Decimal('0.00006')
SATOSHI_PRECISION = 8


def d(amount: str) -> Decimal:
    return Decimal(amount)


def channel(id, point, local, node='', local_reserved='0') -> Channel:
    return Channel(
        id=id,
        channel_point=point,
        node=node,
        local_balance=d(local),
        local_reserved=d(local_reserved),
    )


def payment(id, point, amount) -> ChannelPayment:
    return ChannelPayment(id=id, channel_point=point, node='', amount=d(amount))


class FakeNode(object):
    """Stands in for an lnd node, payments over failing channels fail."""

    def __init__(self, channels, failing_channel_ids=()):
        self.channels = channels
        self.failing_channel_ids = set(failing_channel_ids)
        self.payments = []

    def list_active_channels(self):
        return list(self.channels)

    def pay(self, payment_request, amount, channel_id):
        if channel_id in self.failing_channel_ids:
            raise PaymentFailure("unable to find a path to destination")
        self.payments.append((payment_request, amount, channel_id))


class FakeSettlement(object):
    """Stands in for the settlement api, issues an invoice per channel
    point."""

    def __init__(self, min_payment_amount=MIN_PAYMENT_AMOUNT,
                 channel_reserve_multiplier=Decimal(1),
                 addresses=(), skipped_channel_points=()):
        self._limits = Limits(
            min_payment_amount=min_payment_amount,
            channel_reserve_multiplier=channel_reserve_multiplier,
        )
        self.addresses = list(addresses)
        self.skipped_channel_points = set(skipped_channel_points)
        self.issued = []

    def limits(self):
        return self._limits

    def remote_addresses(self):
        return self.addresses

    def issue_invoices(self, account_id, channel_points):
        self.issued.append((account_id, list(channel_points)))
        return [Invoice(
            channel_point=p,
            payment_request=f'lnbcrt{account_id}{p}',
            node_id='settlement',
        ) for p in channel_points if p not in self.skipped_channel_points]
