"""Module for sending payments to the settlement api via open channels."""
import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from lndpay.lib.allocation import ChannelPaymentAllocator
from lndpay.lib.data_types import ChannelPayment, PaymentResult
from lndpay.lib.exceptions import (
    AllocationError,
    AmountBelowMinimum,
    ChannelBalanceExceeded,
    ChannelNotFound,
    ForeignChannel,
    FundChannelsError,
    PaymentError,
    RPCError,
    SettlementAPIError,
)
from lndpay.lib.ln_utilities import SATOSHI_PRECISION, parse_channel_point
from lndpay import settings

if TYPE_CHECKING:
    from lndpay.lib.node import LndNode
    from lndpay.lib.settlement import SettlementClient

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class PaymentSender(object):
    """Pays amounts to an account of the settlement api."""

    def __init__(self, node: 'LndNode', settlement: 'SettlementClient',
                 round_precision: int = settings.ROUND_PRECISION):
        """
        :param node: provides channels and executes payments
        :param settlement: issues invoices and reports limits
        :param round_precision: fractional digits of channel payments
        """
        if round_precision > SATOSHI_PRECISION:
            raise ValueError(
                f"round precision {round_precision} is finer than satoshis, "
                f"lnd is paid in whole satoshis")
        self.node = node
        self.settlement = settlement
        self.round_precision = round_precision

    @staticmethod
    def _check_request(account_id: int, amount: Decimal):
        if account_id <= 0:
            raise ValueError("Invalid account")
        if not isinstance(amount, Decimal) or amount <= 0:
            raise ValueError(f"Invalid amount value {amount}")

    def send(self, account_id: int, amount: Decimal) -> PaymentResult:
        """
        Pays amount to account_id, split between all active channels.

        Every channel payment is executed independently, a failed channel
        payment doesn't stop the others and is reported in the result's
        errors.

        :param account_id: account of the settlement api
        :param amount: total amount in BTC
        :return: successful and failed channel payments

        :raises AmountBelowMinimum: amount is below the api's payment floor
        :raises FundChannelsError: amount can't be split between the channels
        :raises SettlementAPIError: limits or invoices couldn't be fetched
        :raises RPCError: channels couldn't be fetched
        """
        self._check_request(account_id, amount)

        limits = self.settlement.limits()
        if amount < limits.min_payment_amount:
            raise AmountBelowMinimum(amount, limits.min_payment_amount)

        channels = self.node.list_active_channels()
        allocator = ChannelPaymentAllocator(
            limits.min_payment_amount, self.round_precision)
        try:
            channel_payments = allocator.fund_payment(amount, channels)
        except AllocationError as e:
            raise FundChannelsError(
                e, limits.min_payment_amount,
                allocator.funding_channels(channels)) from e

        logger.info(f">>> Paying {amount} BTC to account {account_id} via "
                    f"{len(channel_payments)} channel(s).")

        invoices = self.settlement.issue_invoices(
            account_id, [p.channel_point for p in channel_payments])
        invoices = {i.channel_point: i for i in invoices}

        result = PaymentResult()
        for payment in channel_payments:
            invoice = invoices.get(payment.channel_point)
            if invoice is None:
                payment.error = (f"No invoice was issued for channel "
                                 f"{payment.channel_point}")
                logger.info(f"  > {payment}: {payment.error}")
                result.errors.append(payment)
                continue
            try:
                self.node.pay(invoice.payment_request, payment.amount,
                              payment.id)
            except (PaymentError, RPCError) as e:
                payment.error = (
                    f"Error {e} on sending payment on {payment.amount} to "
                    f"{invoice.node_id} {payment.channel_point}")
                logger.info(f"  > {payment}: failed")
                logger.debug(payment.error)
                result.errors.append(payment)
            else:
                logger.info(f"  > {payment}: paid")
                result.successful.append(payment)

        logger.info(f">>> Sent {result.amount_sent} of {amount} BTC, "
                    f"{len(result.errors)} channel payment(s) failed.")
        return result

    def send_via_channel(self, account_id: int, amount: Decimal,
                         channel_id: Optional[int] = None,
                         channel_point: Optional[str] = None) \
            -> ChannelPayment:
        """
        Pays amount to account_id through a single channel, identified by
        channel_id or channel_point.

        :raises ChannelNotFound: the channel is not an active channel
        :raises ForeignChannel: the channel's peer is no settlement node
        :raises AmountBelowMinimum: amount is below the api's payment floor
        :raises ChannelBalanceExceeded: the channel can't afford the amount
            keeping its reserve
        :raises PaymentFailure: the payment failed
        """
        self._check_request(account_id, amount)
        if not channel_id and not channel_point:
            raise ValueError("Either channel id or channel point required")
        if channel_point:
            parse_channel_point(channel_point)

        channels = self.node.list_active_channels()
        for c in channels:
            if (channel_id and c.id == channel_id) or \
                    (channel_point and c.channel_point == channel_point):
                channel = c
                break
        else:
            raise ChannelNotFound(
                f"Channel {channel_point or channel_id} not found")

        # the channel needs to be with one of the settlement nodes
        addresses = self.settlement.remote_addresses()
        if not any(channel.node in a for a in addresses):
            raise ForeignChannel(
                "Specified channel should be an open active channel with a "
                "settlement node")

        limits = self.settlement.limits()
        if amount < limits.min_payment_amount:
            raise AmountBelowMinimum(amount, limits.min_payment_amount)

        reserved = channel.local_reserved * limits.channel_reserve_multiplier
        if amount > channel.local_balance - reserved:
            raise ChannelBalanceExceeded(amount, channel.local_balance, reserved)

        invoices = self.settlement.issue_invoices(
            account_id, [channel.channel_point])
        if not invoices:
            raise SettlementAPIError(
                "No invoices were returned from issuing invoices")
        invoice = invoices[0]

        payment = ChannelPayment.from_channel(channel, amount)
        logger.info(f">>> Paying {amount} BTC to account {account_id} via "
                    f"channel {channel.channel_point}.")
        self.node.pay(invoice.payment_request, amount, channel.id)
        return payment
