"""
Module for funding a payment between several open channels.

A payment is split into per channel payments which are proportional to the
local balances of the channels. Channels with a local balance below the
minimal payment amount don't take part. The channel with the highest local
balance receives the rounding remainder.
"""
import logging
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Iterable, List, Optional

from lndpay.lib.data_types import Channel, ChannelPayment
from lndpay.lib.exceptions import (
    InsufficientBalance,
    LastChannelInsufficientBalance,
    NoTerminalChannelFound,
    ShareExceedsChannelBalance,
)
from lndpay import settings

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class Mode(Enum):
    PROPORTIONAL = 0
    TERMINAL_SEARCH = 1
    COMPLETED = 2


def _check_decimal(value, name):
    if not isinstance(value, Decimal):
        raise TypeError(f"{name} must be a Decimal, got {type(value).__name__}")


class ChannelPaymentAllocator(object):
    """Selects channels with exact amounts to pay."""

    def __init__(self, min_payment_amount: Decimal,
                 round_precision: int = settings.ROUND_PRECISION):
        """
        :param min_payment_amount: smallest amount a single channel is asked
            to pay
        :param round_precision: number of fractional digits proportional
            shares are rounded to
        """
        _check_decimal(min_payment_amount, 'min payment amount')
        if min_payment_amount <= 0:
            raise ValueError("min payment amount must be positive")
        if round_precision < 0:
            raise ValueError("round precision must not be negative")
        self.min_payment_amount = min_payment_amount
        self.double_min_payment_amount = 2 * min_payment_amount
        self.round_precision = round_precision
        self._quantum = Decimal(1).scaleb(-round_precision)

    def funding_channels(self, channels: Iterable[Channel]) -> List[Channel]:
        """Returns a new list of the channels which can carry at least the
        minimal payment amount, ordered ascending by local balance."""
        eligible = [c for c in channels
                    if c.local_balance >= self.min_payment_amount]
        # sorted is stable, equal balances keep the input order
        return sorted(eligible, key=lambda c: c.local_balance)

    def _mode(self, amount_left: Decimal) -> Mode:
        if amount_left == 0:
            return Mode.COMPLETED
        if amount_left < self.double_min_payment_amount:
            return Mode.TERMINAL_SEARCH
        return Mode.PROPORTIONAL

    def _share(self, amount: Decimal, amount_left: Decimal,
               channel: Channel, total_local: Decimal) -> Decimal:
        share = (amount * channel.local_balance / total_local).quantize(
            self._quantum, rounding=ROUND_HALF_UP)
        if share < self.min_payment_amount:
            share = self.min_payment_amount
        # clamped shares of smaller channels may have used up more than their
        # proportion, then at least the minimum stays for the next channels
        if share > amount_left:
            share = amount_left - self.min_payment_amount
        if share > channel.local_balance:
            raise ShareExceedsChannelBalance(
                channel.channel_point, channel.local_balance, share)
        return share

    @staticmethod
    def _terminal_channel(channels: List[Channel],
                          amount_left: Decimal) -> Optional[Channel]:
        for channel in channels:
            if channel.local_balance >= amount_left:
                return channel
        return None

    def fund_payment(self, amount: Decimal,
                     channels: Iterable[Channel]) -> List[ChannelPayment]:
        """
        Funds a payment between the channels with a local balance of at
        least the minimal payment amount.

        Channels are funded smallest local balance first with their share
        amount * local_balance / total_local, rounded to round_precision and
        raised to the minimal payment amount if smaller. Once less than twice
        the minimal payment amount is left, the rest is paid by a single
        channel that can afford it. The last channel pays whatever is left.

        :param amount: total amount to pay
        :param channels: snapshot of the open channels, is not modified
        :return: channel payments summing up to amount

        :raises InsufficientBalance: total local balance is less than amount
        :raises NoTerminalChannelFound: no channel can pay the small rest
        :raises LastChannelInsufficientBalance: last channel can't pay the
            rest
        :raises ShareExceedsChannelBalance: a share is larger than the
            channel's local balance
        """
        _check_decimal(amount, 'amount')
        if amount <= 0:
            raise ValueError(f"amount must be positive, got {amount}")

        funding_channels = self.funding_channels(channels)
        total_local = sum(
            (c.local_balance for c in funding_channels), Decimal(0))
        if amount > total_local:
            raise InsufficientBalance(total_local, amount)

        payments = []
        amount_left = amount
        position = 0
        last_position = len(funding_channels) - 1

        mode = self._mode(amount_left)
        while mode is not Mode.COMPLETED:
            if mode is Mode.TERMINAL_SEARCH:
                channel = self._terminal_channel(
                    funding_channels[position:], amount_left)
                if channel is None:
                    raise NoTerminalChannelFound(amount_left)
                payment_amount = amount_left
            else:
                channel = funding_channels[position]
                if position < last_position:
                    payment_amount = self._share(
                        amount, amount_left, channel, total_local)
                else:
                    # the channel with the highest local balance takes the rest
                    if amount_left > channel.local_balance:
                        raise LastChannelInsufficientBalance(
                            channel.local_balance, amount_left)
                    payment_amount = amount_left
                position += 1

            payments.append(ChannelPayment.from_channel(channel, payment_amount))
            amount_left -= payment_amount
            mode = self._mode(amount_left)

        logger.debug(f"Funded {amount} with {len(payments)} channel payments:")
        for payment in payments:
            logger.debug(f"    {payment}")

        return payments


def allocate(amount: Decimal, channels: Iterable[Channel],
             min_payment_amount: Decimal,
             round_precision: int = settings.ROUND_PRECISION) \
        -> List[ChannelPayment]:
    """Funds amount between channels, see
    :meth:`ChannelPaymentAllocator.fund_payment`."""
    allocator = ChannelPaymentAllocator(min_payment_amount, round_precision)
    return allocator.fund_payment(amount, channels)
