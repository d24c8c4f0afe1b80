"""Contains Lightning network specific conversion utilities."""
from decimal import Decimal
from typing import Tuple

import re

import logging
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

SATOSHIS_PER_BTC = 100_000_000
# fractional digits of a BTC amount in whole satoshis
SATOSHI_PRECISION = 8


def satoshi_to_btc(amount_sat: int) -> Decimal:
    return Decimal(amount_sat).scaleb(-8)


def btc_to_satoshi(amount_btc: Decimal) -> int:
    """Converts a BTC amount to satoshi, fractions of a satoshi are
    truncated."""
    return int(amount_btc * SATOSHIS_PER_BTC)


def convert_channel_id_to_short_channel_id(channel_id):
    """
    Converts a channel id to blockheight, transaction, output
    """
    return channel_id >> 40, channel_id >> 16 & 0xFFFFFF, channel_id & 0xFFFF


def parse_channel_point(channel_point: str) -> Tuple[str, int]:
    """Splits a channel point of the form txid:output_index.

    :raises ValueError: if the channel point is malformed
    """
    parts = channel_point.split(':')
    if len(parts) != 2:
        raise ValueError(f"invalid channel point format: {channel_point}")
    funding_txid, output_index = parts
    if re.match("^[0-9a-fA-F]{64}$", funding_txid) is None:
        raise ValueError(f"invalid funding txid: {funding_txid}")
    try:
        output_index = int(output_index)
    except ValueError:
        raise ValueError(f"unable to decode output index: {output_index}")
    if output_index < 0:
        raise ValueError(f"unable to decode output index: {output_index}")
    return funding_txid, output_index
