import codecs
from datetime import datetime, timezone
from decimal import Decimal
import os
from typing import List, Optional

import grpc

import lndpay.grpc_compiled.lightning_pb2 as lnd
import lndpay.grpc_compiled.lightning_pb2_grpc as lndrpc
from lndpay.lib.configure import check_or_create_configuration
from lndpay.lib.data_types import Channel, PaymentRecord
from lndpay.lib.exceptions import PaymentFailure, RPCError
from lndpay.lib.ln_utilities import (
    btc_to_satoshi,
    convert_channel_id_to_short_channel_id,
    satoshi_to_btc,
)
from lndpay import settings

import logging
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class LndNode:
    """Implements a synchronous interface to an lnd node, providing the
    channel snapshots and executing channel payments."""
    _rpc: lndrpc.LightningStub
    _sync_channel: Optional[grpc.Channel] = None

    def __init__(self, config_file: Optional[str] = None,
                 lnd_home: Optional[str] = None,
                 lnd_host: Optional[str] = None, regtest=False):
        """
        :param config_file: path to the config file
        :param lnd_home: path to lnd home folder
        :param lnd_host: lnd host of format "127.0.0.1:10009"
        :param regtest: if the node is representing a regtest node
        """
        self.lnd_home = lnd_home
        self.lnd_host = lnd_host
        self.regtest = regtest

        # if lnd_home is given, the default file paths within lnd_home are
        # used, else the paths from the config
        if self.lnd_home is not None:
            if self.lnd_host is None:
                raise ValueError('if lnd_home is given, lnd_host must be given')
            self.config_file = None
            self.config = None
            self.cert_file_path = os.path.join(self.lnd_home, 'tls.cert')
            bitcoin_network = 'regtest' if self.regtest else 'mainnet'
            self.macaroon_file_path = os.path.join(
                self.lnd_home, 'data/chain/bitcoin/',
                bitcoin_network, 'admin.macaroon')
        else:
            if config_file is None:
                check_or_create_configuration(settings.home_dir)
                config_file = settings.config_path()
            self.config_file = config_file
            self.config = settings.read_config(self.config_file)
            self.cert_file_path = os.path.expanduser(
                self.config['network']['tls_cert_file'])
            self.macaroon_file_path = os.path.expanduser(
                self.config['network']['admin_macaroon_file'])
            self.lnd_host = self.config['network']['lnd_grpc_host']

    def get_rpc_credentials(self) -> grpc.ChannelCredentials:
        # read the tls certificate
        try:
            with open(self.cert_file_path, 'rb') as f:
                cert = f.read()
        except FileNotFoundError:
            logger.error("tls.cert not found, please configure %s.",
                         self.config_file)
            raise

        # read the macaroon
        try:
            with open(self.macaroon_file_path, 'rb') as f:
                macaroon_bytes = f.read()
                macaroon = codecs.encode(macaroon_bytes, 'hex')
        except FileNotFoundError:
            logger.error("admin.macaroon not found, please configure %s.",
                         self.config_file)
            raise

        def metadata_callback(context, callback):
            callback([('macaroon', macaroon)], None)

        cert_creds = grpc.ssl_channel_credentials(cert)
        auth_creds = grpc.metadata_call_credentials(metadata_callback)

        return grpc.composite_channel_credentials(cert_creds, auth_creds)

    def connect(self):
        logger.debug("Connecting to lnd at %s.", self.lnd_host)
        self._sync_channel = grpc.secure_channel(
            self.lnd_host, self.get_rpc_credentials(),
            options=[('grpc.max_receive_message_length', 50 * 1024 * 1024)])
        self._rpc = lndrpc.LightningStub(self._sync_channel)

    def close(self):
        if self._sync_channel is not None:
            logger.debug("Disconnecting from lnd.")
            channel = self._sync_channel
            self._sync_channel = None
            channel.close()

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @staticmethod
    def _to_channel(c, status: str) -> Channel:
        return Channel(
            id=c.chan_id,
            channel_point=c.channel_point,
            node=c.remote_pubkey,
            local_balance=satoshi_to_btc(c.local_balance),
            capacity=satoshi_to_btc(c.capacity),
            remote_balance=satoshi_to_btc(c.remote_balance),
            local_reserved=satoshi_to_btc(c.local_chan_reserve_sat),
            status=status,
        )

    def _list_channels(self, **kwargs):
        try:
            response = self._rpc.ListChannels(
                lnd.ListChannelsRequest(**kwargs),
                timeout=settings.GRPC_TIMEOUT_SEC)
        except grpc.RpcError as e:
            raise RPCError(f"Error {e} on getting channels list") from e
        return response.channels

    def list_active_channels(self) -> List[Channel]:
        """
        Fetches the active channels of the node.

        :return: channel snapshots, balances in BTC
        :raises RPCError: lnd could not be queried
        """
        return [self._to_channel(c, 'active')
                for c in self._list_channels(active_only=True)]

    def list_channels(self) -> List[Channel]:
        """Fetches active and inactive open channels."""
        channels = self.list_active_channels()
        channels.extend(self._to_channel(c, 'inactive')
                        for c in self._list_channels(inactive_only=True))
        return channels

    def pay(self, payment_request: str, amount: Decimal, channel_id: int):
        """
        Pays a payment request with amount through the channel channel_id.

        :param payment_request: bolt11 payment request
        :param amount: amount in BTC, truncated to satoshis
        :param channel_id: outgoing channel id
        :raises PaymentFailure: lnd reports a payment error
        :raises RPCError: lnd could not be reached
        """
        amount_sat = btc_to_satoshi(amount)
        logger.debug(
            "Paying %s sat via channel %s (%sx%sx%s).", amount_sat, channel_id,
            *convert_channel_id_to_short_channel_id(channel_id))
        request = lnd.SendRequest(
            payment_request=payment_request,
            amt=amount_sat,
            outgoing_chan_id=channel_id,
        )
        try:
            response = self._rpc.SendPaymentSync(
                request, timeout=settings.PAYMENT_TIMEOUT_SEC)
        except grpc.RpcError as e:
            raise RPCError(f"Error {e} on sending payment") from e
        if response.payment_error:
            raise PaymentFailure(response.payment_error)
        return response

    def list_payments(self, offset: int = 0,
                      limit: int = 10) -> List[PaymentRecord]:
        """
        Lists the node's payments, newest first.

        :param offset: number of newest payments to skip
        :param limit: maximal number of payments returned
        :raises RPCError: lnd could not be queried
        """
        if offset < 0 or limit < 0:
            raise ValueError("offset and limit must not be negative")
        try:
            response = self._rpc.ListPayments(
                lnd.ListPaymentsRequest(), timeout=settings.GRPC_TIMEOUT_SEC)
        except grpc.RpcError as e:
            raise RPCError(f"Error {e} on getting payments list") from e

        payments = sorted(response.payments, key=lambda p: p.creation_date,
                          reverse=True)
        return [
            PaymentRecord(
                node=p.path[0] if p.path else '',
                timestamp=datetime.fromtimestamp(p.creation_date, timezone.utc),
                amount=satoshi_to_btc(p.value_sat),
                payment_hash=p.payment_hash,
            )
            for p in payments[offset:offset + limit]
        ]
