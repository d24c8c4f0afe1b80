"""Tests for paying the settlement api via several channels."""
from decimal import Decimal
from unittest import TestCase

from lndpay.lib.exceptions import (
    AmountBelowMinimum,
    ChannelBalanceExceeded,
    ChannelNotFound,
    ForeignChannel,
    FundChannelsError,
    InsufficientBalance,
    NoTerminalChannelFound,
    PaymentFailure,
    SettlementAPIError,
)
from lndpay.lib.payment import PaymentSender

from tests.testing_common import (
    FakeNode,
    FakeSettlement,
    MIN_PAYMENT_AMOUNT,
    channel,
    d,
)

SETTLEMENT_PUBKEY = '02' + 'ab' * 32


class TestSend(TestCase):
    def setUp(self):
        self.channels = [
            channel(1, '1', '0.009'),
            channel(2, '2', '0.009'),
            channel(3, '3', '0.009'),
        ]

    def test_send(self):
        node = FakeNode(self.channels)
        settlement = FakeSettlement()
        sender = PaymentSender(node, settlement)

        result = sender.send(7, d('0.001'))

        self.assertEqual([], result.errors)
        self.assertEqual([1, 2, 3], [p.id for p in result.successful])
        self.assertEqual(d('0.001'), result.amount_sent)
        self.assertEqual([(7, ['1', '2', '3'])], settlement.issued)
        self.assertEqual(
            [('lnbcrt71', d('0.00033333'), 1),
             ('lnbcrt72', d('0.00033333'), 2),
             ('lnbcrt73', d('0.00033334'), 3)],
            node.payments)

    def test_failing_channel_doesnt_stop_others(self):
        node = FakeNode(self.channels, failing_channel_ids=[2])
        sender = PaymentSender(node, FakeSettlement())

        result = sender.send(7, d('0.001'))

        self.assertEqual([1, 3], [p.id for p in result.successful])
        self.assertEqual([2], [p.id for p in result.errors])
        self.assertIn('unable to find a path', result.errors[0].error)
        self.assertEqual(d('0.00066667'), result.amount_sent)

    def test_missing_invoice(self):
        node = FakeNode(self.channels)
        sender = PaymentSender(
            node, FakeSettlement(skipped_channel_points=['3']))

        result = sender.send(7, d('0.001'))

        self.assertEqual([1, 2], [p.id for p in result.successful])
        self.assertEqual([3], [p.id for p in result.errors])
        self.assertEqual(2, len(node.payments))

    def test_amount_below_minimum(self):
        sender = PaymentSender(FakeNode(self.channels), FakeSettlement())
        with self.assertRaises(AmountBelowMinimum) as context:
            sender.send(7, d('0.00005'))
        self.assertEqual(MIN_PAYMENT_AMOUNT,
                         context.exception.min_payment_amount)

    def test_allocation_failure(self):
        channels = [channel(1, '1', '0.00006'), channel(2, '2', '0.00006'),
                    channel(3, '3', '0.00006'), channel(4, '4', '0.00001')]
        node = FakeNode(channels)
        settlement = FakeSettlement()
        sender = PaymentSender(node, settlement)

        with self.assertRaises(FundChannelsError) as context:
            sender.send(7, d('0.00006001'))

        self.assertIsInstance(context.exception.cause, NoTerminalChannelFound)
        self.assertEqual(MIN_PAYMENT_AMOUNT,
                         context.exception.min_payment_amount)
        self.assertEqual([1, 2, 3],
                         [c.id for c in context.exception.funding_channels])
        self.assertEqual([], settlement.issued)
        self.assertEqual([], node.payments)

    def test_insufficient_balance(self):
        sender = PaymentSender(FakeNode(self.channels), FakeSettlement())
        with self.assertRaises(FundChannelsError) as context:
            sender.send(7, d('1'))
        self.assertIsInstance(context.exception.cause, InsufficientBalance)

    def test_invalid_request(self):
        sender = PaymentSender(FakeNode(self.channels), FakeSettlement())
        self.assertRaises(ValueError, sender.send, 0, d('0.001'))
        self.assertRaises(ValueError, sender.send, 7, d('0'))
        self.assertRaises(ValueError, sender.send, 7, 0.001)

    def test_round_precision_finer_than_satoshis(self):
        # 0.000333339 BTC would be truncated to 33333 sat by lnd payments
        self.assertRaises(ValueError, PaymentSender, FakeNode(self.channels),
                          FakeSettlement(), round_precision=9)
        sender = PaymentSender(
            FakeNode(self.channels), FakeSettlement(), round_precision=8)
        self.assertEqual(8, sender.round_precision)


class TestSendViaChannel(TestCase):
    def setUp(self):
        self.channel_point = 'a' * 64 + ':1'
        self.channels = [
            channel(1, 'b' * 64 + ':0', '0.01', node='03' + 'cd' * 32),
            channel(2, self.channel_point, '0.01', node=SETTLEMENT_PUBKEY,
                    local_reserved='0.001'),
        ]
        self.node = FakeNode(self.channels)
        self.settlement = FakeSettlement(
            channel_reserve_multiplier=Decimal(2),
            addresses=[f'{SETTLEMENT_PUBKEY}@127.0.0.1:9735'])
        self.sender = PaymentSender(self.node, self.settlement)

    def test_send_via_channel_id(self):
        payment = self.sender.send_via_channel(7, d('0.005'), channel_id=2)
        self.assertEqual(self.channel_point, payment.channel_point)
        self.assertEqual(d('0.005'), payment.amount)
        self.assertEqual([(7, [self.channel_point])], self.settlement.issued)
        self.assertEqual(
            [(f'lnbcrt7{self.channel_point}', d('0.005'), 2)],
            self.node.payments)

    def test_send_via_channel_point(self):
        payment = self.sender.send_via_channel(
            7, d('0.005'), channel_point=self.channel_point)
        self.assertEqual(2, payment.id)

    def test_channel_not_found(self):
        self.assertRaises(
            ChannelNotFound, self.sender.send_via_channel, 7, d('0.005'),
            channel_id=3)
        self.assertRaises(
            ValueError, self.sender.send_via_channel, 7, d('0.005'))
        self.assertRaises(
            ValueError, self.sender.send_via_channel, 7, d('0.005'),
            channel_point='nonsense')

    def test_foreign_channel(self):
        self.assertRaises(
            ForeignChannel, self.sender.send_via_channel, 7, d('0.005'),
            channel_id=1)

    def test_reserve_is_kept(self):
        # 0.01 - 2 * 0.001 is available
        self.sender.send_via_channel(7, d('0.008'), channel_id=2)
        with self.assertRaises(ChannelBalanceExceeded) as context:
            self.sender.send_via_channel(7, d('0.00800001'), channel_id=2)
        self.assertEqual(d('0.002'), context.exception.reserved)

    def test_amount_below_minimum(self):
        self.assertRaises(
            AmountBelowMinimum, self.sender.send_via_channel, 7, d('0.00001'),
            channel_id=2)

    def test_no_invoice(self):
        self.settlement.skipped_channel_points.add(self.channel_point)
        self.assertRaises(
            SettlementAPIError, self.sender.send_via_channel, 7, d('0.005'),
            channel_id=2)

    def test_payment_failure(self):
        self.node.failing_channel_ids.add(2)
        self.assertRaises(
            PaymentFailure, self.sender.send_via_channel, 7, d('0.005'),
            channel_id=2)
