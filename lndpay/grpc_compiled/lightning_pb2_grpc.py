# Client and server classes corresponding to protobuf-defined services.
"""Client and server classes corresponding to protobuf-defined services."""
import grpc

from lndpay.grpc_compiled import lightning_pb2 as lightning__pb2


class LightningStub(object):
    """Lightning is the main RPC server of the daemon.
    """

    def __init__(self, channel):
        """Constructor.

        Args:
            channel: A grpc.Channel.
        """
        self.SendPaymentSync = channel.unary_unary(
                '/lnrpc.Lightning/SendPaymentSync',
                request_serializer=lightning__pb2.SendRequest.SerializeToString,
                response_deserializer=lightning__pb2.SendResponse.FromString,
                )
        self.ListChannels = channel.unary_unary(
                '/lnrpc.Lightning/ListChannels',
                request_serializer=lightning__pb2.ListChannelsRequest.SerializeToString,
                response_deserializer=lightning__pb2.ListChannelsResponse.FromString,
                )
        self.ListPayments = channel.unary_unary(
                '/lnrpc.Lightning/ListPayments',
                request_serializer=lightning__pb2.ListPaymentsRequest.SerializeToString,
                response_deserializer=lightning__pb2.ListPaymentsResponse.FromString,
                )
