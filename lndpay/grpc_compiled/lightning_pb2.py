# -*- coding: utf-8 -*-
# Protocol buffer classes for the part of lnd's lightning.proto used by lndpay.
# Field numbers follow lnrpc/lightning.proto, unknown fields are ignored.
"""Generated protocol buffer code."""
from google.protobuf import descriptor_pb2 as _descriptor_pb2
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
from google.protobuf.internal import builder as _builder
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()

_F = _descriptor_pb2.FieldDescriptorProto

# message -> (field, number, type, label, type name)
_FIELDS = {
  'ListChannelsRequest': [
    ('active_only', 1, _F.TYPE_BOOL, _F.LABEL_OPTIONAL, None),
    ('inactive_only', 2, _F.TYPE_BOOL, _F.LABEL_OPTIONAL, None),
    ('public_only', 3, _F.TYPE_BOOL, _F.LABEL_OPTIONAL, None),
    ('private_only', 4, _F.TYPE_BOOL, _F.LABEL_OPTIONAL, None),
  ],
  'Channel': [
    ('active', 1, _F.TYPE_BOOL, _F.LABEL_OPTIONAL, None),
    ('remote_pubkey', 2, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
    ('channel_point', 3, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
    ('chan_id', 4, _F.TYPE_UINT64, _F.LABEL_OPTIONAL, None),
    ('capacity', 5, _F.TYPE_INT64, _F.LABEL_OPTIONAL, None),
    ('local_balance', 6, _F.TYPE_INT64, _F.LABEL_OPTIONAL, None),
    ('remote_balance', 7, _F.TYPE_INT64, _F.LABEL_OPTIONAL, None),
    ('commit_fee', 8, _F.TYPE_INT64, _F.LABEL_OPTIONAL, None),
    ('private', 17, _F.TYPE_BOOL, _F.LABEL_OPTIONAL, None),
    ('initiator', 18, _F.TYPE_BOOL, _F.LABEL_OPTIONAL, None),
    ('local_chan_reserve_sat', 20, _F.TYPE_INT64, _F.LABEL_OPTIONAL, None),
    ('remote_chan_reserve_sat', 21, _F.TYPE_INT64, _F.LABEL_OPTIONAL, None),
  ],
  'ListChannelsResponse': [
    ('channels', 11, _F.TYPE_MESSAGE, _F.LABEL_REPEATED, '.lnrpc.Channel'),
  ],
  'SendRequest': [
    ('amt', 3, _F.TYPE_INT64, _F.LABEL_OPTIONAL, None),
    ('payment_request', 6, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
    ('outgoing_chan_id', 9, _F.TYPE_UINT64, _F.LABEL_OPTIONAL, None),
  ],
  'SendResponse': [
    ('payment_error', 1, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
    ('payment_preimage', 2, _F.TYPE_BYTES, _F.LABEL_OPTIONAL, None),
    ('payment_hash', 4, _F.TYPE_BYTES, _F.LABEL_OPTIONAL, None),
  ],
  'ListPaymentsRequest': [
    ('include_incomplete', 1, _F.TYPE_BOOL, _F.LABEL_OPTIONAL, None),
    ('index_offset', 2, _F.TYPE_UINT64, _F.LABEL_OPTIONAL, None),
    ('max_payments', 3, _F.TYPE_UINT64, _F.LABEL_OPTIONAL, None),
    ('reversed', 4, _F.TYPE_BOOL, _F.LABEL_OPTIONAL, None),
  ],
  'Payment': [
    ('payment_hash', 1, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
    ('creation_date', 3, _F.TYPE_INT64, _F.LABEL_OPTIONAL, None),
    ('path', 4, _F.TYPE_STRING, _F.LABEL_REPEATED, None),
    ('payment_preimage', 6, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
    ('value_sat', 7, _F.TYPE_INT64, _F.LABEL_OPTIONAL, None),
    ('value_msat', 8, _F.TYPE_INT64, _F.LABEL_OPTIONAL, None),
    ('payment_request', 9, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
    ('status', 10, _F.TYPE_INT32, _F.LABEL_OPTIONAL, None),
    ('fee_sat', 11, _F.TYPE_INT64, _F.LABEL_OPTIONAL, None),
    ('fee_msat', 12, _F.TYPE_INT64, _F.LABEL_OPTIONAL, None),
    ('creation_time_ns', 13, _F.TYPE_INT64, _F.LABEL_OPTIONAL, None),
    ('payment_index', 15, _F.TYPE_UINT64, _F.LABEL_OPTIONAL, None),
  ],
  'ListPaymentsResponse': [
    ('payments', 1, _F.TYPE_MESSAGE, _F.LABEL_REPEATED, '.lnrpc.Payment'),
    ('first_index_offset', 2, _F.TYPE_UINT64, _F.LABEL_OPTIONAL, None),
    ('last_index_offset', 3, _F.TYPE_UINT64, _F.LABEL_OPTIONAL, None),
  ],
}


def _file_descriptor_proto():
  file_proto = _descriptor_pb2.FileDescriptorProto(
    name='lndpay/lightning.proto', package='lnrpc', syntax='proto3')
  for message_name, fields in _FIELDS.items():
    message_proto = file_proto.message_type.add(name=message_name)
    for name, number, field_type, label, type_name in fields:
      field_proto = message_proto.field.add(
        name=name, number=number, type=field_type, label=label)
      if type_name:
        field_proto.type_name = type_name
  return file_proto


DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(
  _file_descriptor_proto().SerializeToString())

_globals = globals()
_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, _globals)
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'lndpay.grpc_compiled.lightning_pb2', _globals)
# @@protoc_insertion_point(module_scope)
