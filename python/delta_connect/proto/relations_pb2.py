# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: delta/connect/relations.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()


from delta_connect.proto import base_pb2 as delta_dot_connect_dot_base__pb2
from pyspark.sql.connect.proto import types_pb2 as spark_dot_connect_dot_types__pb2


DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n\x1d\x64\x65lta/connect/relations.proto\x12\rdelta.connect\x1a\x18\x64\x65lta/connect/base.proto\x1a\x19spark/connect/types.proto\"\xe3\x02\n\rDeltaRelation\x12#\n\x04scan\x18\x01 \x01(\x0b\x32\x13.delta.connect.ScanH\x00\x12:\n\x10\x64\x65scribe_history\x18\x02 \x01(\x0b\x32\x1e.delta.connect.DescribeHistoryH\x00\x12\x38\n\x0f\x64\x65scribe_detail\x18\x03 \x01(\x0b\x32\x1d.delta.connect.DescribeDetailH\x00\x12\x39\n\x10\x63onvert_to_delta\x18\x04 \x01(\x0b\x32\x1d.delta.connect.ConvertToDeltaH\x00\x12\x34\n\rrestore_table\x18\x05 \x01(\x0b\x32\x1b.delta.connect.RestoreTableH\x00\x12\x35\n\x0eis_delta_table\x18\x06 \x01(\x0b\x32\x1b.delta.connect.IsDeltaTableH\x00\x42\x0f\n\rrelation_type\"0\n\x04Scan\x12(\n\x05table\x18\x01 \x01(\x0b\x32\x19.delta.connect.DeltaTable\";\n\x0f\x44\x65scribeHistory\x12(\n\x05table\x18\x01 \x01(\x0b\x32\x19.delta.connect.DeltaTable\":\n\x0e\x44\x65scribeDetail\x12(\n\x05table\x18\x01 \x01(\x0b\x32\x19.delta.connect.DeltaTable\"\x97\x01\n\x0e\x43onvertToDelta\x12\x12\n\nidentifier\x18\x01 \x01(\t\x12!\n\x17partition_schema_string\x18\x02 \x01(\tH\x00\x12:\n\x17partition_schema_struct\x18\x03 \x01(\x0b\x32\x17.spark.connect.DataTypeH\x00\x42\x12\n\x10partition_schema\"x\n\x0cRestoreTable\x12(\n\x05table\x18\x01 \x01(\x0b\x32\x19.delta.connect.DeltaTable\x12\x11\n\x07version\x18\x02 \x01(\x03H\x00\x12\x13\n\ttimestamp\x18\x03 \x01(\tH\x00\x42\x16\n\x14version_or_timestamp\"\x1c\n\x0cIsDeltaTable\x12\x0c\n\x04path\x18\x01 \x01(\tB\x1a\n\x16io.delta.connect.protoP\x01\x62\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'delta_connect.proto.relations_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  DESCRIPTOR._serialized_options = b'\n\026io.delta.connect.protoP\001'
  _DELTARELATION._serialized_start=102
  _DELTARELATION._serialized_end=457
  _SCAN._serialized_start=459
  _SCAN._serialized_end=507
  _DESCRIBEHISTORY._serialized_start=509
  _DESCRIBEHISTORY._serialized_end=568
  _DESCRIBEDETAIL._serialized_start=570
  _DESCRIBEDETAIL._serialized_end=628
  _CONVERTTODELTA._serialized_start=631
  _CONVERTTODELTA._serialized_end=782
  _RESTORETABLE._serialized_start=784
  _RESTORETABLE._serialized_end=904
  _ISDELTATABLE._serialized_start=906
  _ISDELTATABLE._serialized_end=934
# @@protoc_insertion_point(module_scope)
