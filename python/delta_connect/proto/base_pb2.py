# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: delta/connect/base.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()




DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n\x18\x64\x65lta/connect/base.proto\x12\rdelta.connect\"\xf8\x01\n\nDeltaTable\x12.\n\x04path\x18\x01 \x01(\x0b\x32\x1e.delta.connect.DeltaTable.PathH\x00\x12\x1c\n\x12table_or_view_name\x18\x02 \x01(\tH\x00\x1a\x8c\x01\n\x04Path\x12\x0c\n\x04path\x18\x01 \x01(\t\x12\x43\n\x0bhadoop_conf\x18\x02 \x03(\x0b\x32..delta.connect.DeltaTable.Path.HadoopConfEntry\x1a\x31\n\x0fHadoopConfEntry\x12\x0b\n\x03key\x18\x01 \x01(\t\x12\r\n\x05value\x18\x02 \x01(\t:\x02\x38\x01\x42\r\n\x0b\x61\x63\x63\x65ss_typeB\x1a\n\x16io.delta.connect.protoP\x01\x62\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'delta_connect.proto.base_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  DESCRIPTOR._serialized_options = b'\n\026io.delta.connect.protoP\001'
  _DELTATABLE_PATH_HADOOPCONFENTRY._options = None
  _DELTATABLE_PATH_HADOOPCONFENTRY._serialized_options = b'8\001'
  _DELTATABLE._serialized_start=44
  _DELTATABLE._serialized_end=292
  _DELTATABLE_PATH._serialized_start=137
  _DELTATABLE_PATH._serialized_end=277
  _DELTATABLE_PATH_HADOOPCONFENTRY._serialized_start=228
  _DELTATABLE_PATH_HADOOPCONFENTRY._serialized_end=277
# @@protoc_insertion_point(module_scope)
