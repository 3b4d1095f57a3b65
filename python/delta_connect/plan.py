# SPDX-FileCopyrightText: 2026 Delta Connect Contributors
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union

import pyspark.sql.connect.proto as spark_proto
from google.protobuf import text_format
from pyspark.sql.connect.plan import LogicalPlan
from pyspark.sql.connect.types import pyspark_types_to_proto_types
from pyspark.sql.types import StructType

from delta_connect import proto
from delta_connect.logging import TRACE

if TYPE_CHECKING:
    from pyspark.sql.connect.client import SparkConnectClient

logger = logging.getLogger(__name__)


class DeltaLogicalPlan(LogicalPlan):
    """Leaf plan whose relation is a ``DeltaRelation`` packed into
    ``spark.connect.Relation.extension``."""

    def __init__(self) -> None:
        super().__init__(None)

    def plan(self, session: "SparkConnectClient") -> spark_proto.Relation:
        relation = self.to_delta_relation(session)
        if logger.isEnabledFor(TRACE):
            logger.log(TRACE, "%s relation:\n%s", type(self).__name__,
                       text_format.MessageToString(relation))
        else:
            logger.debug("built %s relation", relation.WhichOneof("relation_type"))
        plan = self._create_proto_relation()
        plan.extension.Pack(relation)
        return plan

    def to_delta_relation(self, session: "SparkConnectClient") -> proto.DeltaRelation:
        raise NotImplementedError()

    def print(self, indent: int = 0) -> str:
        return f"{' ' * indent}<{type(self).__name__}>\n"


class DeltaScan(DeltaLogicalPlan):
    def __init__(self, table: proto.DeltaTable) -> None:
        super().__init__()
        self._table = proto.DeltaTable()
        self._table.CopyFrom(table)

    def to_delta_relation(self, session: "SparkConnectClient") -> proto.DeltaRelation:
        relation = proto.DeltaRelation()
        relation.scan.table.CopyFrom(self._table)
        return relation


class DescribeHistory(DeltaLogicalPlan):
    def __init__(self, table: proto.DeltaTable) -> None:
        super().__init__()
        self._table = proto.DeltaTable()
        self._table.CopyFrom(table)

    def to_delta_relation(self, session: "SparkConnectClient") -> proto.DeltaRelation:
        relation = proto.DeltaRelation()
        relation.describe_history.table.CopyFrom(self._table)
        return relation


class DescribeDetail(DeltaLogicalPlan):
    def __init__(self, table: proto.DeltaTable) -> None:
        super().__init__()
        self._table = proto.DeltaTable()
        self._table.CopyFrom(table)

    def to_delta_relation(self, session: "SparkConnectClient") -> proto.DeltaRelation:
        relation = proto.DeltaRelation()
        relation.describe_detail.table.CopyFrom(self._table)
        return relation


class ConvertToDelta(DeltaLogicalPlan):
    def __init__(
        self,
        identifier: str,
        partition_schema: Optional[Union[str, StructType]] = None,
    ) -> None:
        super().__init__()
        self._identifier = identifier
        self._partition_schema = partition_schema

    def to_delta_relation(self, session: "SparkConnectClient") -> proto.DeltaRelation:
        relation = proto.DeltaRelation()
        convert = relation.convert_to_delta
        convert.identifier = self._identifier
        if isinstance(self._partition_schema, str):
            convert.partition_schema_string = self._partition_schema
        elif isinstance(self._partition_schema, StructType):
            convert.partition_schema_struct.CopyFrom(
                pyspark_types_to_proto_types(self._partition_schema)
            )
        return relation


class RestoreTable(DeltaLogicalPlan):
    """Sets whichever of ``version``/``timestamp`` is given; the server rejects
    a relation carrying neither."""

    def __init__(
        self,
        table: proto.DeltaTable,
        version: Optional[int] = None,
        timestamp: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._table = proto.DeltaTable()
        self._table.CopyFrom(table)
        self._version = version
        self._timestamp = timestamp

    def to_delta_relation(self, session: "SparkConnectClient") -> proto.DeltaRelation:
        relation = proto.DeltaRelation()
        restore = relation.restore_table
        restore.table.CopyFrom(self._table)
        if self._version is not None:
            restore.version = self._version
        if self._timestamp is not None:
            restore.timestamp = self._timestamp
        return relation


class IsDeltaTable(DeltaLogicalPlan):
    def __init__(self, path: str) -> None:
        super().__init__()
        self._path = path

    def to_delta_relation(self, session: "SparkConnectClient") -> proto.DeltaRelation:
        relation = proto.DeltaRelation()
        relation.is_delta_table.path = self._path
        return relation
