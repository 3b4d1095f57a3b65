# SPDX-FileCopyrightText: 2026 Delta Connect Contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Protocol buffer messages for the Delta Connect relation extensions.

The ``_pb2`` modules are generated from ``protobuf/delta/connect`` by
``protobuf/generate.sh``; do not edit them by hand.
"""

from delta_connect.proto.base_pb2 import DeltaTable
from delta_connect.proto.relations_pb2 import (
    ConvertToDelta,
    DeltaRelation,
    DescribeDetail,
    DescribeHistory,
    IsDeltaTable,
    RestoreTable,
    Scan,
)

__all__ = [
    # Table reference
    "DeltaTable",
    # Relations
    "DeltaRelation",
    "Scan",
    "DescribeHistory",
    "DescribeDetail",
    "ConvertToDelta",
    "RestoreTable",
    "IsDeltaTable",
]
