# SPDX-FileCopyrightText: 2026 Delta Connect Contributors
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple, Union

from pyspark.sql.connect.dataframe import DataFrame
from pyspark.sql.connect.plan import LogicalPlan
from pyspark.sql.connect.session import SparkSession
from pyspark.sql.types import StructType

from delta_connect import proto
from delta_connect.config import is_fs_conf_key
from delta_connect.plan import (
    ConvertToDelta,
    DeltaScan,
    DescribeDetail,
    DescribeHistory,
    IsDeltaTable,
    RestoreTable,
)

logger = logging.getLogger(__name__)


def _active_session() -> SparkSession:
    spark = SparkSession.getActiveSession()
    if spark is None:
        raise ValueError("Could not find active SparkSession")
    return spark


def _session_and_arg(
    session_or_arg: Union[SparkSession, str], arg: Optional[str], arg_name: str
) -> Tuple[SparkSession, str]:
    # forPath(path) / forPath(spark, path) style overloads
    if arg is None:
        session_or_arg, arg = None, session_or_arg
    if not isinstance(arg, str):
        raise TypeError(f"{arg_name} must be a string, got {type(arg).__name__}")
    if session_or_arg is None:
        session_or_arg = _active_session()
    return session_or_arg, arg


def _new_dataframe(spark: SparkSession, plan: LogicalPlan) -> DataFrame:
    return DataFrame(plan, session=spark)


class DeltaTable(object):
    """
    Main class for programmatically interacting with Delta tables through
    Spark Connect. Create instances with the class methods::

        DeltaTable.forPath(spark, "/path/to/table")
        DeltaTable.forName(spark, "db.events")

    Every operation is sent to the server as a Delta relation extension; this
    class holds no state besides the scan DataFrame and the table reference.
    """

    def __init__(self, df: DataFrame, table: proto.DeltaTable) -> None:
        self._df = df
        self._table = proto.DeltaTable()
        self._table.CopyFrom(table)

    @property
    def _spark(self) -> SparkSession:
        return self._df.sparkSession

    def toDF(self) -> DataFrame:
        """Get a DataFrame representation of this Delta table."""
        return self._df

    def alias(self, aliasName: str) -> "DeltaTable":
        """
        Apply an alias to the DeltaTable. This is similar to ``DataFrame.alias``
        or SQL ``tableName AS alias``. No remote call is made.
        """
        if not isinstance(aliasName, str):
            raise TypeError(f"aliasName must be a string, got {type(aliasName).__name__}")
        return DeltaTable(self._df.alias(aliasName), self._table)

    def history(self, limit: Optional[int] = None) -> DataFrame:
        """
        Get the information of the latest ``limit`` commits on this table,
        newest first. Without a limit the whole history is returned.

        The limit is applied to the resulting DataFrame, not sent with the
        relation.
        """
        if limit is not None:
            if isinstance(limit, bool) or not isinstance(limit, int):
                raise TypeError(f"limit must be an int, got {type(limit).__name__}")
            if limit < 0:
                raise ValueError(f"limit must be non-negative int; {limit} is invalid")
        df = _new_dataframe(self._spark, DescribeHistory(self._table))
        if limit is not None:
            df = df.limit(limit)
        return df

    def detail(self) -> DataFrame:
        """Get the details of this table such as the format, name, and size."""
        return _new_dataframe(self._spark, DescribeDetail(self._table))

    def restoreToVersion(self, version: int) -> DataFrame:
        """
        Restore the table to an older version given by version number and
        return a single row of restore metrics.
        """
        if isinstance(version, bool) or not isinstance(version, int):
            raise TypeError(f"version must be an int, got {type(version).__name__}")
        return self._executeRestore(version=version)

    def restoreToTimestamp(self, timestamp: str) -> DataFrame:
        """
        Restore the table to an older version given by a timestamp of the
        form ``yyyy-MM-dd`` or ``yyyy-MM-dd HH:mm:ss`` and return a single row
        of restore metrics.
        """
        if not isinstance(timestamp, str):
            raise TypeError(f"timestamp must be a string, got {type(timestamp).__name__}")
        return self._executeRestore(timestamp=timestamp)

    def _executeRestore(
        self, version: Optional[int] = None, timestamp: Optional[str] = None
    ) -> DataFrame:
        restore = RestoreTable(self._table, version=version, timestamp=timestamp)
        # evaluated once; the returned DataFrame is backed by the local metrics
        metrics = _new_dataframe(self._spark, restore).toArrow()
        logger.info(
            "restored %s to %s",
            self._describe(), f"version {version}" if version is not None else timestamp,
        )
        return self._spark.createDataFrame(metrics)

    def _describe(self) -> str:
        if self._table.WhichOneof("access_type") == "path":
            return f"delta.`{self._table.path.path}`"
        return self._table.table_or_view_name

    @classmethod
    def forPath(
        cls,
        sparkSession: Union[SparkSession, str],
        path: Optional[str] = None,
        hadoopConf: Optional[Dict[str, str]] = None,
    ) -> "DeltaTable":
        """
        Instantiate a DeltaTable for the data at the given path. A missing
        table or a non-Delta table fails when the scan is evaluated.

        ``DeltaTable.forPath(path)`` uses the active SparkSession and raises
        ``ValueError`` when there is none.

        :param hadoopConf: file system options, by convention keys starting
            with ``fs.`` or ``dfs.``, e.g. ``{"fs.s3a.access.key": "..."}``.
        """
        spark, path = _session_and_arg(sparkSession, path, "path")
        if hadoopConf is None:
            hadoopConf = {}
        if not isinstance(hadoopConf, dict):
            raise TypeError(f"hadoopConf must be a dict, got {type(hadoopConf).__name__}")
        for key, value in hadoopConf.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise TypeError("Keys and values of hadoopConf must be strings")
            if not is_fs_conf_key(key):
                logger.warning("hadoopConf key %r is not a file system option", key)

        table = proto.DeltaTable(path=proto.DeltaTable.Path(path=path, hadoop_conf=hadoopConf))
        return cls._forTable(spark, table)

    @classmethod
    def forName(
        cls, sparkSession: Union[SparkSession, str], tableOrViewName: Optional[str] = None
    ) -> "DeltaTable":
        """
        Instantiate a DeltaTable using the given table name. ``delta.`path```
        identifiers are accepted too.

        ``DeltaTable.forName(name)`` uses the active SparkSession and raises
        ``ValueError`` when there is none.
        """
        spark, tableOrViewName = _session_and_arg(sparkSession, tableOrViewName, "tableOrViewName")
        table = proto.DeltaTable(table_or_view_name=tableOrViewName)
        return cls._forTable(spark, table)

    @classmethod
    def _forTable(cls, spark: SparkSession, table: proto.DeltaTable) -> "DeltaTable":
        df = _new_dataframe(spark, DeltaScan(table))
        return cls(df, table)

    @classmethod
    def isDeltaTable(
        cls, sparkSession: Union[SparkSession, str], identifier: Optional[str] = None
    ) -> bool:
        """
        Check if the provided path is the root of a Delta table.

        ``DeltaTable.isDeltaTable(path)`` uses the active SparkSession and
        raises ``ValueError`` when there is none.
        """
        spark, identifier = _session_and_arg(sparkSession, identifier, "identifier")
        row = _new_dataframe(spark, IsDeltaTable(identifier)).head()
        return bool(row[0])

    @classmethod
    def convertToDelta(
        cls,
        sparkSession: SparkSession,
        identifier: str,
        partitionSchema: Optional[Union[str, StructType]] = None,
    ) -> "DeltaTable":
        """
        Convert an existing Parquet table to a Delta table in-place.

        :param identifier: Parquet table identifier formatted as "parquet.`path`"
        :param partitionSchema: Hive DDL formatted string, or StructType
        :return: DeltaTable representing the converted table
        """
        if not isinstance(identifier, str):
            raise TypeError(f"identifier must be a string, got {type(identifier).__name__}")
        if partitionSchema is not None and not isinstance(partitionSchema, (str, StructType)):
            raise TypeError(
                "partitionSchema must be a Hive DDL string or a StructType, "
                f"got {type(partitionSchema).__name__}"
            )
        row = _new_dataframe(sparkSession, ConvertToDelta(identifier, partitionSchema)).head()
        converted = row[0]
        logger.info("converted %s to %s", identifier, converted)
        return cls.forName(sparkSession, converted)
