# SPDX-FileCopyrightText: 2026 Delta Connect Contributors
#
# SPDX-License-Identifier: Apache-2.0

import os
import shutil
import tempfile
import unittest

from pyspark.sql.connect.session import SparkSession

from delta_connect import config
from delta_connect.logging import init_logger


def remote_session(app_name: str) -> SparkSession:
    return SparkSession.builder.remote(config.SPARK_REMOTE).appName(app_name).getOrCreate()


class DeltaConnectTestCase(unittest.TestCase):
    """Test class base that connects to the Spark Connect server given by
    ``SPARK_REMOTE``. The server must run with the Delta Connect plugin and
    share a file system with the test process.
    """

    def setUp(self):
        if not config.SPARK_REMOTE:
            raise unittest.SkipTest("SPARK_REMOTE is not set")
        init_logger(config.DELTA_CONNECT_LOG_LEVEL, "delta_connect")
        self.spark = remote_session(self.__class__.__name__)
        self.tempPath = tempfile.mkdtemp()
        self.tempFile = os.path.join(self.tempPath, "tempFile")

    def tearDown(self):
        self.spark.stop()
        shutil.rmtree(self.tempPath)
