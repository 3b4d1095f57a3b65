# SPDX-FileCopyrightText: 2026 Delta Connect Contributors
#
# SPDX-License-Identifier: Apache-2.0
import os

# Spark Connect endpoint, e.g. sc://localhost:15002
SPARK_REMOTE = os.getenv("SPARK_REMOTE", "")

DELTA_CONNECT_LOG_LEVEL = os.getenv("DELTA_CONNECT_LOG_LEVEL", "warn")

# hadoop conf keys the server forwards to the file system
FS_CONF_PREFIXES = ("fs.", "dfs.")


def is_fs_conf_key(key: str) -> bool:
    return key.startswith(FS_CONF_PREFIXES)
