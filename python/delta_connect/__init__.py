# SPDX-FileCopyrightText: 2026 Delta Connect Contributors
#
# SPDX-License-Identifier: Apache-2.0

from delta_connect.tables import DeltaTable

__all__ = ['DeltaTable']
