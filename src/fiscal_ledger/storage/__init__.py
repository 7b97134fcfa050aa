# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from fiscal_ledger.storage.interface import LedgerStorage
from fiscal_ledger.storage.memory import MemoryStorage

__all__ = ["LedgerStorage", "MemoryStorage"]
