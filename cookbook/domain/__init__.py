# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import DomainError, DuplicateEntryError
from .ownership import authorize_mutation

__all__ = [
    "DomainError",
    "DuplicateEntryError",
    "authorize_mutation",
]
