# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations


class DomainError(Exception):
    pass


class DuplicateEntryError(DomainError):
    def __init__(self, entity: str, *, field: str) -> None:
        super().__init__(f"{entity} with this {field} already exists")
        self.entity = entity
        self.field = field


class MissingReferenceError(DomainError):
    def __init__(self, entity: str) -> None:
        super().__init__(f"referenced {entity} does not exist")
        self.entity = entity
