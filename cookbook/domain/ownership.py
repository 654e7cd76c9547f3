# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol, TypeVar

from cookbook.shared.errors.kinds import ErrorKind
from cookbook.shared.result import Err, Ok, Result


class Owned(Protocol):
    @property
    def user_id(self) -> int: ...


OwnedT = TypeVar("OwnedT", bound=Owned)


def authorize_mutation(
    resource: OwnedT | None, requester_id: int, *, resource_name: str
) -> Result[OwnedT]:
    """Only the owning account may change or remove a resource."""
    if resource is None:
        return Err(ErrorKind.NOT_FOUND, message=f"{resource_name} not found")
    if resource.user_id != requester_id:
        return Err(
            ErrorKind.FORBIDDEN,
            message=f"you are not allowed to modify this {resource_name}",
        )
    return Ok(resource)


__all__ = ["Owned", "authorize_mutation"]
