"""Domain entity representing a user role."""

from dataclasses import dataclass


@dataclass
class Role:
    """A role assigned to a member; its alias drives capability checks."""

    id: int
    name: str
    alias: str


__all__ = ["Role"]
