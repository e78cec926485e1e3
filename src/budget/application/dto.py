"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing the Part tree to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BudgetLineDTO:
    """Output: one node of the breakdown as displayed to the user."""

    depth: int
    name: str
    price: float
    text: str  # formatted, e.g. "\tfinca 5000.0"


@dataclass(frozen=True)
class BudgetTotalDTO:
    """Output: the total price of a part."""

    name: str
    total: float


@dataclass(frozen=True)
class BudgetDTO:
    """Output: a complete breakdown of a part and everything below it."""

    name: str
    total: float
    lines: list[BudgetLineDTO]
