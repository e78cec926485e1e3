"""Part aggregate — the budget tree.

A budget is a tree of named parts. Simple parts are leaves with a fixed
price; composite parts own an ordered list of children and derive their
price from them. The tree is a strict tree: every part has at most one
owner and there are no back-references to parents.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import InitVar, dataclass, field

from budget.domain.exceptions import ValidationError

# One tab per level below the starting indent.
INDENT_UNIT = "\t"


@dataclass
class Part(ABC):
    """Anything in the budget that has a name and a price.

    ``name`` is free-form text and may be replaced at any time.
    """

    name: str

    @abstractmethod
    def get_price(self) -> float:
        """Return the price of this part."""

    @abstractmethod
    def walk(self, depth: int = 0) -> Iterator[tuple[int, Part]]:
        """Yield ``(depth, part)`` pairs in pre-order, children in insertion order."""

    # --- Rendering ------------------------------------------------------------

    def budget_line(self, indent: str = "") -> str:
        return f"{indent}{self.name} {self.get_price()}"

    def budget_lines(self, indent: str = "") -> Iterator[str]:
        """Yield the breakdown lines of this part and everything below it."""
        for depth, part in self.walk():
            yield part.budget_line(indent + INDENT_UNIT * depth)

    def print_budget(self, indent: str = "") -> None:
        """Print the indented budget breakdown to standard output."""
        for line in self.budget_lines(indent):
            print(line)

    # --- Queries --------------------------------------------------------------

    def find(self, name: str) -> Part | None:
        """Return the first part in pre-order whose name is exactly *name*."""
        for _, part in self.walk():
            if part.name == name:
                return part
        return None


@dataclass
class SimplePart(Part):
    """A leaf with a fixed price.

    The price is set once at construction and cannot be changed afterwards.
    Negative prices are accepted.
    """

    price: InitVar[float]
    _price: float = field(init=False)

    def __post_init__(self, price: float) -> None:
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise ValidationError(
                f"Part price must be a number, got {type(price).__name__}"
            )
        self._price = float(price)

    def get_price(self) -> float:
        return self._price

    def walk(self, depth: int = 0) -> Iterator[tuple[int, Part]]:
        yield depth, self


@dataclass
class CompositePart(Part):
    """A part made of other parts.

    Created empty; children are appended with ``add_part`` and never
    removed. The price is recomputed from the children on every call.
    """

    _parts: list[Part] = field(default_factory=list, init=False)

    @property
    def children(self) -> list[Part]:
        return list(self._parts)

    def add_part(self, part: Part) -> None:
        """Append *part* as the last child.

        No duplicate or cycle check is made; callers keep the tree strict.
        """
        self._parts.append(part)

    def get_price(self) -> float:
        price = 0.0
        for part in self._parts:
            price += part.get_price()
        return price

    def walk(self, depth: int = 0) -> Iterator[tuple[int, Part]]:
        yield depth, self
        for part in self._parts:
            yield from part.walk(depth + 1)
