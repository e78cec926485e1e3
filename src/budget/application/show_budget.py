"""Application service: Show Budget use case (query).

Flattens a part and its descendants into breakdown lines, parent
before children and children in insertion order. Each line is indented
one tab per level below the selected part.
"""

from __future__ import annotations

import logging

from budget.application.dto import BudgetDTO, BudgetLineDTO
from budget.application.part_lookup import resolve_part
from budget.domain.model.part import INDENT_UNIT, Part

logger = logging.getLogger(__name__)


class ShowBudgetHandler:

    def __init__(self, root: Part) -> None:
        self._root = root

    def handle(self, part_name: str | None = None) -> BudgetDTO:
        part = resolve_part(self._root, part_name)
        dto = self._to_dto(part)
        logger.debug("Built breakdown of %r with %d lines", part.name, len(dto.lines))
        return dto

    @staticmethod
    def _to_dto(part: Part) -> BudgetDTO:
        return BudgetDTO(
            name=part.name,
            total=part.get_price(),
            lines=[
                BudgetLineDTO(
                    depth=depth,
                    name=node.name,
                    price=node.get_price(),
                    text=node.budget_line(INDENT_UNIT * depth),
                )
                for depth, node in part.walk()
            ],
        )
