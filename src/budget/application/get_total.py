"""Application service: Get Total use case (query)."""

from __future__ import annotations

import logging

from budget.application.dto import BudgetTotalDTO
from budget.application.part_lookup import resolve_part
from budget.domain.model.part import Part

logger = logging.getLogger(__name__)


class GetTotalHandler:

    def __init__(self, root: Part) -> None:
        self._root = root

    def handle(self, part_name: str | None = None) -> BudgetTotalDTO:
        """Total price of the whole tree, or of the sub-tree named *part_name*."""
        part = resolve_part(self._root, part_name)
        total = part.get_price()
        logger.debug("Total for %r is %s", part.name, total)
        return BudgetTotalDTO(name=part.name, total=total)
