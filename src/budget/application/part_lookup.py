"""Shared lookup of a named part inside a budget tree."""

from __future__ import annotations

import logging

from budget.domain.exceptions import EntityNotFoundError
from budget.domain.model.part import Part

logger = logging.getLogger(__name__)


def resolve_part(root: Part, part_name: str | None) -> Part:
    """Return *root* itself, or the first part named *part_name* below it."""
    if part_name is None:
        return root

    part = root.find(part_name)
    if part is None:
        raise EntityNotFoundError(f"Part '{part_name}' not found in '{root.name}'")

    logger.debug("Resolved part %r under %r", part_name, root.name)
    return part
