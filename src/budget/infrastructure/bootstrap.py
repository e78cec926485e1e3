"""Composition root — builds the sample house budget.

This is the only place in the codebase that knows the concrete tree.
Every other module works against the Part interface.
"""

from __future__ import annotations

from budget.domain.model.part import CompositePart, Part, SimplePart


def _composite(name: str, *parts: Part) -> CompositePart:
    composite = CompositePart(name)
    for part in parts:
        composite.add_part(part)
    return composite


def house_budget() -> CompositePart:
    """Return a fresh copy of the sample house tree (total 75000)."""
    finca = _composite(
        "finca",
        SimplePart("Cierre finca", 4000),
        SimplePart("jardín", 1000),
    )

    estructura = _composite(
        "estructura",
        SimplePart("tejado", 10000),
        SimplePart("alturas", 10000),
        SimplePart("sótano", 10000),
    )

    habitaciones = _composite(
        "habitaciones",
        SimplePart("mobiliario", 20000),
        SimplePart("pintura", 10000),
    )
    electricidad = _composite(
        "electricidad",
        SimplePart("cables", 500),
        SimplePart("operadores", 500),
    )
    calefaccion = _composite(
        "calefacción",
        SimplePart("caldera", 4000),
        SimplePart("radiadores", 2000),
    )
    fontaneria = _composite(
        "fontanería",
        SimplePart("tuberías", 3000),
        calefaccion,
    )
    interior = _composite("interior", habitaciones, electricidad, fontaneria)

    return _composite("Casa", finca, estructura, interior)
