"""Unit tests for the Part aggregate."""

import pytest

from budget.domain.exceptions import ValidationError
from budget.domain.model.part import CompositePart, SimplePart


def _finca() -> CompositePart:
    finca = CompositePart("finca")
    finca.add_part(SimplePart("Cierre finca", 4000))
    finca.add_part(SimplePart("jardín", 1000))
    return finca


# ── SimplePart ───────────────────────────────────────────────────────────────


class TestSimplePart:

    def test_price_is_stored_value(self):
        assert SimplePart("tejado", 10000).get_price() == 10000

    def test_price_survives_rename(self):
        part = SimplePart("tejado", 10000)
        part.name = "cubierta"
        assert part.name == "cubierta"
        assert part.get_price() == 10000

    def test_accepts_float_price(self):
        assert SimplePart("cables", 499.5).get_price() == 499.5

    def test_negative_price_accepted(self):
        assert SimplePart("descuento", -250).get_price() == -250

    def test_empty_name_accepted(self):
        assert SimplePart("", 1).name == ""

    def test_non_numeric_price_rejected(self):
        with pytest.raises(ValidationError, match="must be a number"):
            SimplePart("tejado", "10000")

    def test_bool_price_rejected(self):
        with pytest.raises(ValidationError, match="must be a number"):
            SimplePart("tejado", True)

    def test_print_budget_is_single_line(self, capsys):
        SimplePart("caldera", 4000).print_budget("\t\t")
        assert capsys.readouterr().out == "\t\tcaldera 4000.0\n"


# ── CompositePart ────────────────────────────────────────────────────────────


class TestCompositePartPrice:

    def test_empty_composite_costs_nothing(self):
        assert CompositePart("vacío").get_price() == 0

    def test_finca_price(self):
        assert _finca().get_price() == 5000

    def test_estructura_price(self):
        estructura = CompositePart("estructura")
        for name in ("tejado", "alturas", "sótano"):
            estructura.add_part(SimplePart(name, 10000))
        assert estructura.get_price() == 30000

    def test_price_is_sum_of_direct_children(self):
        fontaneria = CompositePart("fontanería")
        calefaccion = CompositePart("calefacción")
        calefaccion.add_part(SimplePart("caldera", 4000))
        calefaccion.add_part(SimplePart("radiadores", 2000))
        fontaneria.add_part(SimplePart("tuberías", 3000))
        fontaneria.add_part(calefaccion)
        assert fontaneria.get_price() == sum(
            child.get_price() for child in fontaneria.children
        )
        assert fontaneria.get_price() == 9000

    def test_add_part_increases_price_by_child_price(self):
        finca = _finca()
        before = finca.get_price()
        finca.add_part(SimplePart("piscina", 7500))
        assert finca.get_price() == before + 7500

    def test_price_recomputed_after_nested_addition(self):
        casa = CompositePart("Casa")
        finca = _finca()
        casa.add_part(finca)
        assert casa.get_price() == 5000
        finca.add_part(SimplePart("garaje", 2000))
        assert casa.get_price() == 7000


class TestCompositePartChildren:

    def test_children_in_insertion_order(self):
        assert [p.name for p in _finca().children] == ["Cierre finca", "jardín"]

    def test_children_is_a_copy(self):
        finca = _finca()
        finca.children.append(SimplePart("intruso", 1))
        assert len(finca.children) == 2
        assert finca.get_price() == 5000

    def test_duplicate_parts_allowed(self):
        finca = CompositePart("finca")
        jardin = SimplePart("jardín", 1000)
        finca.add_part(jardin)
        finca.add_part(jardin)
        assert finca.get_price() == 2000


class TestCompositePartPrint:

    def test_pre_order_with_one_tab_per_level(self, capsys):
        casa = CompositePart("Casa")
        casa.add_part(_finca())
        casa.print_budget("")
        assert capsys.readouterr().out.splitlines() == [
            "Casa 5000.0",
            "\tfinca 5000.0",
            "\t\tCierre finca 4000.0",
            "\t\tjardín 1000.0",
        ]

    def test_starting_indent_is_prefixed(self, capsys):
        _finca().print_budget(">")
        assert capsys.readouterr().out.splitlines() == [
            ">finca 5000.0",
            ">\tCierre finca 4000.0",
            ">\tjardín 1000.0",
        ]

    def test_budget_lines_match_print_budget(self, capsys):
        finca = _finca()
        finca.print_budget()
        assert capsys.readouterr().out.splitlines() == list(finca.budget_lines())


class TestFind:

    def test_finds_self(self):
        finca = _finca()
        assert finca.find("finca") is finca

    def test_finds_descendant(self):
        assert _finca().find("jardín").get_price() == 1000

    def test_missing_name_returns_none(self):
        assert _finca().find("tejado") is None

    def test_first_match_in_pre_order(self):
        casa = CompositePart("Casa")
        first = SimplePart("pintura", 100)
        second = SimplePart("pintura", 200)
        casa.add_part(first)
        casa.add_part(second)
        assert casa.find("pintura") is first
