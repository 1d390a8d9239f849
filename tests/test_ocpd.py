"""Unit tests for overcurrent device rating selection."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from circuit_topology import Circuit
from conductors import Metal
from loads import GeneralLoad
from ocpd import OCPD, STANDARD_OCPD_SIZES, egc_size_for, get_rating_for, next_higher_rating, next_lower_rating


class TestGetRatingFor:

    @pytest.mark.parametrize("ampacity,nhsr,rating", [
        (15, True, 15),
        (16, True, 20),
        (16, False, 15),
        (10, True, 15),
        (0, False, 15),
        (790, True, 800),
        (790, False, 700),
        (800, True, 800),
        (801, True, 800),
        (850, True, 800),
        (5500, True, 5000),
        (6000, True, 6000),
        (7000, True, 6000),
        (7000, False, 6000),
    ])
    def test_rating(self, ampacity, nhsr, rating):
        assert get_rating_for(ampacity, nhsr) == rating

    def test_exact_ratings_are_returned(self):
        for rating in STANDARD_OCPD_SIZES:
            assert get_rating_for(rating, True) == rating


class TestNeighbourRatings:

    def test_next_higher(self):
        assert next_higher_rating(100) == 110
        assert next_higher_rating(101) == 110
        assert next_higher_rating(6000) is None

    def test_next_lower(self):
        assert next_lower_rating(16) == 15
        assert next_lower_rating(1000) == 800
        assert next_lower_rating(15) is None


class TestEGCSize:

    @pytest.mark.parametrize("rating,metal,size", [
        (15, Metal.COPPER, "14 AWG"),
        (20, Metal.COPPER, "12 AWG"),
        (60, Metal.COPPER, "10 AWG"),
        (61, Metal.COPPER, "8 AWG"),
        (200, Metal.COPPER, "6 AWG"),
        (200, Metal.ALUMINUM, "4 AWG"),
        (6000, Metal.COPPER, "800 kcmil"),
        (6000, Metal.ALUMINUM, "1500 kcmil"),
    ])
    def test_table_250_122(self, rating, metal, size):
        assert egc_size_for(rating, metal) == size

    def test_out_of_table(self):
        assert egc_size_for(0) is None
        assert egc_size_for(6001) is None


class TestOCPD:

    def test_requires_circuit(self):
        with pytest.raises(ValueError):
            OCPD(None)

    def test_protects_conductor_ampacity(self, circuit):
        assert circuit.circuit_ampacity == 20
        assert circuit.ocpd.rating == 20
        assert circuit.ocpd.sizing_basis()["basis"] == "conductor_ampacity"

    def test_load_max_rating_is_preferred(self):
        circuit = Circuit(GeneralLoad(nominal_current=30, max_ocpd_rating=45))
        assert circuit.ocpd.rating == 45
        assert circuit.ocpd.sizing_basis()["basis"] == "load_max_ocpd"

    def test_load_max_rating_rounds_per_nhsr_flag(self):
        assert Circuit(GeneralLoad(max_ocpd_rating=42)).ocpd.rating == 45
        assert Circuit(GeneralLoad(max_ocpd_rating=42, nhsr_rule_applies=False)).ocpd.rating == 40

    def test_not_100_percent_rated_by_default(self, circuit):
        assert not circuit.ocpd.is_100_percent_rated

    def test_100_percent_rating_is_reported_only(self, circuit):
        rating = circuit.ocpd.rating
        circuit.ocpd.is_100_percent_rated = True
        assert circuit.ocpd.rating == rating
        assert circuit.ocpd.sizing_basis()["is_100_percent_rated"] is True
