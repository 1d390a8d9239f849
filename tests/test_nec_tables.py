"""Unit tests for the NEC lookup tables."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

import nec_tables


class TestConduitArea:

    def test_emt_one_inch(self):
        assert nec_tables.conduit_area("EMT", '1"') == pytest.approx(0.864)

    def test_aluminum_type_uses_steel_dimensions(self):
        assert nec_tables.conduit_area("EMT-AL", '1"') == nec_tables.conduit_area("EMT", '1"')
        assert nec_tables.conduit_area("RMC-AL", '6"') == pytest.approx(29.158)

    def test_hdpe_matches_pvc_40(self):
        assert nec_tables.areas_for_type("HDPE") == nec_tables.areas_for_type("PVC-40")

    def test_size_not_manufactured(self):
        assert nec_tables.conduit_area("ENT", '3"') is None
        assert not nec_tables.has_area("PVC-EB", '1/2"')

    def test_unknown_type(self):
        assert nec_tables.conduit_area("XYZ", '1"') is None
        assert nec_tables.areas_for_type("XYZ") == {}

    def test_trade_sizes_ascending(self):
        sizes = nec_tables.trade_sizes()
        assert sizes[0] == '3/8"'
        assert sizes[-1] == '6"'
        assert len(sizes) == 13

    def test_every_type_has_material(self):
        for conduit_type in nec_tables.conduit_types():
            assert nec_tables.conduit_material(conduit_type) in ("pvc", "steel", "aluminum")


class TestTradeSizeForArea:

    def test_smallest_that_fits(self):
        assert nec_tables.trade_size_for_area(0.9, "PVC-40") == '1-1/4"'

    def test_exact_area_fits(self):
        assert nec_tables.trade_size_for_area(0.832, "PVC-40") == '1"'

    def test_minimum_trade_is_honored(self):
        assert nec_tables.trade_size_for_area(0.1, "PVC-40", '1"') == '1"'

    def test_skips_sizes_not_manufactured(self):
        assert nec_tables.trade_size_for_area(0.1, "PVC-EB") == '2"'

    def test_too_big(self):
        assert nec_tables.trade_size_for_area(100, "EMT") is None

    def test_invalid_minimum_trade(self):
        assert nec_tables.trade_size_for_area(0.1, "PVC-40", '7"') is None


class TestConduitProperties:

    @pytest.mark.parametrize("conduit_type,material", [
        ("EMT", "steel"),
        ("EMT-AL", "aluminum"),
        ("PVC-80", "pvc"),
        ("LFNC-A", "pvc"),
        ("RMC", "steel"),
    ])
    def test_material(self, conduit_type, material):
        assert nec_tables.conduit_material(conduit_type) == material

    def test_magnetic(self):
        assert nec_tables.is_magnetic("IMC")
        assert not nec_tables.is_magnetic("PVC-40")
        assert not nec_tables.is_magnetic("RMC-AL")


class TestConductorSizes:

    def test_order(self):
        sizes = nec_tables.conductor_sizes()
        assert sizes[0] == "14 AWG"
        assert sizes[-1] == "2000 kcmil"
        assert nec_tables.size_index("1/0 AWG") > nec_tables.size_index("1 AWG")

    def test_unknown_size_raises(self):
        with pytest.raises(ValueError):
            nec_tables.size_index("13 AWG")

    def test_next_size_up(self):
        assert nec_tables.next_size_up("4/0 AWG") == "250 kcmil"
        assert nec_tables.next_size_up("2000 kcmil") is None

    def test_biggest_size(self):
        assert nec_tables.biggest_size("1/0 AWG", "2 AWG", "250 kcmil") == "250 kcmil"
        assert nec_tables.biggest_size() is None


class TestInsulatedArea:

    @pytest.mark.parametrize("size,insulation,area", [
        ("12 AWG", "THHN", 0.0133),
        ("12 AWG", "THW", 0.0181),
        ("12 AWG", "RHW", 0.0260),
        ("6 AWG", "RHH", 0.0726),
        ("500 kcmil", "XHHW-2", 0.6984),
        ("2000 kcmil", "TW", 2.7818),
    ])
    def test_table_5(self, size, insulation, area):
        assert nec_tables.insulated_area(size, insulation) == pytest.approx(area)

    def test_not_tabulated(self):
        assert nec_tables.insulated_area("2000 kcmil", "THHN") is None
        assert nec_tables.insulated_area("12 AWG", "USE") is None


class TestAmpacity:

    @pytest.mark.parametrize("size,metal,rating,ampacity", [
        ("14 AWG", "copper", 60, 15),
        ("4/0 AWG", "copper", 75, 230),
        ("250 kcmil", "aluminum", 90, 230),
        ("2000 kcmil", "copper", 90, 750),
        ("14 AWG", "aluminum", 60, 0),
    ])
    def test_table_310_16(self, size, metal, rating, ampacity):
        assert nec_tables.standard_ampacity(size, metal, rating) == ampacity

    def test_unknown_temperature_column(self):
        assert nec_tables.standard_ampacity("12 AWG", "copper", 105) == 0

    def test_temperature_ratings(self):
        assert nec_tables.insulation_temp_rating("TW") == 60
        assert nec_tables.insulation_temp_rating("THW") == 75
        assert nec_tables.insulation_temp_rating("THHN") == 90
        assert nec_tables.insulation_temp_rating("XYZ") is None

    @pytest.mark.parametrize("count,factor", [
        (1, 1.0), (3, 1.0), (4, 0.8), (9, 0.7), (20, 0.5), (30, 0.45), (40, 0.4), (41, 0.35), (200, 0.35),
    ])
    def test_adjustment_factor(self, count, factor):
        assert nec_tables.adjustment_factor(count) == factor


class TestCircuitDefaults:

    def test_values(self):
        defaults = nec_tables.get_circuit_defaults()
        assert defaults["private_conduit"]["type"] == "PVC-40"
        assert defaults["conductor"]["size"] == "12 AWG"
        assert defaults["neutral_policy"] == "load"

    def test_returns_copy(self):
        nec_tables.get_circuit_defaults()["private_conduit"]["type"] = "EMT"
        assert nec_tables.get_circuit_defaults()["private_conduit"]["type"] == "PVC-40"
