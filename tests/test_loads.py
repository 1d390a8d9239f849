"""Unit tests for loads and voltage systems."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import math

import pytest

from loads import GeneralLoad
from voltage_systems import VoltageSystemAC


class TestVoltageSystemAC:

    def test_attributes(self):
        system = VoltageSystemAC.V480_3PH_4W
        assert system.voltage == 480
        assert system.phases == 3
        assert system.wires == 4
        assert system.factor == pytest.approx(math.sqrt(3))

    @pytest.mark.parametrize("system", [
        VoltageSystemAC.V208_1PH_2W,
        VoltageSystemAC.V208_3PH_3W,
        VoltageSystemAC.V240_1PH_2W,
        VoltageSystemAC.V240_3PH_3W,
        VoltageSystemAC.V480_1PH_2W,
        VoltageSystemAC.V480_3PH_3W,
    ])
    def test_systems_without_neutral(self, system):
        assert not system.has_neutral()

    def test_high_leg_has_neutral(self):
        system = VoltageSystemAC.V208_1PH_2WN
        assert system.has_neutral()
        assert system.is_high_leg()
        assert system.has_hot_and_neutral_only()

    def test_shape_predicates(self):
        assert VoltageSystemAC.V277_1PH_2W.has_hot_and_neutral_only()
        assert VoltageSystemAC.V240_1PH_2W.has_2_hots_only()
        assert VoltageSystemAC.V240_1PH_3W.has_2_hots_and_neutral_only()
        assert VoltageSystemAC.V208_3PH_4W.is_3ph_4w()
        assert not VoltageSystemAC.V208_3PH_3W.is_3ph_4w()

    def test_from_label(self):
        assert VoltageSystemAC.from_label("240V 1Ø 3W") is VoltageSystemAC.V240_1PH_3W
        with pytest.raises(ValueError):
            VoltageSystemAC.from_label("600V 3Ø 3W")

    def test_fifteen_systems(self):
        assert len(list(VoltageSystemAC)) == 15


class TestGeneralLoad:

    def test_mca_defaults_to_nominal_current(self):
        load = GeneralLoad(nominal_current=32)
        assert load.mca == 32

    def test_negative_current_raises(self):
        with pytest.raises(ValueError):
            GeneralLoad(nominal_current=-1)

    def test_single_phase_neutral_is_current_carrying(self):
        assert GeneralLoad(VoltageSystemAC.V120_1PH_2W).is_neutral_current_carrying()
        assert GeneralLoad(VoltageSystemAC.V240_1PH_3W).is_neutral_current_carrying()

    def test_three_phase_four_wire_neutral_depends_on_load(self):
        assert not GeneralLoad(VoltageSystemAC.V480_3PH_4W).is_neutral_current_carrying()
        assert GeneralLoad(VoltageSystemAC.V480_3PH_4W, nonlinear=True).is_neutral_current_carrying()

    def test_no_neutral(self):
        assert not GeneralLoad(VoltageSystemAC.V480_3PH_3W, nonlinear=True).is_neutral_current_carrying()

    def test_shape_changes_with_voltage_system(self):
        load = GeneralLoad(VoltageSystemAC.V120_1PH_2W)
        before = load.shape
        load.voltage_system = VoltageSystemAC.V208_1PH_2W
        assert load.shape != before

    def test_apparent_power(self):
        load = GeneralLoad(VoltageSystemAC.V480_3PH_3W, nominal_current=10)
        assert load.apparent_power_va == pytest.approx(8313.8, abs=0.1)
