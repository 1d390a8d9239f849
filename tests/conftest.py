"""Shared test fixtures."""

import pytest

from circuit_topology import Circuit
from loads import GeneralLoad
from raceways import Bundle, Conduit
from voltage_systems import VoltageSystemAC


@pytest.fixture
def load_120v():
    return GeneralLoad(VoltageSystemAC.V120_1PH_2W, nominal_current=10)


@pytest.fixture
def load_480v_3ph_4w():
    return GeneralLoad(VoltageSystemAC.V480_3PH_4W, nominal_current=40)


@pytest.fixture
def circuit(load_120v):
    return Circuit(load_120v)


@pytest.fixture
def circuit_480v(load_480v_3ph_4w):
    return Circuit(load_480v_3ph_4w)


@pytest.fixture
def shared_conduit():
    return Conduit("EMT")


@pytest.fixture
def shared_bundle():
    return Bundle(bundling_length=30)
