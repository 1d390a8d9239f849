#!/usr/bin/env python3
"""
Loads Module
Electrical load as seen by the circuit that feeds it.

A load exposes:
- Voltage system (voltage, phases, wires)
- Nominal current and minimum conductor ampacity (MCA)
- Maximum overcurrent device rating (0 = size to protect the conductor)
- Whether the next higher standard rating rule may be applied (NEC 240.4(B))
- Whether the neutral is a current-carrying conductor

Current is entered directly, not derived from power and power factor.

Author: Circuit Topology Skill
Standards: NEC 2023 Article 240.4, 310.15(E)
"""

from dataclasses import dataclass, field
from typing import Optional

from voltage_systems import VoltageSystemAC


@dataclass
class GeneralLoad:
    voltage_system: VoltageSystemAC = VoltageSystemAC.V120_1PH_2W
    nominal_current: float = 10.0
    mca: Optional[float] = None
    max_ocpd_rating: float = 0
    nhsr_rule_applies: bool = True
    nonlinear: bool = False
    description: str = field(default="")

    def __post_init__(self):
        if self.nominal_current < 0:
            raise ValueError(f"Nominal current must be >= 0, got {self.nominal_current}")
        if self.mca is None:
            self.mca = self.nominal_current

    def is_neutral_current_carrying(self) -> bool:
        """
        NEC 310.15(E): the neutral of a 3Ø 4W system only counts when the
        load is nonlinear (harmonic currents). Every other neutral carries
        the unbalanced current and always counts.
        """
        if not self.voltage_system.has_neutral():
            return False
        if self.voltage_system.is_3ph_4w():
            return self.nonlinear
        return True

    @property
    def shape(self) -> tuple:
        """(phases, wires, has neutral, neutral current-carrying)."""
        return (
            self.voltage_system.phases,
            self.voltage_system.wires,
            self.voltage_system.has_neutral(),
            self.is_neutral_current_carrying(),
        )

    @property
    def apparent_power_va(self) -> float:
        return round(self.voltage_system.voltage * self.nominal_current * self.voltage_system.factor, 1)
