#!/usr/bin/env python3
"""
Conductors Module
Insulated conductors and multiconductor cables ("conduitables").

A conduitable can be placed in at most one raceway (conduit or bundle)
at a time. It keeps a back reference to that raceway so that moving it
into another raceway takes it out of the previous one.

- Conductor: a single insulated wire with a role (hot, neutral, ground)
- Cable: one physical unit holding the circuit conductors; counts as one
  item for conduit fill, with its area taken from the outer diameter

Author: Circuit Topology Skill
Standards: NEC 2023 Article 310, Article 320 (AC), 330 (MC), 334 (NM)
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

import nec_tables
from voltage_systems import VoltageSystemAC


class Role(Enum):
    HOT = "Hot"
    NEUCC = "Neutral (current-carrying)"
    NEUNCC = "Neutral (non current-carrying)"
    GND = "Equipment grounding"
    NCONC = "Non current-carrying"

    @property
    def is_current_carrying(self) -> bool:
        return self in (Role.HOT, Role.NEUCC)


class Metal(Enum):
    COPPER = "copper"
    ALUMINUM = "aluminum"


class CableType(Enum):
    AC = ("AC", "steel")
    MC = ("MC", "steel")
    NM = ("NM", "pvc")
    NMC = ("NMC", "pvc")
    NMS = ("NMS", "pvc")

    def __init__(self, label: str, jacket_material: str):
        self.label = label
        self.jacket_material = jacket_material


MINIMUM_CABLE_OD_IN = 0.25


def neutral_role(neutral_current_carrying: bool) -> Role:
    return Role.NEUCC if neutral_current_carrying else Role.NEUNCC


@dataclass(eq=False)
class Conductor:
    size: str = "12 AWG"
    metal: Metal = Metal.COPPER
    insulation: str = "THW"
    role: Role = Role.HOT
    length_ft: float = 100.0
    container: Optional[object] = field(default=None, init=False, repr=False)

    def __post_init__(self):
        nec_tables.size_index(self.size)

    @property
    def insulated_area_in2(self) -> float:
        """Table 5 area, 0 when the size/insulation pair is not tabulated."""
        return nec_tables.insulated_area(self.size, self.insulation) or 0.0

    @property
    def current_carrying_count(self) -> int:
        return 1 if self.role.is_current_carrying else 0

    @property
    def temperature_rating(self) -> Optional[int]:
        return nec_tables.insulation_temp_rating(self.insulation)

    def clone(self) -> "Conductor":
        return Conductor(
            size=self.size,
            metal=self.metal,
            insulation=self.insulation,
            role=self.role,
            length_ft=self.length_ft,
        )

    def leave_container(self) -> None:
        if self.container is not None:
            self.container.remove(self)

    @property
    def description(self) -> str:
        return f"{self.size} {self.metal.value} {self.insulation} ({self.role.value})"


class Cable:
    """
    Multiconductor cable.

    Internal conductors follow the voltage system given to set_system():
    phase A always, phases B/C and the neutral only where the system
    has them, and one equipment grounding conductor.
    """

    def __init__(
        self,
        cable_type: CableType = CableType.MC,
        voltage_system: VoltageSystemAC = VoltageSystemAC.V120_1PH_2W,
        neutral_current_carrying: bool = True,
        size: str = "12 AWG",
        metal: Metal = Metal.COPPER,
        insulation: str = "THHN",
        outer_diameter_in: float = MINIMUM_CABLE_OD_IN,
        jacketed: bool = False,
        length_ft: float = 100.0,
    ):
        self.cable_type = cable_type
        self.jacketed = jacketed
        self.length_ft = length_ft
        self.container = None
        self._outer_diameter_in = max(outer_diameter_in, MINIMUM_CABLE_OD_IN)
        self.phase_a = Conductor(size, metal, insulation, Role.HOT, length_ft)
        self.phase_b: Optional[Conductor] = None
        self.phase_c: Optional[Conductor] = None
        self.neutral: Optional[Conductor] = None
        self.ground = Conductor(size, metal, insulation, Role.GND, length_ft)
        self.voltage_system = voltage_system
        self.set_system(voltage_system, neutral_current_carrying)

    def set_system(self, voltage_system: VoltageSystemAC, neutral_current_carrying: bool = True) -> None:
        """Derive the internal phase and neutral conductors from the system."""
        self.voltage_system = voltage_system
        phase_b = phase_c = neutral = False
        if voltage_system.has_hot_and_neutral_only():
            neutral = True
        elif voltage_system.has_2_hots_only():
            phase_b = True
        elif voltage_system.has_2_hots_and_neutral_only():
            phase_b = neutral = True
        else:
            phase_b = phase_c = True
            neutral = voltage_system.wires == 4

        self.phase_b = self._like_phase_a(Role.HOT) if phase_b else None
        self.phase_c = self._like_phase_a(Role.HOT) if phase_c else None
        self.neutral = self._like_phase_a(neutral_role(neutral_current_carrying)) if neutral else None

    def _like_phase_a(self, role: Role) -> Conductor:
        conductor = self.phase_a.clone()
        conductor.role = role
        return conductor

    @property
    def conductors(self) -> list[Conductor]:
        return [c for c in (self.phase_a, self.phase_b, self.phase_c, self.neutral, self.ground) if c is not None]

    @property
    def outer_diameter_in(self) -> float:
        return self._outer_diameter_in

    @outer_diameter_in.setter
    def outer_diameter_in(self, value: float) -> None:
        self._outer_diameter_in = max(value, MINIMUM_CABLE_OD_IN)

    @property
    def insulated_area_in2(self) -> float:
        """Cross-sectional area of the whole cable (Chapter 9 Note 9)."""
        return math.pi * 0.25 * self._outer_diameter_in ** 2

    @property
    def current_carrying_count(self) -> int:
        return sum(c.current_carrying_count for c in self.conductors)

    @property
    def size(self) -> str:
        return self.phase_a.size

    @property
    def metal(self) -> Metal:
        return self.phase_a.metal

    @property
    def insulation(self) -> str:
        return self.phase_a.insulation

    @property
    def temperature_rating(self) -> Optional[int]:
        return self.phase_a.temperature_rating

    def set_phase_conductor_size(self, size: str) -> None:
        """Size phases and neutral; grounding conductor is sized separately."""
        nec_tables.size_index(size)
        for conductor in (self.phase_a, self.phase_b, self.phase_c, self.neutral):
            if conductor is not None:
                conductor.size = size

    def set_grounding_conductor_size(self, size: str) -> None:
        nec_tables.size_index(size)
        self.ground.size = size

    def set_metal(self, metal: Metal) -> None:
        for conductor in self.conductors:
            conductor.metal = metal

    def set_insulation(self, insulation: str) -> None:
        for conductor in self.conductors:
            conductor.insulation = insulation

    def clone(self) -> "Cable":
        cable = Cable(
            cable_type=self.cable_type,
            voltage_system=self.voltage_system,
            size=self.phase_a.size,
            metal=self.phase_a.metal,
            insulation=self.phase_a.insulation,
            outer_diameter_in=self._outer_diameter_in,
            jacketed=self.jacketed,
            length_ft=self.length_ft,
        )
        cable.phase_a = self.phase_a.clone()
        cable.phase_b = self.phase_b.clone() if self.phase_b else None
        cable.phase_c = self.phase_c.clone() if self.phase_c else None
        cable.neutral = self.neutral.clone() if self.neutral else None
        cable.ground = self.ground.clone()
        return cable

    def leave_container(self) -> None:
        if self.container is not None:
            self.container.remove(self)

    @property
    def description(self) -> str:
        return f"{self.cable_type.label} cable, {len(self.conductors)}#{self.size} {self.metal.value}"

    def __repr__(self) -> str:
        return f"Cable({self.cable_type.label}, {self.voltage_system.label}, {self.size})"


Conduitable = Union[Conductor, Cable]


def make_entity_like(template: Conduitable) -> Conduitable:
    """
    New conduitable with the same attributes as the template.

    The result shares nothing with the template and is not in any raceway.
    """
    return template.clone()
