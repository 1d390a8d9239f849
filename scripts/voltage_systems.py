#!/usr/bin/env python3
"""
Voltage Systems Module
Standard AC distribution systems (voltage, phases, wires).

The system shape decides which circuit conductors exist:
- 1Ø 2W hot + neutral (120V, 277V, 208V high leg)
- 1Ø 2W two hots (208V, 240V, 480V)
- 1Ø 3W two hots + neutral
- 3Ø 3W three hots
- 3Ø 4W three hots + neutral

Author: Circuit Topology Skill
Standards: NEC 2023 Article 200, Article 220
"""

import math
from enum import Enum


class VoltageSystemAC(Enum):
    V120_1PH_2W = ("120V 1Ø 2W", 120, 1, 2)
    V208_1PH_2W = ("208V 1Ø 2W", 208, 1, 2)
    V208_1PH_2WN = ("208V 1Ø 2W (high leg)", 208, 1, 2)
    V208_1PH_3W = ("208V 1Ø 3W", 208, 1, 3)
    V208_3PH_3W = ("208V 3Ø 3W", 208, 3, 3)
    V208_3PH_4W = ("208V 3Ø 4W", 208, 3, 4)
    V240_1PH_2W = ("240V 1Ø 2W", 240, 1, 2)
    V240_1PH_3W = ("240V 1Ø 3W", 240, 1, 3)
    V240_3PH_3W = ("240V 3Ø 3W", 240, 3, 3)
    V240_3PH_4W = ("240V 3Ø 4W", 240, 3, 4)
    V277_1PH_2W = ("277V 1Ø 2W", 277, 1, 2)
    V480_1PH_2W = ("480V 1Ø 2W", 480, 1, 2)
    V480_1PH_3W = ("480V 1Ø 3W", 480, 1, 3)
    V480_3PH_3W = ("480V 3Ø 3W", 480, 3, 3)
    V480_3PH_4W = ("480V 3Ø 4W", 480, 3, 4)

    def __init__(self, label: str, voltage: int, phases: int, wires: int):
        self.label = label
        self.voltage = voltage
        self.phases = phases
        self.wires = wires

    @property
    def factor(self) -> float:
        """√3 for three phase systems, 1 otherwise."""
        return math.sqrt(3) if self.phases == 3 else 1.0

    def has_neutral(self) -> bool:
        return self not in _NO_NEUTRAL

    def is_high_leg(self) -> bool:
        return self is VoltageSystemAC.V208_1PH_2WN

    def has_hot_and_neutral_only(self) -> bool:
        return self in (
            VoltageSystemAC.V120_1PH_2W,
            VoltageSystemAC.V277_1PH_2W,
            VoltageSystemAC.V208_1PH_2WN,
        )

    def has_2_hots_only(self) -> bool:
        return self in (
            VoltageSystemAC.V208_1PH_2W,
            VoltageSystemAC.V240_1PH_2W,
            VoltageSystemAC.V480_1PH_2W,
        )

    def has_2_hots_and_neutral_only(self) -> bool:
        return self.phases == 1 and self.wires == 3

    def is_3ph_4w(self) -> bool:
        return self.phases == 3 and self.wires == 4

    @classmethod
    def from_label(cls, label: str) -> "VoltageSystemAC":
        for system in cls:
            if system.label == label:
                return system
        raise ValueError(f"Unknown voltage system: {label}")

    def __str__(self) -> str:
        return self.label


_NO_NEUTRAL = frozenset({
    VoltageSystemAC.V208_1PH_2W,
    VoltageSystemAC.V208_3PH_3W,
    VoltageSystemAC.V240_1PH_2W,
    VoltageSystemAC.V240_3PH_3W,
    VoltageSystemAC.V480_1PH_2W,
    VoltageSystemAC.V480_3PH_3W,
})
