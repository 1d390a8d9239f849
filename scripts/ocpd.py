#!/usr/bin/env python3
"""
OCPD Module
Overcurrent protective device rating selection.

Implements:
- Standard ampere ratings per NEC 240.6(A)
- Next higher standard rating rule per NEC 240.4(B), not permitted above 800A
- Equipment grounding conductor size per NEC 250.122
- Device rating for a circuit (load constraint or conductor protection)

Author: Circuit Topology Skill
Standards: NEC 2023 Article 240, Article 250.122
"""

from typing import Optional

from conductors import Metal


# Standard OCPD sizes per NEC 240.6
STANDARD_OCPD_SIZES = [
    15, 20, 25, 30, 35, 40, 45, 50, 60, 70, 80, 90, 100,
    110, 125, 150, 175, 200, 225, 250, 300, 350, 400,
    450, 500, 600, 700, 800, 1000, 1200, 1600, 2000,
    2500, 3000, 4000, 5000, 6000
]

# NEC 240.4(B)(3): rounding up is only allowed up to 800A
NHSR_MAX_RATING = 800

# NEC Table 250.122 - rating of the OCPD ahead of the equipment (not exceeding)
EGC_OCPD_LIMITS = [
    15, 20, 60, 100, 200, 300, 400, 500, 600, 800,
    1000, 1200, 1600, 2000, 2500, 3000, 4000, 5000, 6000
]

EGC_SIZES = {
    Metal.COPPER: [
        "14 AWG", "12 AWG", "10 AWG", "8 AWG", "6 AWG", "4 AWG", "3 AWG", "2 AWG",
        "1 AWG", "1/0 AWG", "2/0 AWG", "3/0 AWG", "4/0 AWG", "250 kcmil",
        "350 kcmil", "400 kcmil", "500 kcmil", "700 kcmil", "800 kcmil",
    ],
    Metal.ALUMINUM: [
        "12 AWG", "10 AWG", "8 AWG", "6 AWG", "4 AWG", "2 AWG", "1 AWG", "1/0 AWG",
        "2/0 AWG", "3/0 AWG", "4/0 AWG", "250 kcmil", "350 kcmil", "400 kcmil",
        "600 kcmil", "600 kcmil", "750 kcmil", "1250 kcmil", "1500 kcmil",
    ],
}


def get_rating_for(ampacity: float, nhsr_rule: bool) -> int:
    """
    Standard OCPD rating for a conductor ampacity or load requirement.

    Scans the standard ratings from the top. An exact match is returned
    as is. Otherwise the first rating below the ampacity is returned,
    or the rating just above it when the next higher standard rating
    rule applies and that higher rating does not exceed 800A.

    Args:
        ampacity: Ampacity to protect (A)
        nhsr_rule: True if the next higher standard rating may be used

    Returns:
        Standard rating in amperes (15 minimum, 6000 maximum)
    """
    next_higher = STANDARD_OCPD_SIZES[-1]
    for rating in reversed(STANDARD_OCPD_SIZES):
        if rating == ampacity:
            return rating
        if rating < ampacity:
            if next_higher > NHSR_MAX_RATING:
                return rating
            return next_higher if nhsr_rule else rating
        next_higher = rating
    return STANDARD_OCPD_SIZES[0]


def next_higher_rating(rating: float) -> Optional[int]:
    """Smallest standard rating strictly above `rating` (None above 6000A)."""
    return next((s for s in STANDARD_OCPD_SIZES if s > rating), None)


def next_lower_rating(rating: float) -> Optional[int]:
    """Largest standard rating strictly below `rating` (None at or below 15A)."""
    return next((s for s in reversed(STANDARD_OCPD_SIZES) if s < rating), None)


def egc_size_for(ocpd_rating: float, metal: Metal = Metal.COPPER) -> Optional[str]:
    """
    Minimum equipment grounding conductor size per NEC Table 250.122.

    Args:
        ocpd_rating: Rating of the OCPD ahead of the circuit (A)
        metal: Conductor metal

    Returns:
        Conductor size, or None if the rating is 0 or above 6000A
    """
    if ocpd_rating <= 0 or metal not in EGC_SIZES:
        return None
    for i, limit in enumerate(EGC_OCPD_LIMITS):
        if ocpd_rating <= limit:
            return EGC_SIZES[metal][i]
    return None


class OCPD:
    """
    Overcurrent device protecting a circuit.

    The rating comes from the load's maximum OCPD rating when it has
    one; otherwise the device protects the circuit conductors.

    is_100_percent_rated is informational: it is reported by
    sizing_basis() and does not change the rating.
    """

    def __init__(self, circuit):
        if circuit is None:
            raise ValueError("OCPD requires the circuit it protects")
        self._circuit = circuit
        self.is_100_percent_rated = False

    @property
    def rating(self) -> int:
        load = self._circuit.load
        if load.max_ocpd_rating:
            return get_rating_for(load.max_ocpd_rating, load.nhsr_rule_applies)
        return get_rating_for(self._circuit.circuit_ampacity, load.nhsr_rule_applies)

    def sizing_basis(self) -> dict:
        load = self._circuit.load
        from_load = bool(load.max_ocpd_rating)
        return {
            "rating_a": self.rating,
            "basis": "load_max_ocpd" if from_load else "conductor_ampacity",
            "basis_value_a": load.max_ocpd_rating if from_load else self._circuit.circuit_ampacity,
            "nhsr_rule": load.nhsr_rule_applies,
            "is_100_percent_rated": self.is_100_percent_rated,
            "code_reference": "NEC 240.4(B), 240.6(A)",
        }


if __name__ == "__main__":
    print("Testing ocpd module...")

    for amps, nhsr in [(15, True), (16, True), (16, False), (850, True), (7000, False)]:
        print(f"{amps}A (NHSR={nhsr}) -> {get_rating_for(amps, nhsr)}A")

    print(f"EGC for 200A Cu: {egc_size_for(200)}")
    print(f"EGC for 200A Al: {egc_size_for(200, Metal.ALUMINUM)}")

    print("\nAll tests passed!")
