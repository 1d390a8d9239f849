#!/usr/bin/env python3
"""
Circuit Topology Module
Routing of the conductor sets of a circuit and its validation.

A circuit feeds one load with one or more parallel sets of conductors
(or cables) and is installed in exactly one of these modes:
- Free air
- Private conduit (one or more, owned by the circuit)
- Shared conduit (owned by the caller, used by several circuits)
- Private bundle
- Shared bundle

The circuit keeps its conductor list consistent with the load voltage
system, the number of sets and the number of private conduits. The
load is read again before every derivation, so changes made to the
load are picked up on the next query.

Validation problems never raise. They are recorded in result_messages
and the circuit falls back to free air.

Author: Circuit Topology Skill
Standards: NEC 2023 Article 240, 250.122, 300.3(B), 310.10(G), 310.15
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union

import nec_tables
from conductors import Cable, CableType, Conductor, Metal, Role, make_entity_like, neutral_role
from loads import GeneralLoad
from ocpd import OCPD, egc_size_for
from raceways import Bundle, Conduit
from result_messages import ResultMessage, ResultMessages


logger = logging.getLogger(__name__)

ERROR200 = ResultMessage(-200, "The load object is not valid.")
ERROR210 = ResultMessage(-210, "More than one set of conductors or cables cannot be in a shared conduit.")
ERROR220 = ResultMessage(-220, "More than one set of conductors or cables cannot be in a shared bundle.")
ERROR230 = ResultMessage(-230, "The provided shared conduit is not valid.")
ERROR240 = ResultMessage(-240, "The provided shared bundle is not valid.")
ERROR250 = ResultMessage(-250, "Changing the number of conduits is only allowed when in private conduit mode.")
ERROR280 = ResultMessage(-280, "Private conduit is available only in private conduit mode.")
ERROR282 = ResultMessage(-282, "Private bundle is available only in private bundle mode.")
ERROR284 = ResultMessage(-284, "Circuit phase, neutral and grounding insulated conductors are available only when using conductors, not when using cables.")
ERROR286 = ResultMessage(-286, "Circuit cables are available only when using cables, not when using conductors.")
WARNN200 = ResultMessage(200, "Insulated conductors are being used in free air. This could be considered a bad practice.")
WARNN205 = ResultMessage(205, "Insulated conductors are being used in a bundle. This could be considered a bad practice.")
WARNN210 = ResultMessage(210, "Cables are being used in conduit. This could be an expensive practice.")

MODE_MESSAGES = (
    WARNN200, WARNN205, WARNN210,
    ERROR210, ERROR220, ERROR230, ERROR240, ERROR250, ERROR280, ERROR282,
)

# 310.15(C)(1) does not apply to bundles up to 24 in long
BUNDLE_ADJUSTMENT_MIN_LENGTH_IN = 24

# NEC 110.14(C)
TERMINATION_TEMP_RATINGS = (60, 75, 90)


class CircuitMode(Enum):
    FREE_AIR = "Free air"
    PRIVATE_CONDUIT = "Private conduit"
    SHARED_CONDUIT = "Shared conduit"
    PRIVATE_BUNDLE = "Private bundle"
    SHARED_BUNDLE = "Shared bundle"


class NeutralPolicy(Enum):
    """How the neutral of a 3Ø 4W circuit is counted."""
    LOAD = "load"
    CURRENT_CARRYING = "current_carrying"
    NON_CURRENT_CARRYING = "non_current_carrying"


# Placements: the circuit holds exactly one of these at any time.

@dataclass(frozen=True)
class FreeAir:
    mode: ClassVar[CircuitMode] = CircuitMode.FREE_AIR

    @property
    def container(self) -> None:
        return None


@dataclass(frozen=True)
class PrivateConduit:
    conduit: Conduit
    mode: ClassVar[CircuitMode] = CircuitMode.PRIVATE_CONDUIT

    @property
    def container(self) -> Conduit:
        return self.conduit


@dataclass(frozen=True)
class SharedConduit:
    conduit: Conduit
    mode: ClassVar[CircuitMode] = CircuitMode.SHARED_CONDUIT

    @property
    def container(self) -> Conduit:
        return self.conduit


@dataclass(frozen=True)
class PrivateBundle:
    bundle: Bundle
    mode: ClassVar[CircuitMode] = CircuitMode.PRIVATE_BUNDLE

    @property
    def container(self) -> Bundle:
        return self.bundle


@dataclass(frozen=True)
class SharedBundle:
    bundle: Bundle
    mode: ClassVar[CircuitMode] = CircuitMode.SHARED_BUNDLE

    @property
    def container(self) -> Bundle:
        return self.bundle


Placement = Union[FreeAir, PrivateConduit, SharedConduit, PrivateBundle, SharedBundle]

_CONDUIT_MODES = (CircuitMode.PRIVATE_CONDUIT, CircuitMode.SHARED_CONDUIT)
_BUNDLE_MODES = (CircuitMode.PRIVATE_BUNDLE, CircuitMode.SHARED_BUNDLE)
_SHARED_MODES = (CircuitMode.SHARED_CONDUIT, CircuitMode.SHARED_BUNDLE)


def _is_valid_load(load) -> bool:
    return all(
        hasattr(load, attr)
        for attr in ("voltage_system", "nominal_current", "max_ocpd_rating",
                     "nhsr_rule_applies", "is_neutral_current_carrying")
    )


def _entity_key(entity) -> tuple:
    if isinstance(entity, Cable):
        return ("cable", entity.voltage_system, entity.neutral.role if entity.neutral else None)
    return ("conductor", entity.role)


class Circuit:
    """
    Conductors or cables feeding one load, and where they are installed.

    A new circuit is in private conduit mode with one set of conductors.
    """

    def __init__(self, load, neutral_policy: Optional[NeutralPolicy] = None):
        defaults = nec_tables.get_circuit_defaults()
        self.result_messages = ResultMessages()

        if neutral_policy is None:
            neutral_policy = NeutralPolicy(defaults.get("neutral_policy", "load"))
        self.neutral_policy = neutral_policy

        self._load = GeneralLoad()
        if _is_valid_load(load):
            self._load = load
        else:
            self.result_messages.add(ERROR200)
            logger.warning("Circuit created with an invalid load; using %s", self._load.voltage_system)

        conduit_defaults = defaults.get("private_conduit", {})
        self._private_conduit = Conduit(
            conduit_type=conduit_defaults.get("type", "PVC-40"),
            minimum_trade=conduit_defaults.get("minimum_trade", '1/2"'),
        )
        self._private_bundle = Bundle()

        conductor_defaults = defaults.get("conductor", {})
        size = conductor_defaults.get("size", "12 AWG")
        metal = Metal(conductor_defaults.get("metal", "copper"))
        insulation = conductor_defaults.get("insulation", "THW")
        self._phase_a = Conductor(size, metal, insulation, Role.HOT)
        self._ground = Conductor(size, metal, insulation, Role.GND)

        cable_defaults = defaults.get("cable", {})
        self._cable = Cable(
            cable_type=CableType[cable_defaults.get("type", "MC")],
            voltage_system=self._load.voltage_system,
            neutral_current_carrying=self._neutral_current_carrying(),
            size=size,
            metal=metal,
            insulation=insulation,
            outer_diameter_in=cable_defaults.get("outer_diameter_in", 0.25),
        )

        self._using_cable = False
        self._termination_temp_rating: Optional[int] = None
        self._number_of_sets = 1
        self._number_of_conduits = 1
        self._conduitables: list = []
        self._placement: Placement = PrivateConduit(self._private_conduit)
        self._ocpd = OCPD(self)
        self._synchronize()

    # ------------------------------------------------------------------
    # Load
    # ------------------------------------------------------------------

    @property
    def load(self):
        return self._load

    def set_load(self, load) -> None:
        """Replace the load; an invalid load is rejected with an error."""
        self.result_messages.remove(ERROR200)
        if not _is_valid_load(load):
            self.result_messages.add(ERROR200)
            logger.warning("Invalid load rejected, keeping %s", self._load.voltage_system)
            return
        self._load = load
        self._synchronize()

    def _neutral_current_carrying(self) -> bool:
        system = self._load.voltage_system
        if not system.is_3ph_4w():
            return self._load.is_neutral_current_carrying()
        if self.neutral_policy is NeutralPolicy.CURRENT_CARRYING:
            return True
        if self.neutral_policy is NeutralPolicy.NON_CURRENT_CARRYING:
            return False
        return self._load.is_neutral_current_carrying()

    # ------------------------------------------------------------------
    # Conductor set synchronization
    # ------------------------------------------------------------------

    def _set_roles(self) -> list:
        """Roles of one set of conductors, phase A first and ground last."""
        system = self._load.voltage_system
        neutral = neutral_role(self._neutral_current_carrying())
        if system.has_hot_and_neutral_only():
            roles = [Role.HOT, neutral]
        elif system.has_2_hots_only():
            roles = [Role.HOT, Role.HOT]
        elif system.has_2_hots_and_neutral_only():
            roles = [Role.HOT, Role.HOT, neutral]
        else:
            roles = [Role.HOT, Role.HOT, Role.HOT]
            if system.wires == 4:
                roles.append(neutral)
        roles.append(Role.GND)
        return roles

    def _list_bound(self) -> int:
        """Number of sets held in the conductor list."""
        if self._placement.mode is CircuitMode.PRIVATE_CONDUIT:
            return self.sets_per_conduit
        return self._number_of_sets

    def _required_keys(self) -> tuple:
        bound = self._list_bound()
        if self._using_cable:
            system = self._load.voltage_system
            neutral = neutral_role(self._neutral_current_carrying()) if system.has_neutral() else None
            return (("cable", system, neutral),) * bound
        return tuple(("conductor", role) for role in self._set_roles()) * bound

    def _build_list(self) -> list:
        bound = self._list_bound()
        if self._using_cable:
            self._cable.set_system(self._load.voltage_system, self._neutral_current_carrying())
            return [self._cable] + [make_entity_like(self._cable) for _ in range(bound - 1)]

        first_set = [self._phase_a]
        for role in self._set_roles()[1:-1]:
            conductor = make_entity_like(self._phase_a)
            conductor.role = role
            first_set.append(conductor)
        first_set.append(self._ground)

        conduitables = list(first_set)
        for _ in range(bound - 1):
            conduitables.extend(make_entity_like(c) for c in first_set)
        return conduitables

    def _synchronize(self) -> bool:
        """
        Rebuild the conductor list if it does not match the required layout.

        Returns True if the list was rebuilt.
        """
        required = self._required_keys()
        if tuple(_entity_key(e) for e in self._conduitables) == required:
            return False

        for conduitable in self._conduitables:
            conduitable.leave_container()
        self._conduitables = self._build_list()
        self._attach()
        logger.debug(
            "Rebuilt conductor list: %d entities (%s, %d sets)",
            len(self._conduitables), self._placement.mode.value, self._number_of_sets
        )
        return True

    def _attach(self) -> None:
        container = self._placement.container
        if container is not None:
            for conduitable in self._conduitables:
                container.add(conduitable)

    # ------------------------------------------------------------------
    # Mode transitions
    # ------------------------------------------------------------------

    def _clear_mode_messages(self) -> None:
        self.result_messages.remove(*MODE_MESSAGES)

    def _add_mode_warnings(self) -> None:
        self.result_messages.remove(WARNN200, WARNN205, WARNN210)
        mode = self._placement.mode
        if self._using_cable:
            if mode in _CONDUIT_MODES:
                self.result_messages.add(WARNN210)
        elif mode is CircuitMode.FREE_AIR:
            self.result_messages.add(WARNN200)
        elif mode in _BUNDLE_MODES:
            self.result_messages.add(WARNN205)

    def _set_placement(self, placement: Placement) -> None:
        for conduitable in self._conduitables:
            conduitable.leave_container()
        self._placement = placement
        self._synchronize()
        self._attach()
        self._add_mode_warnings()
        logger.debug("Circuit mode set to %s", placement.mode.value)

    def _fall_back_to_free_air(self, error: ResultMessage) -> None:
        self.result_messages.add(error)
        logger.warning("%s Circuit set to free air.", error.text)
        self._set_placement(FreeAir())

    def set_free_air_mode(self) -> None:
        self._clear_mode_messages()
        self._set_placement(FreeAir())

    def set_conduit_mode(self) -> None:
        """Install the circuit in its private conduit(s)."""
        self._clear_mode_messages()
        self._set_placement(PrivateConduit(self._private_conduit))

    def set_shared_conduit_mode(self, shared_conduit: Conduit) -> None:
        """Install the circuit in a conduit shared with other circuits (one set only)."""
        self._clear_mode_messages()
        if not isinstance(shared_conduit, Conduit):
            self._fall_back_to_free_air(ERROR230)
        elif self._number_of_sets > 1:
            self._fall_back_to_free_air(ERROR210)
        else:
            self._set_placement(SharedConduit(shared_conduit))

    def set_bundle_mode(self) -> None:
        """Install the circuit in its private bundle."""
        self._clear_mode_messages()
        self._set_placement(PrivateBundle(self._private_bundle))

    def set_shared_bundle_mode(self, shared_bundle: Bundle) -> None:
        """Install the circuit in a bundle shared with other circuits (one set only)."""
        self._clear_mode_messages()
        if not isinstance(shared_bundle, Bundle):
            self._fall_back_to_free_air(ERROR240)
        elif self._number_of_sets > 1:
            self._fall_back_to_free_air(ERROR220)
        else:
            self._set_placement(SharedBundle(shared_bundle))

    def release(self) -> None:
        """Take every conductor or cable of this circuit out of its raceway."""
        self._clear_mode_messages()
        self._set_placement(FreeAir())

    # ------------------------------------------------------------------
    # Sets and conduits
    # ------------------------------------------------------------------

    @property
    def number_of_sets(self) -> int:
        return self._number_of_sets

    @property
    def number_of_conduits(self) -> int:
        return self._number_of_conduits

    @property
    def sets_per_conduit(self) -> int:
        return self._number_of_sets // self._number_of_conduits

    def set_number_of_sets(self, number_of_sets: int) -> None:
        """
        Set the number of parallel sets, one set per private conduit.

        Raises:
            ValueError: If number_of_sets is less than 1
        """
        if number_of_sets < 1:
            raise ValueError(f"Number of sets must be >= 1, got {number_of_sets}")
        if number_of_sets == self._number_of_sets:
            return
        self._number_of_sets = number_of_sets
        self._number_of_conduits = number_of_sets

        mode = self._placement.mode
        if mode in _SHARED_MODES and number_of_sets > 1:
            self._clear_mode_messages()
            self._fall_back_to_free_air(ERROR210 if mode is CircuitMode.SHARED_CONDUIT else ERROR220)
            return
        self._synchronize()

    def _can_change_conduits(self) -> bool:
        self.result_messages.remove(ERROR250)
        if self._placement.mode is not CircuitMode.PRIVATE_CONDUIT:
            self.result_messages.add(ERROR250)
            logger.warning(ERROR250.text)
            return False
        return True

    def increase_conduits(self) -> None:
        """Use the next number of private conduits that splits the sets evenly."""
        if not self._can_change_conduits():
            return
        for conduits in range(self._number_of_conduits + 1, self._number_of_sets + 1):
            if self._number_of_sets % conduits == 0:
                self._number_of_conduits = conduits
                self._synchronize()
                return

    def decrease_conduits(self) -> None:
        """Use the previous number of private conduits that splits the sets evenly."""
        if not self._can_change_conduits():
            return
        for conduits in range(self._number_of_conduits - 1, 0, -1):
            if self._number_of_sets % conduits == 0:
                self._number_of_conduits = conduits
                self._synchronize()
                return

    # ------------------------------------------------------------------
    # Conductor / cable configuration
    # ------------------------------------------------------------------

    @property
    def using_cable(self) -> bool:
        return self._using_cable

    def set_using_cable(self, using_cable: bool) -> None:
        if using_cable == self._using_cable:
            return
        self._using_cable = using_cable
        self._synchronize()
        self._add_mode_warnings()

    def set_phase_size(self, size: str) -> None:
        """
        Size every conductor of the circuit like phase A.

        Grounding conductors follow too; use set_grounding_size() or
        size_egc_per_ocpd() afterwards for a smaller EGC.
        """
        nec_tables.size_index(size)
        self._phase_a.size = size
        self._ground.size = size
        self._cable.set_phase_conductor_size(size)
        self._cable.set_grounding_conductor_size(size)
        for conduitable in self._conduitables:
            if isinstance(conduitable, Cable):
                conduitable.set_phase_conductor_size(size)
                conduitable.set_grounding_conductor_size(size)
            else:
                conduitable.size = size

    def set_grounding_size(self, size: str) -> None:
        nec_tables.size_index(size)
        self._ground.size = size
        self._cable.set_grounding_conductor_size(size)
        for conduitable in self._conduitables:
            if isinstance(conduitable, Cable):
                conduitable.set_grounding_conductor_size(size)
            elif conduitable.role is Role.GND:
                conduitable.size = size

    def size_egc_per_ocpd(self) -> Optional[str]:
        """
        Size the grounding conductors per NEC 250.122 for the OCPD rating.

        The EGC is not made larger than the phase conductors (250.122(A)).
        Returns the size applied, or None if the table has no entry.
        """
        size = egc_size_for(self._ocpd.rating, self._phase_a.metal)
        if size is None:
            return None
        size = min(size, self._phase_a.size, key=nec_tables.size_index)
        self.set_grounding_size(size)
        return size

    def set_metal(self, metal: Metal) -> None:
        for conductor in (self._phase_a, self._ground):
            conductor.metal = metal
        self._cable.set_metal(metal)
        for conduitable in self._conduitables:
            if isinstance(conduitable, Cable):
                conduitable.set_metal(metal)
            else:
                conduitable.metal = metal

    def set_insulation(self, insulation: str) -> None:
        for conductor in (self._phase_a, self._ground):
            conductor.insulation = insulation
        self._cable.set_insulation(insulation)
        for conduitable in self._conduitables:
            if isinstance(conduitable, Cable):
                conduitable.set_insulation(insulation)
            else:
                conduitable.insulation = insulation

    @property
    def termination_temp_rating(self) -> Optional[int]:
        """Temperature rating of the load terminations, None when unknown."""
        return self._termination_temp_rating

    def set_termination_temp_rating(self, temp_rating: Optional[int]) -> None:
        if temp_rating is not None and temp_rating not in TERMINATION_TEMP_RATINGS:
            raise ValueError(f"Termination temperature rating must be 60, 75 or 90: {temp_rating}")
        self._termination_temp_rating = temp_rating

    # Private raceway settings, allowed in any mode

    def set_private_conduit_type(self, conduit_type: str) -> None:
        self._private_conduit.conduit_type = conduit_type

    def set_private_conduit_minimum_trade(self, minimum_trade: str) -> None:
        self._private_conduit.minimum_trade = minimum_trade

    def set_private_conduit_nipple(self, nipple: bool) -> None:
        self._private_conduit.nipple = nipple

    def set_private_conduit_roof_top_distance(self, distance_in: float) -> None:
        self._private_conduit.roof_top_distance = distance_in

    def reset_private_conduit_roof_top(self) -> None:
        self._private_conduit.reset_roof_top()

    def set_private_bundle_length(self, bundling_length: float) -> None:
        self._private_bundle.bundling_length = bundling_length

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def mode(self) -> CircuitMode:
        return self._placement.mode

    @property
    def placement(self) -> Placement:
        return self._placement

    @property
    def conduitables(self) -> list:
        """Conductors or cables in service (one conduit's worth in private conduit mode)."""
        self._synchronize()
        return list(self._conduitables)

    @property
    def conductors_per_set(self) -> int:
        return len(self._set_roles())

    @property
    def private_conduit(self) -> Optional[Conduit]:
        self._synchronize()
        self.result_messages.remove(ERROR280)
        if self._placement.mode is not CircuitMode.PRIVATE_CONDUIT:
            self.result_messages.add(ERROR280)
            return None
        return self._private_conduit

    @property
    def private_bundle(self) -> Optional[Bundle]:
        self._synchronize()
        self.result_messages.remove(ERROR282)
        if self._placement.mode is not CircuitMode.PRIVATE_BUNDLE:
            self.result_messages.add(ERROR282)
            return None
        return self._private_bundle

    @property
    def shared_conduit(self) -> Optional[Conduit]:
        self._synchronize()
        if isinstance(self._placement, SharedConduit):
            return self._placement.conduit
        return None

    @property
    def shared_bundle(self) -> Optional[Bundle]:
        self._synchronize()
        if isinstance(self._placement, SharedBundle):
            return self._placement.bundle
        return None

    def _conductor_template(self, role: Role) -> Optional[Conductor]:
        self.result_messages.remove(ERROR284)
        if self._using_cable:
            self.result_messages.add(ERROR284)
            return None
        self._synchronize()
        return next((c for c in self._conduitables if c.role is role), None)

    @property
    def phase_conductor(self) -> Optional[Conductor]:
        return self._conductor_template(Role.HOT)

    @property
    def neutral_conductor(self) -> Optional[Conductor]:
        """Neutral of the first set, None if the system has no neutral."""
        if self._conductor_template(Role.HOT) is None:
            return None
        return next((c for c in self._conduitables if c.role in (Role.NEUCC, Role.NEUNCC)), None)

    @property
    def grounding_conductor(self) -> Optional[Conductor]:
        return self._conductor_template(Role.GND)

    @property
    def cable(self) -> Optional[Cable]:
        self.result_messages.remove(ERROR286)
        if not self._using_cable:
            self.result_messages.add(ERROR286)
            return None
        self._synchronize()
        return self._cable

    @property
    def current_carrying_count(self) -> int:
        """Current-carrying conductors in the raceway, or of this circuit in free air."""
        self._synchronize()
        container = self._placement.container
        if container is not None:
            return container.current_carrying_count
        return sum(c.current_carrying_count for c in self._conduitables)

    def _adjustment_factor(self) -> float:
        mode = self._placement.mode
        if mode in _CONDUIT_MODES:
            if self._placement.conduit.nipple:
                return 1.0
            return nec_tables.adjustment_factor(self.current_carrying_count)
        if mode in _BUNDLE_MODES:
            if self._placement.bundle.bundling_length <= BUNDLE_ADJUSTMENT_MIN_LENGTH_IN:
                return 1.0
            return nec_tables.adjustment_factor(self.current_carrying_count)
        if self._using_cable:
            return nec_tables.adjustment_factor(self._cable.current_carrying_count)
        return 1.0

    @property
    def circuit_ampacity(self) -> float:
        """
        Ampacity of all the parallel sets (310.16 with 310.15(C)(1) adjustment).

        With unknown terminations the 60°C column is used unless the current
        per set exceeds 100A and the insulation is rated 75°C or more
        (110.14(C)(1)). With a known termination rating the conductor's own
        column is adjusted, then limited to the termination column.
        """
        self._synchronize()
        template = self._cable if self._using_cable else self._phase_a
        conductor_rating = template.temperature_rating or 60
        factor = self._adjustment_factor()

        if self._termination_temp_rating is None:
            temp_rating = 60
            current_per_set = self._load.nominal_current / self._number_of_sets
            if current_per_set > 100 and conductor_rating >= 75:
                temp_rating = 75
            ampacity = nec_tables.standard_ampacity(template.size, template.metal.value, temp_rating) * factor
        else:
            ampacity = nec_tables.standard_ampacity(template.size, template.metal.value, conductor_rating) * factor
            if self._termination_temp_rating < conductor_rating:
                limit = nec_tables.standard_ampacity(
                    template.size, template.metal.value, self._termination_temp_rating
                )
                ampacity = min(ampacity, limit)

        return round(ampacity * self._number_of_sets, 2)

    @property
    def ocpd(self) -> OCPD:
        return self._ocpd

    def summary(self) -> dict:
        """Circuit topology and sizing results as a dict."""
        self._synchronize()
        template = self._cable if self._using_cable else self._phase_a
        return {
            "voltage_system": self._load.voltage_system.label,
            "mode": self._placement.mode.value,
            "using_cable": self._using_cable,
            "number_of_sets": self._number_of_sets,
            "number_of_conduits": self._number_of_conduits,
            "sets_per_conduit": self.sets_per_conduit,
            "conductors_per_set": self.conductors_per_set,
            "phase_size": template.size,
            "grounding_size": self._ground.size,
            "termination_temp_rating": self._termination_temp_rating,
            "circuit_ampacity_a": self.circuit_ampacity,
            "ocpd_rating_a": self._ocpd.rating,
            "code_reference": "NEC 240.4, 310.15, 310.16",
            "errors": [m.to_dict() for m in self.result_messages.errors],
            "warnings": [m.to_dict() for m in self.result_messages.warnings],
        }

    def __repr__(self) -> str:
        return (
            f"Circuit({self._load.voltage_system.label}, {self._placement.mode.value}, "
            f"{self._number_of_sets} sets)"
        )


if __name__ == "__main__":
    from voltage_systems import VoltageSystemAC

    print("Testing circuit_topology module...")

    load = GeneralLoad(VoltageSystemAC.V480_3PH_4W, nominal_current=40)
    circuit = Circuit(load)
    shared = Conduit("EMT")
    circuit.set_shared_conduit_mode(shared)
    print(f"{circuit}: {len(circuit.conduitables)} conductors, errors={circuit.result_messages.error_count()}")

    circuit.set_conduit_mode()
    circuit.set_number_of_sets(10)
    for _ in range(3):
        circuit.increase_conduits()
        print(f"  conduits={circuit.number_of_conduits}, sets/conduit={circuit.sets_per_conduit}")

    print(f"OCPD rating: {circuit.ocpd.rating}A")
    print("\nAll tests passed!")
