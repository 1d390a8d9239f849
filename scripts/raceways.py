#!/usr/bin/env python3
"""
Raceways Module
Conduits and bundles holding conductors and cables.

Implements:
- Membership tracking (a conduitable is in at most one raceway)
- Conduit fill area and allowed fill percentage (Chapter 9 Table 1)
- Trade size selection from Table 4 areas
- Current-carrying conductor count for adjustment factors (310.15(C)(1))
- Rooftop condition (310.15(B)(2)) and nipple rule (Chapter 9 Note 4)

Private raceways belong to one circuit. Shared raceways are created by
the caller and referenced by several circuits; they are not locked, so
callers mutating one from several threads must serialize access.

Author: Circuit Topology Skill
Standards: NEC 2023 Chapter 9 Tables 1, 4 and 5, Article 310.15
"""

import logging
from typing import Optional

import nec_tables
from conductors import Cable, Conduitable, Conductor, Role
from result_messages import ResultMessage, ResultMessages


logger = logging.getLogger(__name__)

ERROR100 = ResultMessage(-100, "The calculated trade size for this conduit is not recognized by NEC Table 4 (not available).")
ERROR110 = ResultMessage(-110, "The minimum conduit trade size is not valid.")
ERROR120 = ResultMessage(-120, "The type of this conduit is not valid.")

ROOFTOP_MAX_DISTANCE_IN = 36


class _Raceway:
    """Membership shared by conduits and bundles."""

    def __init__(self):
        self._conduitables: list = []

    def add(self, conduitable: Conduitable) -> None:
        """Put a conduitable here, taking it out of its previous raceway."""
        if self.has(conduitable):
            return
        if conduitable.container is not None:
            conduitable.container.remove(conduitable)
        self._conduitables.append(conduitable)
        conduitable.container = self

    def remove(self, conduitable: Conduitable) -> None:
        for i, item in enumerate(self._conduitables):
            if item is conduitable:
                del self._conduitables[i]
                conduitable.container = None
                return

    def empty(self) -> None:
        for conduitable in list(self._conduitables):
            self.remove(conduitable)

    def has(self, conduitable: Conduitable) -> bool:
        return any(item is conduitable for item in self._conduitables)

    def is_empty(self) -> bool:
        return not self._conduitables

    @property
    def conduitables(self) -> list:
        return list(self._conduitables)

    @property
    def conduitables_area(self) -> float:
        """Sum of insulated areas (in²); a cable counts with its own area."""
        return sum(c.insulated_area_in2 for c in self._conduitables)

    @property
    def filling_conductor_count(self) -> int:
        """Number of items in the raceway; a cable counts as one."""
        return len(self._conduitables)

    @property
    def current_carrying_count(self) -> int:
        return sum(c.current_carrying_count for c in self._conduitables)

    def __len__(self) -> int:
        return len(self._conduitables)


class Conduit(_Raceway):

    def __init__(self, conduit_type: str = "PVC-40", nipple: bool = False, minimum_trade: str = '1/2"'):
        super().__init__()
        self.conduit_type = conduit_type
        self.nipple = nipple
        self.minimum_trade = minimum_trade
        self.roof_top_distance = -1.0
        self.result_messages = ResultMessages()

    @property
    def material(self) -> Optional[str]:
        return nec_tables.conduit_material(self.conduit_type)

    @property
    def is_magnetic(self) -> bool:
        return nec_tables.is_magnetic(self.conduit_type)

    @property
    def is_rooftop_condition(self) -> bool:
        """Exposed to sunlight within 36" (0.9 m) above a rooftop."""
        return 0 < self.roof_top_distance <= ROOFTOP_MAX_DISTANCE_IN

    def reset_roof_top(self) -> None:
        self.roof_top_distance = -1.0

    @property
    def max_allowed_fill_percentage(self) -> int:
        """Chapter 9 Table 1 and Note 4."""
        if self.nipple:
            return 60
        count = self.filling_conductor_count
        if count <= 1:
            return 53
        if count == 2:
            return 31
        return 40

    def _validate(self) -> bool:
        self.result_messages.remove(ERROR100, ERROR110, ERROR120)
        valid = True
        if not nec_tables.is_valid_conduit_type(self.conduit_type):
            self.result_messages.add(ERROR120)
            valid = False
        if not nec_tables.is_valid_trade_size(self.minimum_trade):
            self.result_messages.add(ERROR110)
            valid = False
        return valid

    @property
    def trade_size(self) -> Optional[str]:
        """
        Smallest trade size (at or above minimum_trade) holding the fill.

        Returns None and records an error when no listed size is big
        enough or the conduit type/minimum trade is not valid.
        """
        if not self._validate():
            return None
        required = self.conduitables_area / (self.max_allowed_fill_percentage * 0.01)
        trade = nec_tables.trade_size_for_area(required, self.conduit_type, self.minimum_trade)
        if trade is None:
            self.result_messages.add(ERROR100)
            logger.warning("No %s trade size holds %.4f in²", self.conduit_type, required)
        return trade

    @property
    def area(self) -> float:
        """Internal area (in²) of the selected trade size, 0 if none."""
        trade = self.trade_size
        if trade is None:
            return 0.0
        return nec_tables.conduit_area(self.conduit_type, trade) or 0.0

    def fill_percentage(self, trade_size: Optional[str] = None) -> float:
        """
        Percent of the conduit area used by the conduitables.

        Args:
            trade_size: Evaluate this trade size instead of the selected one

        Returns:
            Fill percentage, 0 when the type/trade size pair has no area
        """
        if trade_size is None:
            trade_size = self.trade_size
            if trade_size is None:
                return 0.0
        area = nec_tables.conduit_area(self.conduit_type, trade_size)
        if not area:
            return 0.0
        return 100 * self.conduitables_area / area

    @property
    def biggest_one_egc(self) -> Optional[Conductor]:
        """
        Largest equipment grounding conductor among the loose conductors.

        Grounding conductors inside cables are not considered.
        """
        grounds = [c for c in self._conduitables if isinstance(c, Conductor) and c.role == Role.GND]
        if not grounds:
            return None
        return max(grounds, key=lambda c: nec_tables.size_index(c.size))

    def trade_size_for_one_egc(self) -> Optional[str]:
        """
        Trade size if all the loose EGCs were replaced by the biggest one (250.122(C)).

        Returns None when the conduit holds no loose grounding conductor.
        """
        egc = self.biggest_one_egc
        if egc is None or not self._validate():
            return None
        area = egc.insulated_area_in2 + sum(
            c.insulated_area_in2 for c in self._conduitables
            if not (isinstance(c, Conductor) and c.role == Role.GND)
        )
        trade = nec_tables.trade_size_for_area(
            area / (self.max_allowed_fill_percentage * 0.01), self.conduit_type, self.minimum_trade
        )
        if trade is None:
            self.result_messages.add(ERROR100)
        return trade

    def fill_summary(self) -> dict:
        trade = self.trade_size
        return {
            "conduit_type": self.conduit_type,
            "trade_size": trade,
            "conduitables": self.filling_conductor_count,
            "current_carrying": self.current_carrying_count,
            "conduitables_area_in2": round(self.conduitables_area, 4),
            "max_fill_pct": self.max_allowed_fill_percentage,
            "fill_pct": round(self.fill_percentage(trade), 1) if trade else 0.0,
            "rooftop": self.is_rooftop_condition,
            "code_reference": "NEC Chapter 9 Tables 1 and 4",
            "notes": [m.text for m in self.result_messages.errors],
        }

    def __repr__(self) -> str:
        return f"Conduit({self.conduit_type}, {len(self)} conduitables)"


class Bundle(_Raceway):
    """Conductors or cables installed without a raceway, grouped together."""

    def __init__(self, bundling_length: float = 0):
        super().__init__()
        self.bundling_length = bundling_length

    @classmethod
    def of_cables(cls, cable: Cable, number: int, bundling_length: float = 0) -> "Bundle":
        """Bundle holding `number` copies of a cable."""
        bundle = cls(bundling_length)
        for _ in range(number):
            bundle.add(cable.clone())
        return bundle

    def __repr__(self) -> str:
        return f"Bundle({len(self)} conduitables, {self.bundling_length} in)"
