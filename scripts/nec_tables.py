#!/usr/bin/env python3
"""
NEC Tables Module
Static lookup data for conduit fill and conductor ampacity.

Provides:
- Conduit internal areas by type and trade size (Chapter 9 Table 4)
- Trade size selection for a required area
- Insulated conductor areas (Chapter 9 Table 5)
- Insulation temperature ratings
- Allowable ampacities (Table 310.16)
- Adjustment factors for more than three current-carrying conductors

Catalog data is loaded once on first use and never modified afterwards.

Author: Circuit Topology Skill
Standards: NEC 2023 Chapter 9 Tables 4 and 5, Article 310
"""

import logging
from pathlib import Path
from typing import Optional

import yaml


logger = logging.getLogger(__name__)

CATALOGS_DIR = Path(__file__).parent.parent / "catalogs"


def _load_catalog(name: str) -> dict:
    """Load a YAML catalog file."""
    path = CATALOGS_DIR / f"{name}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Catalog not found: {path}")
    with open(path) as f:
        data = yaml.safe_load(f)
    logger.debug("Loaded catalog %s", path)
    return data


# Lazy-loaded catalogs
_CONDUIT_DIMENSIONS: Optional[dict] = None
_CONDUCTOR_PROPERTIES: Optional[dict] = None
_CIRCUIT_DEFAULTS: Optional[dict] = None


def _get_conduit_dimensions() -> dict:
    global _CONDUIT_DIMENSIONS
    if _CONDUIT_DIMENSIONS is None:
        _CONDUIT_DIMENSIONS = _load_catalog("conduit_dimensions")
    return _CONDUIT_DIMENSIONS


def _get_conductor_properties() -> dict:
    global _CONDUCTOR_PROPERTIES
    if _CONDUCTOR_PROPERTIES is None:
        _CONDUCTOR_PROPERTIES = _load_catalog("conductor_properties")
    return _CONDUCTOR_PROPERTIES


def get_circuit_defaults() -> dict:
    """Get the defaults applied to new circuits (copy, safe to modify)."""
    global _CIRCUIT_DEFAULTS
    if _CIRCUIT_DEFAULTS is None:
        _CIRCUIT_DEFAULTS = _load_catalog("circuit_defaults")
    return {k: (dict(v) if isinstance(v, dict) else v) for k, v in _CIRCUIT_DEFAULTS.items()}


# ============================================================================
# Conduit Dimensions (Chapter 9 Table 4)
# ============================================================================

def conduit_types() -> list[str]:
    """All recognized conduit type names."""
    return list(_get_conduit_dimensions()["material"])


def trade_sizes() -> list[str]:
    """Trade sizes in ascending order."""
    return list(_get_conduit_dimensions()["trade_sizes"])


def is_valid_conduit_type(conduit_type: str) -> bool:
    return conduit_type in _get_conduit_dimensions()["material"]


def is_valid_trade_size(trade_size: str) -> bool:
    return trade_size in _get_conduit_dimensions()["trade_sizes"]


def areas_for_type(conduit_type: str) -> dict:
    """
    Get the trade size to area mapping for a conduit type.

    Returns an empty dict for an unknown type.
    """
    dims = _get_conduit_dimensions()
    key = dims["aliases"].get(conduit_type, conduit_type)
    return dict(dims["areas_in2"].get(key, {}))


def conduit_area(conduit_type: str, trade_size: str) -> Optional[float]:
    """
    Internal area (in²) of a conduit.

    Returns None if the trade size is not manufactured for that type.
    """
    return areas_for_type(conduit_type).get(trade_size)


def has_area(conduit_type: str, trade_size: str) -> bool:
    return conduit_area(conduit_type, trade_size) is not None


def trade_size_for_area(
    required_area: float,
    conduit_type: str,
    minimum_trade: str = '1/2"'
) -> Optional[str]:
    """
    Smallest trade size whose internal area holds the required area.

    Args:
        required_area: Area (in²) the conduit must provide at 100%
        conduit_type: Conduit type name (e.g. "EMT", "PVC-40")
        minimum_trade: Smallest trade size allowed

    Returns:
        Trade size string, or None when no listed size is large enough
    """
    areas = areas_for_type(conduit_type)
    sizes = trade_sizes()
    if minimum_trade not in sizes:
        return None
    for trade in sizes[sizes.index(minimum_trade):]:
        area = areas.get(trade)
        if area is not None and area >= required_area:
            return trade
    return None


def conduit_material(conduit_type: str) -> Optional[str]:
    """Conduit material: "pvc", "steel" or "aluminum"."""
    return _get_conduit_dimensions()["material"].get(conduit_type)


def is_magnetic(conduit_type: str) -> bool:
    return conduit_type in _get_conduit_dimensions()["magnetic"]


# ============================================================================
# Conductor Properties
# ============================================================================

def conductor_sizes() -> list[str]:
    """Conductor sizes from smallest (14 AWG) to largest (2000 kcmil)."""
    return list(_get_conductor_properties()["sizes"])


def is_valid_size(size: str) -> bool:
    return size in _get_conductor_properties()["sizes"]


def size_index(size: str) -> int:
    """
    Position of a conductor size in the ordered catalog.

    Raises:
        ValueError: If the size is not in the catalog
    """
    sizes = _get_conductor_properties()["sizes"]
    if size not in sizes:
        raise ValueError(f"Unknown conductor size: {size}")
    return sizes.index(size)


def next_size_up(size: str) -> Optional[str]:
    sizes = _get_conductor_properties()["sizes"]
    idx = size_index(size)
    return sizes[idx + 1] if idx + 1 < len(sizes) else None


def biggest_size(*sizes: str) -> Optional[str]:
    """Largest of the given sizes (None if none given)."""
    if not sizes:
        return None
    return max(sizes, key=size_index)


def insulated_area(size: str, insulation: str) -> Optional[float]:
    """
    Approximate area (in²) of an insulated conductor per Table 5.

    Returns None if the insulation or size is not tabulated.
    """
    props = _get_conductor_properties()
    key = props["area_aliases"].get(insulation, insulation)
    return props["insulated_areas_in2"].get(key, {}).get(size)


def insulation_temp_rating(insulation: str) -> Optional[int]:
    """Temperature rating (°C) of an insulation type."""
    return _get_conductor_properties()["temp_ratings"].get(insulation)


def standard_ampacity(size: str, metal: str, temp_rating: int) -> float:
    """
    Allowable ampacity per Table 310.16.

    Args:
        size: Conductor size (e.g. "4 AWG", "250 kcmil")
        metal: "copper" or "aluminum"
        temp_rating: 60, 75 or 90

    Returns:
        Ampacity in amperes, 0 when the combination is not listed
    """
    columns = {60: 0, 75: 1, 90: 2}
    if temp_rating not in columns:
        return 0
    table = _get_conductor_properties()["ampacity_310_16"].get(metal, {})
    row = table.get(size)
    if row is None:
        return 0
    return row[columns[temp_rating]]


def adjustment_factor(current_carrying: int) -> float:
    """Adjustment factor per NEC 310.15(C)(1)."""
    factors = _get_conductor_properties().get("conduit_fill_adjustment", {}).get("factors", {})

    for range_str, factor in factors.items():
        if "-" in str(range_str):
            low, high = map(int, str(range_str).split("-"))
            if low <= current_carrying <= high:
                return factor
        elif "+" in str(range_str):
            threshold = int(str(range_str).replace("+", ""))
            if current_carrying >= threshold:
                return factor

    return 1.0


if __name__ == "__main__":
    print("Testing nec_tables module...")

    emt_area = conduit_area("EMT", '1"')
    print(f'EMT 1" area = {emt_area} in²')
    print(f"PVC-40 for 0.9 in² = {trade_size_for_area(0.9, 'PVC-40')}")
    print(f"12 AWG THHN area = {insulated_area('12 AWG', 'THHN')} in²")
    print(f"4/0 AWG Cu 75°C = {standard_ampacity('4/0 AWG', 'copper', 75)} A")

    print("\nAll tests passed!")
