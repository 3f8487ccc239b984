"""
Growth defaults per species and management system.

Pure lookup table used to pre-fill batch parameters. The legal management
systems of each species are ordered; the first one is the species default.
"""
from dataclasses import dataclass
from typing import Dict, Tuple

from .species import Species, ManagementSystem
from .exceptions import InvalidCombinationError
from ..shared.value_objects import SaleUnit


@dataclass(frozen=True)
class GrowthDefaults:
    """Baseline zootechnical parameters for a (species, management) pair"""
    daily_gain_kg: float           # GMD, live-weight gain per animal per day
    carcass_yield_percent: float   # 0-100
    initial_weight_kg: float
    period_label: str              # Label for the fattening period field


MANAGEMENT_OPTIONS: Dict[Species, Tuple[ManagementSystem, ...]] = {
    Species.CATTLE: (ManagementSystem.PASTURE, ManagementSystem.FEEDLOT),
    Species.SWINE: (ManagementSystem.INTENSIVE_SYSTEM,),
    Species.POULTRY: (ManagementSystem.FREE_RANGE, ManagementSystem.INDUSTRIAL_FINISHING),
}

MANAGEMENT_DEFAULTS: Dict[Tuple[Species, ManagementSystem], GrowthDefaults] = {
    (Species.CATTLE, ManagementSystem.PASTURE): GrowthDefaults(
        daily_gain_kg=0.5, carcass_yield_percent=50, initial_weight_kg=380,
        period_label="Dias de Pastoreio"),
    (Species.CATTLE, ManagementSystem.FEEDLOT): GrowthDefaults(
        daily_gain_kg=1.5, carcass_yield_percent=54, initial_weight_kg=420,
        period_label="Dias de Cocho"),
    (Species.SWINE, ManagementSystem.INTENSIVE_SYSTEM): GrowthDefaults(
        daily_gain_kg=0.9, carcass_yield_percent=76, initial_weight_kg=28,
        period_label="Dias de Alojamento"),
    (Species.POULTRY, ManagementSystem.FREE_RANGE): GrowthDefaults(
        daily_gain_kg=0.035, carcass_yield_percent=70, initial_weight_kg=0.045,
        period_label="Ciclo de Vida (Dias)"),
    (Species.POULTRY, ManagementSystem.INDUSTRIAL_FINISHING): GrowthDefaults(
        daily_gain_kg=0.065, carcass_yield_percent=73, initial_weight_kg=0.048,
        period_label="Dias de Galpão"),
}


def legal_management_systems(species: Species) -> Tuple[ManagementSystem, ...]:
    """Management systems available for a species, default first"""
    return MANAGEMENT_OPTIONS[species]


def default_management_system(species: Species) -> ManagementSystem:
    """Management system auto-selected when the species changes"""
    return legal_management_systems(species)[0]


def default_sale_unit(species: Species) -> SaleUnit:
    """Unit the species is normally traded in"""
    return species.sale_unit


def resolve_defaults(species: Species, management: ManagementSystem) -> GrowthDefaults:
    """
    Look up growth defaults for a species/management pair.

    Args:
        species: Livestock species
        management: Management system, must be legal for the species

    Returns:
        GrowthDefaults for the pair

    Raises:
        InvalidCombinationError: If management is not legal for species
    """
    if management not in legal_management_systems(species):
        raise InvalidCombinationError(
            f"Management system '{management.label}' is not available for {species.label}"
        )
    return MANAGEMENT_DEFAULTS[(species, management)]
