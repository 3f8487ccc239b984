"""Species and management system enumerations"""
from enum import Enum

from ..shared.value_objects import SaleUnit


class Species(Enum):
    """Livestock species with display label and default unit of sale"""
    CATTLE = ("cattle", "Bovino", "Boi, Vaca ou Novilha", SaleUnit.ARROBA)
    SWINE = ("swine", "Suíno", "Terminação comercial", SaleUnit.KILOGRAM)
    POULTRY = ("poultry", "Frango", "Aves de corte", SaleUnit.KILOGRAM)

    def __init__(self, code: str, label: str, description: str, sale_unit: SaleUnit):
        self.code = code
        self.label = label
        self.description = description
        self.sale_unit = sale_unit

    @staticmethod
    def from_code(code: str) -> 'Species':
        """
        Look up a species by its code (e.g. "cattle").

        Raises:
            ValueError: If the code is unknown
        """
        normalized = (code or "").strip().lower()
        for species in Species:
            if species.code == normalized:
                return species
        raise ValueError(f"Unknown species: {code!r}")

    def __str__(self) -> str:
        return self.label


class ManagementSystem(Enum):
    """Production system; only meaningful paired with the species owning it"""
    PASTURE = ("pasture", "Pasto")
    FEEDLOT = ("feedlot", "Confinamento")
    INTENSIVE_SYSTEM = ("intensive", "Sistema Intensivo")
    FREE_RANGE = ("free-range", "Aves Livres")
    INDUSTRIAL_FINISHING = ("industrial", "Corte Industrial")

    def __init__(self, code: str, label: str):
        self.code = code
        self.label = label

    @staticmethod
    def from_code(code: str) -> 'ManagementSystem':
        """
        Look up a management system by its code (e.g. "feedlot").

        Raises:
            ValueError: If the code is unknown
        """
        normalized = (code or "").strip().lower()
        for management in ManagementSystem:
            if management.code == normalized:
                return management
        raise ValueError(f"Unknown management system: {code!r}")

    def __str__(self) -> str:
        return self.label
