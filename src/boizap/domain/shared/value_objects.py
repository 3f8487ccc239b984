from enum import Enum
from typing import Tuple

KG_PER_ARROBA = 15.0


class SaleUnit(Enum):
    """Units a market quote can be denominated in"""
    ARROBA = ("@", KG_PER_ARROBA)    # Brazilian cattle trade unit
    KILOGRAM = ("kg", 1.0)

    def __init__(self, symbol: str, kg_per_unit: float):
        self.symbol = symbol
        self.kg_per_unit = kg_per_unit

    def from_kilograms(self, kilograms: float) -> float:
        """Convert a carcass weight in kilograms to this unit"""
        return kilograms / self.kg_per_unit

    @staticmethod
    def from_symbol(symbol: str) -> 'SaleUnit':
        """
        Look up a unit by its trade symbol ("@" or "kg").

        Raises:
            ValueError: If the symbol is not a known unit
        """
        normalized = (symbol or "").strip().lower()
        for unit in SaleUnit:
            if unit.symbol == normalized:
                return unit
        raise ValueError(f"Unknown sale unit: {symbol!r}")

    def __str__(self) -> str:
        return self.symbol


class Region(Enum):
    """Brazilian federative unit used as market reference"""
    AC = "AC"
    AL = "AL"
    AP = "AP"
    AM = "AM"
    BA = "BA"
    CE = "CE"
    DF = "DF"
    ES = "ES"
    GO = "GO"
    MA = "MA"
    MT = "MT"
    MS = "MS"
    MG = "MG"
    PA = "PA"
    PB = "PB"
    PR = "PR"
    PE = "PE"
    PI = "PI"
    RJ = "RJ"
    RN = "RN"
    RS = "RS"
    RO = "RO"
    RR = "RR"
    SC = "SC"
    SP = "SP"
    SE = "SE"
    TO = "TO"

    @staticmethod
    def from_code(code: str) -> 'Region':
        """
        Look up a region by its two-letter code (case-insensitive).

        Raises:
            ValueError: If the code is not a Brazilian state
        """
        try:
            return Region((code or "").strip().upper())
        except ValueError:
            raise ValueError(f"Unknown region: {code!r}") from None

    def __str__(self) -> str:
        return self.value


# States with a regional livestock market offered for selection
MARKET_REGIONS: Tuple[Region, ...] = (
    Region.SP, Region.SC, Region.PR, Region.RS, Region.MG, Region.MS,
    Region.MT, Region.GO, Region.BA, Region.PA, Region.TO, Region.RO,
    Region.MA, Region.PI, Region.CE, Region.PE, Region.ES,
)
