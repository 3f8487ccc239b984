from dataclasses import dataclass, field
from typing import Optional, List

from .species import Species, ManagementSystem
from .defaults import GrowthDefaults, resolve_defaults, default_management_system
from .exceptions import BatchValidationError
from ..shared.value_objects import Region


@dataclass(frozen=True)
class BatchSnapshot:
    """Immutable copy of the batch parameters a valuation is computed with"""
    species: Species
    region: Region
    management: ManagementSystem
    batch_size: int
    initial_weight_kg: float
    daily_gain_kg: float
    period_days: int
    carcass_yield_percent: float
    manual_price_override: Optional[float] = None

    def snapshot(self) -> 'BatchSnapshot':
        return self

    def validate(self) -> None:
        """
        Caller-side input validation run before a valuation.

        The manual price sign is deliberately not checked.

        Raises:
            BatchValidationError: Listing every invalid field
        """
        errors: List[str] = []
        if isinstance(self.batch_size, bool) or not isinstance(self.batch_size, int) or self.batch_size <= 0:
            errors.append(f"batch_size must be a positive integer, got {self.batch_size!r}")
        if self.initial_weight_kg <= 0:
            errors.append(f"initial_weight_kg must be positive, got {self.initial_weight_kg}")
        if self.daily_gain_kg <= 0:
            errors.append(f"daily_gain_kg must be positive, got {self.daily_gain_kg}")
        if self.period_days <= 0:
            errors.append(f"period_days must be positive, got {self.period_days}")
        if not 0 <= self.carcass_yield_percent <= 100:
            errors.append(
                f"carcass_yield_percent must be within [0, 100], got {self.carcass_yield_percent}"
            )
        if not isinstance(self.region, Region):
            errors.append(f"region must be a Region, got {self.region!r}")

        if errors:
            raise BatchValidationError("; ".join(errors))


@dataclass
class BatchParameters:
    """
    Batch simulation parameters - mutable, owned by the calling session

    Seeded from GrowthDefaults and freely edited until a valuation is
    triggered. Switching species or management re-applies the defaults to
    daily gain, carcass yield and initial weight, discarding prior edits to
    those three fields. Batch size, period, region and manual price are kept.
    """
    species: Species
    region: Region
    management: ManagementSystem
    batch_size: int
    initial_weight_kg: float
    daily_gain_kg: float
    period_days: int
    carcass_yield_percent: float
    manual_price_override: Optional[float] = field(default=None)

    @classmethod
    def from_defaults(
        cls,
        species: Species,
        management: Optional[ManagementSystem] = None,
        region: Region = Region.SP,
        batch_size: int = 50,
        period_days: int = 90,
    ) -> 'BatchParameters':
        """
        Create batch parameters pre-filled from the species/management defaults.

        Raises:
            InvalidCombinationError: If management is not legal for species
        """
        management = management or default_management_system(species)
        defaults = resolve_defaults(species, management)
        return cls(
            species=species,
            region=region,
            management=management,
            batch_size=batch_size,
            initial_weight_kg=defaults.initial_weight_kg,
            daily_gain_kg=defaults.daily_gain_kg,
            period_days=period_days,
            carcass_yield_percent=defaults.carcass_yield_percent,
        )

    def apply_defaults(self, defaults: GrowthDefaults) -> None:
        """Overwrite the growth fields with the given defaults"""
        self.daily_gain_kg = defaults.daily_gain_kg
        self.carcass_yield_percent = defaults.carcass_yield_percent
        self.initial_weight_kg = defaults.initial_weight_kg

    def select_species(self, species: Species) -> None:
        """Switch species, resetting management to the species default"""
        management = default_management_system(species)
        defaults = resolve_defaults(species, management)
        self.species = species
        self.management = management
        self.apply_defaults(defaults)

    def select_management(self, management: ManagementSystem) -> None:
        """
        Switch management system for the current species.

        Raises:
            InvalidCombinationError: If management is not legal for the species
        """
        defaults = resolve_defaults(self.species, management)
        self.management = management
        self.apply_defaults(defaults)

    def projected_final_weight_kg(self) -> float:
        """Live preview of the final weight per animal"""
        return self.initial_weight_kg + self.daily_gain_kg * self.period_days

    def validate(self) -> None:
        """
        Raises:
            BatchValidationError: If any field is outside its valid domain
        """
        self.snapshot().validate()

    def snapshot(self) -> BatchSnapshot:
        """Capture the current values as an immutable snapshot"""
        return BatchSnapshot(
            species=self.species,
            region=self.region,
            management=self.management,
            batch_size=self.batch_size,
            initial_weight_kg=self.initial_weight_kg,
            daily_gain_kg=self.daily_gain_kg,
            period_days=self.period_days,
            carcass_yield_percent=self.carcass_yield_percent,
            manual_price_override=self.manual_price_override,
        )
