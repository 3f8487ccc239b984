"""
Valuation session.

Caller-side owner of one batch being simulated. Applies the defaults
overwrite policy on species/management changes and serializes valuations:
a second trigger while one is still awaiting its quote is rejected instead
of racing the first to produce a different result.
"""
import logging
from typing import Optional

from ...mediator import Mediator
from ...domain.livestock.batch import BatchParameters
from ...domain.livestock.defaults import GrowthDefaults, resolve_defaults
from ...domain.livestock.exceptions import ValuationInProgressError
from ...domain.livestock.species import Species, ManagementSystem
from ...domain.shared.value_objects import Region
from ...domain.valuation.engine import ResultSummary
from .commands.run_valuation import RunValuationCommand

logger = logging.getLogger(__name__)


class ValuationSession:
    """One simulation session: editable batch plus its last result"""

    def __init__(
        self,
        mediator: Mediator,
        species: Species = Species.CATTLE,
        region: Region = Region.SP,
    ):
        self._mediator = mediator
        self._params = BatchParameters.from_defaults(species, region=region)
        self._last_result: Optional[ResultSummary] = None
        self._in_flight = False

    @property
    def params(self) -> BatchParameters:
        """Batch parameters, editable until a valuation is triggered"""
        return self._params

    @property
    def last_result(self) -> Optional[ResultSummary]:
        return self._last_result

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    @property
    def current_defaults(self) -> GrowthDefaults:
        return resolve_defaults(self._params.species, self._params.management)

    def select_species(self, species: Species) -> None:
        self._params.select_species(species)

    def select_management(self, management: ManagementSystem) -> None:
        self._params.select_management(management)

    def projected_final_weight_kg(self) -> float:
        return self._params.projected_final_weight_kg()

    async def run_valuation(self) -> ResultSummary:
        """
        Value the batch as it stands now.

        Returns:
            ResultSummary, also kept as last_result

        Raises:
            ValuationInProgressError: If a valuation is already running
            BatchValidationError: If the batch has invalid inputs
        """
        if self._in_flight:
            logger.warning("Rejected valuation trigger: previous valuation still running")
            raise ValuationInProgressError("A valuation is already in progress for this session")

        command = RunValuationCommand.for_batch(self._params)
        self._in_flight = True
        try:
            result = await self._mediator.send_async(command)
        finally:
            self._in_flight = False

        self._last_result = result
        logger.debug(f"Session valuation finished at {result.total_value:,.2f} ({result.quote.source})")
        return result
