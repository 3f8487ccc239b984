"""Run valuation command"""
import logging
from dataclasses import dataclass
from typing import Union

from ....mediator import Request, RequestHandler, Mediator
from ....domain.livestock.batch import BatchParameters, BatchSnapshot
from ....domain.valuation.engine import ResultSummary, compute_valuation
from ...market.queries.resolve_quote import ResolveQuoteQuery

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunValuationCommand(Request[ResultSummary]):
    """Command to value a batch at the current market quote"""
    batch: BatchSnapshot

    @classmethod
    def for_batch(cls, params: Union[BatchParameters, BatchSnapshot]) -> 'RunValuationCommand':
        """Capture the batch by value at trigger time"""
        return cls(batch=params.snapshot())

    def validate(self) -> None:
        """
        Raises:
            BatchValidationError: If the batch has invalid inputs
        """
        self.batch.validate()


class RunValuationHandler(RequestHandler[RunValuationCommand, ResultSummary]):
    """Handler for RunValuationCommand

    Resolves the quote (external, manual or fallback) and computes the
    valuation with it.
    """

    def __init__(self, mediator: Mediator):
        """
        Initialize handler

        Args:
            mediator: Mediator for sending the quote query
        """
        self._mediator = mediator

    async def handle(self, request: RunValuationCommand) -> ResultSummary:
        batch = request.batch
        quote = await self._mediator.send_async(ResolveQuoteQuery(
            species=batch.species,
            region=batch.region,
            manual_price_override=batch.manual_price_override,
        ))

        result = compute_valuation(batch, quote)
        logger.info(
            f"Valued {batch.batch_size} x {batch.species.code} ({batch.management.code}) "
            f"at {quote.price} /{quote.unit.symbol} from {quote.source}: total {result.total_value:.2f}"
        )
        return result
