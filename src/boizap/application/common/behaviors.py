"""
Mediator pipeline behaviors shared by every command and query.
"""
import logging
from typing import Any

from ...mediator import PipelineBehavior, NextHandler


logger = logging.getLogger(__name__)


class LoggingBehavior(PipelineBehavior):
    """
    Records requests that end in an exception, then lets it propagate.

    Successful requests are not logged here; handlers log their own outcome.
    """

    async def handle(self, request: Any, next_handler: NextHandler):
        try:
            return await next_handler()
        except Exception as e:
            logger.error(f"Failed executing {type(request).__name__}: {e}", exc_info=True)
            raise


class ValidationBehavior(PipelineBehavior):
    """
    Runs request.validate() when the request defines one.

    Validation errors stop the pipeline before the handler is built.
    """

    async def handle(self, request: Any, next_handler: NextHandler):
        validate = getattr(request, 'validate', None)
        if callable(validate):
            validate()

        return await next_handler()
