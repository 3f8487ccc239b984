"""
In-process mediator for the application layer.

Commands and queries are frozen dataclasses deriving from Request[T]. Each
request type is bound to one handler factory; every dispatch runs through the
registered pipeline behaviors before reaching a freshly built handler.
"""
from abc import ABC, abstractmethod
from functools import partial
from typing import Any, Awaitable, Callable, Dict, Generic, List, TypeVar

TRequest = TypeVar('TRequest')
TResponse = TypeVar('TResponse')

NextHandler = Callable[[], Awaitable[Any]]


class Request(Generic[TResponse], ABC):
    """
    Marker base for commands and queries.

    TResponse names what the handler returns, e.g.
    `ResolveQuoteQuery(Request[Quote])`.
    """
    pass


class RequestHandler(Generic[TRequest, TResponse], ABC):
    """Handles exactly one request type"""

    @abstractmethod
    async def handle(self, request: TRequest) -> TResponse:
        pass


class PipelineBehavior(ABC):
    """
    Middleware wrapped around every handler call.

    Implementations receive the request and a zero-argument coroutine
    function producing the rest of the pipeline's response.
    """

    @abstractmethod
    async def handle(self, request: Any, next_handler: NextHandler):
        pass


class Mediator:
    """Routes requests through behaviors to their registered handler"""

    def __init__(self):
        self._handlers: Dict[type, Callable[[], RequestHandler]] = {}
        self._behaviors: List[PipelineBehavior] = []

    def register_handler(self, request_type: type, handler_factory: Callable[[], RequestHandler]):
        """
        Bind a request type to a factory; a new handler is built per dispatch.

        Args:
            request_type: Request class
            handler_factory: Zero-argument callable returning the handler
        """
        self._handlers[request_type] = handler_factory

    def register_behavior(self, behavior: PipelineBehavior):
        """Append a behavior; the first registered one is the outermost"""
        self._behaviors.append(behavior)

    def _factory_for(self, request: Request) -> Callable[[], RequestHandler]:
        try:
            return self._handlers[type(request)]
        except KeyError:
            raise ValueError(f"No handler registered for {type(request).__name__}") from None

    async def send_async(self, request: Request[TResponse]) -> TResponse:
        """
        Dispatch a request.

        Args:
            request: Command or query instance

        Returns:
            The handler's response

        Raises:
            ValueError: If no handler is registered for the request type
        """
        factory = self._factory_for(request)

        async def invoke_handler():
            return await factory().handle(request)

        pipeline: NextHandler = invoke_handler
        for behavior in reversed(self._behaviors):
            pipeline = partial(behavior.handle, request, pipeline)

        return await pipeline()
