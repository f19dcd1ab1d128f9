"""Retrying wrapper around an asynchronous database client."""

from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Protocol, TypeVar, runtime_checkable

from src.features.retry.engine import RetryEngine
from src.features.retry.models import RetryOptions


T = TypeVar("T")


@runtime_checkable
class DatabaseClient(Protocol):
    """Protocol for persistence clients with an async execute() call."""

    async def execute(self, *args: Any, **kwargs: Any) -> Any:
        """Execute a statement or query.

        Raises:
            Exception: Any driver failure.
        """
        ...


class RetryingDatabase:
    """Routes every database call through a RetryEngine.

    Each execute() is retried independently; nothing is shared between
    calls besides the engine and the options.
    """

    def __init__(
        self,
        client: DatabaseClient,
        engine: RetryEngine,
        options: RetryOptions | Mapping[str, Any] | None = None,
    ) -> None:
        """Initialize the wrapper.

        Args:
            client: Underlying database client.
            engine: Retry engine to run calls through.
            options: Retry options for every call. Defaults to the
                engine's own defaults.
        """
        self._client = client
        self._engine = engine
        self._options = options

    @property
    def client(self) -> DatabaseClient:
        """The wrapped client."""
        return self._client

    async def execute(self, *args: Any, **kwargs: Any) -> Any:
        """Execute on the wrapped client with retries.

        Args:
            *args: Positional arguments for client.execute().
            **kwargs: Keyword arguments for client.execute().

        Returns:
            The client's result.
        """
        return await self._engine.run(
            lambda: self._client.execute(*args, **kwargs),
            self._options,
        )

    async def run(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Run an arbitrary multi-step operation with retries.

        Args:
            operation: Zero-argument coroutine function, typically a
                closure issuing several calls on the client.

        Returns:
            The operation's result.
        """
        return await self._engine.run(operation, self._options)
