"""
Asynchronous facade over ``DragonBallClient``.

Every operation runs on an executor and returns a ``Future``. An optional
completion callback receives ``(value, None)`` on success or
``(None, error)`` on failure, exactly once.

Programming defects (for example a fake transport with no handler) are not
request errors: they are logged and left on the future, where
``future.result()`` raises them, and the completion is not called.
"""

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, Callable, List, Optional, TypeVar

from requests.adapters import BaseAdapter

from dragonball.exceptions import DragonBallError
from dragonball.models import Hero, Transformation

from .api import DragonBallClient

T = TypeVar("T")
Completion = Callable[[Optional[Any], Optional[DragonBallError]], None]

logger = logging.getLogger(__name__)


class NetworkManager:
    """Runs client operations off the caller's thread."""

    def __init__(self, client: Optional[DragonBallClient] = None,
                 transport: Optional[BaseAdapter] = None,
                 executor: Optional[Executor] = None,
                 max_workers: int = 4):
        """
        Args:
            client: Client to drive; built with ``transport`` when omitted
            transport: Transport for the default client
            executor: Executor to run requests on; owned by the manager when omitted
            max_workers: Worker count for the default executor
        """
        self.client = client or DragonBallClient(transport=transport)
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="dragonball"
        )

    def login(self, user: str, password: str,
              completion: Optional[Completion] = None) -> "Future[str]":
        return self._submit(completion, self.client.login, user, password)

    def heroes_list(self, token: Optional[str],
                    completion: Optional[Completion] = None) -> "Future[List[Hero]]":
        return self._submit(completion, self.client.heroes_list, token)

    def transformation_heroes_list(
        self, token: Optional[str], parent_hero_id: str,
        completion: Optional[Completion] = None,
    ) -> "Future[List[Transformation]]":
        return self._submit(
            completion, self.client.transformation_heroes_list, token, parent_hero_id
        )

    def close(self) -> None:
        """Wait for outstanding requests, then release the executor and session."""
        if self._owns_executor:
            self._executor.shutdown(wait=True)
        self.client.close()

    def __enter__(self) -> "NetworkManager":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def _submit(self, completion: Optional[Completion],
                operation: Callable[..., T], *args) -> "Future[T]":
        future = self._executor.submit(operation, *args)
        if completion is not None:
            future.add_done_callback(lambda done: self._deliver(done, completion))
        return future

    @staticmethod
    def _deliver(future: Future, completion: Completion) -> None:
        error = future.exception()
        if error is None:
            completion(future.result(), None)
        elif isinstance(error, DragonBallError):
            completion(None, error)
        else:
            logger.critical(
                f"Request aborted by programming error, completion not called: {error!r}"
            )
