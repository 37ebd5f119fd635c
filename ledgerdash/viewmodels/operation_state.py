"""Lifecycle state shared by every dashboard operation.

``OperationState`` is the immutable snapshot a view renders; ``AsyncOperation``
owns one of them and performs the Idle -> Pending -> Succeeded/Failed
transitions around a single blocking use-case call.

Call context:
    ``BalanceVM``, ``TransferVM`` and ``HistoryVM`` each hold their own
    ``AsyncOperation`` instances; NiceGUI handlers await ``run``.
"""

from __future__ import annotations

import asyncio
import enum
import logging
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from ledgerdash.domain.errors import VALIDATION
from ledgerdash.domain.ports import UseCaseError

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")
P = TypeVar("P")

UNEXPECTED = "UNEXPECTED"
UNEXPECTED_MESSAGE = "Unexpected error."


class Phase(str, enum.Enum):
    IDLE = "Idle"
    PENDING = "Pending"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"


@dataclass(frozen=True)
class OperationState(Generic[T]):
    """Snapshot of one operation.

    ``result`` is set only when SUCCEEDED and ``error_message`` only when
    FAILED; IDLE and PENDING carry neither.
    """

    phase: Phase = Phase.IDLE
    result: Optional[T] = None
    error_message: Optional[str] = None
    error_code: Optional[str] = None

    def __post_init__(self) -> None:
        has_error = self.error_message is not None
        if self.phase is Phase.SUCCEEDED:
            if has_error:
                raise ValueError("Succeeded state cannot carry an error message.")
        elif self.phase is Phase.FAILED:
            if not has_error or self.result is not None:
                raise ValueError("Failed state requires an error message and no result.")
        elif has_error or self.result is not None or self.error_code is not None:
            raise ValueError(f"{self.phase.value} state carries neither result nor error.")

    @classmethod
    def idle(cls) -> "OperationState[T]":
        return cls(Phase.IDLE)

    @classmethod
    def pending(cls) -> "OperationState[T]":
        return cls(Phase.PENDING)

    @classmethod
    def succeeded(cls, result: T) -> "OperationState[T]":
        return cls(Phase.SUCCEEDED, result=result)

    @classmethod
    def failed(cls, message: str, code: Optional[str] = None) -> "OperationState[T]":
        return cls(Phase.FAILED, error_message=str(message), error_code=code)

    @property
    def is_pending(self) -> bool:
        return self.phase is Phase.PENDING

    @property
    def is_terminal(self) -> bool:
        return self.phase in (Phase.SUCCEEDED, Phase.FAILED)


class AsyncOperation(Generic[T]):
    """Owns the state of one operation and runs it off the event loop.

    Re-triggering while PENDING is ignored unless ``allow_reentry`` is set, in
    which case the last response to arrive wins. After ``dispose`` responses
    are dropped instead of applied.
    """

    def __init__(
        self,
        name: str,
        *,
        on_change: Optional[Callable[[OperationState[T]], None]] = None,
        allow_reentry: bool = False,
    ) -> None:
        self.name = name
        self.on_change = on_change
        self.allow_reentry = allow_reentry
        self._state: OperationState[T] = OperationState.idle()
        self._disposed = False

    @property
    def state(self) -> OperationState[T]:
        return self._state

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        self._disposed = True

    async def run(
        self,
        action: Callable[[P], T],
        prepare: Callable[[], P],
        *,
        on_success: Optional[Callable[[T], None]] = None,
    ) -> OperationState[T]:
        """Validate synchronously, then await ``action`` in a worker thread.

        Args:
            action: Blocking use-case call receiving the prepared input.
            prepare: Local validation; a ``UseCaseError`` here fails the
                operation without entering PENDING or touching the network.
            on_success: Runs with the result before the SUCCEEDED state is
                published, so listeners already see its side effects.

        Returns:
            The state produced by this trigger. When the trigger is ignored
            (disposed, or already PENDING without re-entry) the current state
            is returned unchanged.
        """
        if self._disposed:
            return self._state
        if self._state.is_pending and not self.allow_reentry:
            LOGGER.debug("%s: already pending, trigger ignored", self.name)
            return self._state

        try:
            prepared = prepare()
        except UseCaseError as exc:
            LOGGER.info("%s: %s", self.name, exc.message)
            return self._apply(OperationState.failed(exc.message, exc.code or VALIDATION))

        self._apply(OperationState.pending())
        try:
            result = await asyncio.to_thread(action, prepared)
        except UseCaseError as exc:
            LOGGER.warning("%s failed [%s]: %s", self.name, exc.code, exc.message)
            outcome: OperationState[T] = OperationState.failed(exc.message, exc.code)
        except Exception:
            LOGGER.exception("%s: unexpected error", self.name)
            outcome = OperationState.failed(UNEXPECTED_MESSAGE, UNEXPECTED)
        else:
            outcome = OperationState.succeeded(result)

        if self._disposed:
            LOGGER.debug("%s: response arrived after teardown, dropped", self.name)
            return outcome
        if on_success is not None and outcome.phase is Phase.SUCCEEDED:
            on_success(outcome.result)
        return self._apply(outcome)

    def _apply(self, state: OperationState[T]) -> OperationState[T]:
        self._state = state
        if self.on_change:
            self.on_change(state)
        return state


__all__ = ["AsyncOperation", "OperationState", "Phase"]
