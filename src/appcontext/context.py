"""Process-wide application context holder.

The host process stores its application handle once at startup with
initialize() and any other component fetches it later with current().
The module-level functions act on a single default ContextHolder; the
holder itself can also be passed around explicitly.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from typing import Any, Generic, TypeVar

from .config import HolderConfig, ReinitializePolicy, UninitializedReadPolicy
from .exceptions import AlreadyInitializedError, NotInitializedError
from .logger import get_logger

H = TypeVar("H")

# Opaque reference to the host application object
ApplicationHandle = Any

logger = get_logger()


class ContextHolder(Generic[H]):
    """Holds one application handle shared by every caller in the process."""

    def __init__(self, config: HolderConfig | None = None, name: str = "default") -> None:
        self.name = name
        self._config = config if config is not None else HolderConfig()
        self._handle: H | None = None
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        state = "initialized" if self.is_initialized() else "uninitialized"
        return f"ContextHolder(name={self.name!r}, {state})"

    @property
    def config(self) -> HolderConfig:
        """The policy this holder enforces."""
        return self._config

    def configure(self, config: HolderConfig) -> None:
        """Replace the policy. The stored handle is kept."""
        with self._lock:
            self._config = config
        logger.debug(
            "Holder '%s' configured: reinitialize=%s, uninitialized_read=%s",
            self.name,
            config.reinitialize.value,
            config.uninitialized_read.value,
        )

    def initialize(self, handle: H | None) -> None:
        """Store the handle, replacing any previous one.

        The handle is not validated; None is accepted and leaves the holder
        uninitialized. Storing the same object again is always allowed.

        Raises:
            AlreadyInitializedError: If the policy forbids re-initialization
                and a different handle is already stored
        """
        with self._lock:
            previous = self._handle
            policy = self._config.reinitialize
            replacing = previous is not None and previous is not handle
            if replacing and policy == ReinitializePolicy.FORBID:
                raise AlreadyInitializedError(
                    f"Context holder '{self.name}' is already initialized with "
                    f"{_describe(previous)}; refusing to replace it with {_describe(handle)}"
                )
            self._handle = handle

        if not replacing:
            logger.changes("Context holder '%s' initialized with %s", self.name, _describe(handle))
        elif policy == ReinitializePolicy.WARN:
            logger.warning(
                "Context holder '%s' re-initialized: %s replaced by %s",
                self.name,
                _describe(previous),
                _describe(handle),
            )
        else:
            logger.changes(
                "Context holder '%s' replaced %s with %s",
                self.name,
                _describe(previous),
                _describe(handle),
            )

    def current(self) -> H | None:
        """Return the stored handle, or None if nothing has been stored.

        Raises:
            NotInitializedError: If nothing is stored and the policy is
                UninitializedReadPolicy.RAISE
        """
        with self._lock:
            handle = self._handle
            read_policy = self._config.uninitialized_read

        if handle is None:
            if read_policy == UninitializedReadPolicy.RAISE:
                raise NotInitializedError(_not_initialized_message(self.name))
            logger.checks("Context holder '%s' read before initialization", self.name)
        else:
            logger.checks("Context holder '%s' read", self.name)
        return handle

    def require(self) -> H:
        """Return the stored handle, raising if nothing has been stored."""
        with self._lock:
            handle = self._handle
        if handle is None:
            raise NotInitializedError(_not_initialized_message(self.name))
        return handle

    def is_initialized(self) -> bool:
        """Check whether a (non-None) handle is stored."""
        with self._lock:
            return self._handle is not None

    def reset(self) -> None:
        """Drop the stored handle, returning to the uninitialized state."""
        with self._lock:
            self._handle = None
        logger.changes("Context holder '%s' reset", self.name)

    @contextmanager
    def override(self, handle: H | None) -> Iterator[H | None]:
        """Temporarily install a handle, ignoring the re-initialization policy.

        The previous handle (or the uninitialized state) is restored on exit,
        also when the block raises.
        """
        with self._lock:
            previous = self._handle
            self._handle = handle
        logger.changes("Context holder '%s' overridden with %s", self.name, _describe(handle))
        try:
            yield handle
        finally:
            with self._lock:
                self._handle = previous
            logger.changes("Context holder '%s' restored to %s", self.name, _describe(previous))


def _describe(handle: object) -> str:
    if handle is None:
        return "nothing"
    return f"<{type(handle).__qualname__} at {id(handle):#x}>"


def _not_initialized_message(name: str) -> str:
    return (
        f"Context holder '{name}' is not initialized. "
        "Call appcontext.initialize() during process startup."
    )


# Singleton instance
_holder: ContextHolder[Any] = ContextHolder()


def get_holder() -> ContextHolder[Any]:
    """Get the process-wide default holder."""
    return _holder


def configure(config: HolderConfig) -> None:
    """Set the policy of the default holder."""
    _holder.configure(config)


def get_config() -> HolderConfig:
    """Get the policy of the default holder."""
    return _holder.config


def initialize(handle: ApplicationHandle) -> None:
    """Store the process-wide application handle."""
    _holder.initialize(handle)


def current() -> ApplicationHandle:
    """Get the process-wide application handle, or None if not initialized."""
    return _holder.current()


def require() -> ApplicationHandle:
    """Get the process-wide application handle, raising if not initialized."""
    return _holder.require()


def is_initialized() -> bool:
    """Check whether the process-wide application handle has been stored."""
    return _holder.is_initialized()


def reset() -> None:
    """Drop the process-wide application handle."""
    _holder.reset()


def override(handle: ApplicationHandle) -> AbstractContextManager[Any]:
    """Temporarily replace the process-wide application handle.

    Example:
        with appcontext.override(FakeApp()):
            run_component()
    """
    return _holder.override(handle)
