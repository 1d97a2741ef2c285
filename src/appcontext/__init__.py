"""appcontext - a process-wide holder for the host application's context handle.

Main entry points:
- initialize(handle): store the handle once during process startup
- current(): fetch the handle (None if never initialized)
- require(): fetch the handle, raising NotInitializedError if never initialized

Configuration:
- HolderConfig: re-initialization and uninitialized-read policies
- load_holder_config(): read a HolderConfig from YAML
"""

from .config import (
    HolderConfig,
    ReinitializePolicy,
    UninitializedReadPolicy,
    load_holder_config,
)
from .context import (
    ApplicationHandle,
    ContextHolder,
    configure,
    current,
    get_config,
    get_holder,
    initialize,
    is_initialized,
    override,
    require,
    reset,
)
from .exceptions import AlreadyInitializedError, AppContextError, NotInitializedError

__all__ = [
    "AlreadyInitializedError",
    "AppContextError",
    "ApplicationHandle",
    "ContextHolder",
    "HolderConfig",
    "NotInitializedError",
    "ReinitializePolicy",
    "UninitializedReadPolicy",
    "configure",
    "current",
    "get_config",
    "get_holder",
    "initialize",
    "is_initialized",
    "load_holder_config",
    "override",
    "require",
    "reset",
]
