"""
Process-wide configuration registry.

This module owns the single ConfigStore shared by the whole process. It is
independent of every subsystem that uses it: subsystems register their own
configuration blocks under a namespace during startup, and any other code
reads the merged result without a handle being passed around.

The store is created lazily and exactly once. It is never reset; it lives
until the process exits.
"""

import logging
import threading
from typing import Any, Dict, List, Optional, Type, TypeVar

from zirv_config.store import ConfigStore

logger = logging.getLogger(__name__)

T = TypeVar('T')

# Lock guarding creation of the global store
_store_lock = threading.Lock()
_global_store: Optional[ConfigStore] = None


def get_store() -> ConfigStore:
    """
    Get or create the global configuration store.

    Returns:
        The process-wide ConfigStore
    """
    global _global_store

    store = _global_store
    if store is not None:
        return store

    with _store_lock:
        if _global_store is None:
            _global_store = ConfigStore()
            logger.debug("Global configuration store initialized")

    return _global_store


def _existing_store() -> Optional[ConfigStore]:
    """Return the global store without creating it."""
    return _global_store


def init_config() -> None:
    """
    Initialize the global configuration as an empty mapping.

    Safe to call any number of times: once the store exists this does
    nothing, and in particular it never clears registered namespaces.
    """
    get_store()


def register_config(namespace: str, config: Any) -> None:
    """
    Register a configuration block under a given namespace.

    Args:
        namespace: The key under which to register the configuration (for example, "server")
        config: The configuration data (a model, dataclass, dict, scalar...)

    Raises:
        SerializationError: If the configuration cannot be converted
    """
    get_store().register(namespace, config)


def get_config() -> Dict[str, Any]:
    """
    Get the full configuration.

    Returns:
        A snapshot of every namespace, or an empty dict before anything
        has been initialized
    """
    store = _existing_store()
    if store is None:
        return {}
    return store.snapshot()


def get_config_by_key(key: str) -> Optional[Any]:
    """
    Retrieve a configuration value given a dot-separated key path (e.g., "server.port").

    Returns:
        The value, or None if the key is not found
    """
    store = _existing_store()
    if store is None:
        return None
    return store.read_path(key)


def get_config_as(key: str, target: Type[T], strict: Optional[bool] = None) -> Optional[T]:
    """
    Retrieve a configuration value converted to the given type.

    Conversion failures are logged and reported as None, same as a
    missing key.
    """
    store = _existing_store()
    if store is None:
        return None
    return store.read_path_typed(key, target, strict)


def get_config_strict(key: str, target: Type[T], strict: Optional[bool] = None) -> Optional[T]:
    """
    Retrieve a configuration value converted to the given type.

    Returns None for a missing key and raises ConversionError when the
    value is present but has the wrong shape.
    """
    store = _existing_store()
    if store is None:
        return None
    return store.read_path_strict(key, target, strict)


def require_config(key: str) -> Any:
    """
    Get a required configuration value.

    Raises:
        ConfigError: If the key is not found
    """
    return get_store().require(key)


def list_namespaces() -> List[str]:
    """List all registered namespaces."""
    store = _existing_store()
    if store is None:
        return []
    return store.namespaces()
