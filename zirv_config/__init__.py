"""
Expandable configuration registry.

Configuration is built up from multiple subsystems (such as ``server``,
``logging``, etc.), each registering its own block under a namespace.
The configuration can be read as a whole or by dot-separated key.

Usage:
    from zirv_config import register_config, read_config
    from zirv_config.types import U16

    register_config("server", ServerConfig(port=3000, host="0.0.0.0"))

    # Entire configuration
    full_config = read_config()

    # A specific key as a structured value (None if missing)
    port = read_config("server.port")

    # A specific key converted to a type (None if missing or wrong shape)
    port = read_config("server.port", U16)
"""

from typing import Any, Optional

from errors import (
    ConfigError, ConversionError, ErrorCode, SerializationError,
    StorePoisonedError, ZirvError
)
from zirv_config.registry import (
    get_config, get_config_as, get_config_by_key, get_config_strict,
    get_store, init_config, list_namespaces, register_config, require_config
)
from zirv_config.settings import RegistrySettings
from zirv_config.store import ConfigStore
from zirv_config.types import I8, I16, I32, I64, U8, U16, U32, U64


def read_config(key: Optional[str] = None, target: Any = None) -> Any:
    """
    Read the configuration from the global store with optional type conversion.

    - ``read_config()`` returns the entire configuration as a dict.
    - ``read_config("some.key")`` returns the value for the key, or None.
    - ``read_config("some.key", Type)`` converts the value to ``Type``,
      returning None if the key is missing or the conversion fails.
    """
    if key is None:
        return get_config()
    if target is None:
        return get_config_by_key(key)
    return get_config_as(key, target)


__all__ = [
    "read_config",
    "init_config",
    "register_config",
    "get_config",
    "get_config_by_key",
    "get_config_as",
    "get_config_strict",
    "require_config",
    "list_namespaces",
    "get_store",
    "ConfigStore",
    "RegistrySettings",
    "ZirvError",
    "ConfigError",
    "ConversionError",
    "SerializationError",
    "StorePoisonedError",
    "ErrorCode",
    "U8", "U16", "U32", "U64",
    "I8", "I16", "I32", "I64",
]
