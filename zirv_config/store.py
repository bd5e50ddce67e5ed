"""
Configuration store.

A ConfigStore owns one mapping from namespace name to a structured value
(the JSON data model: None, bool, int, float, str, list, str-keyed dict).
Subsystems register whole namespaces; readers get independent copies of
the whole mapping or of the value found at a delimited key path.

All access to the mapping goes through a single lock. If anything fails
while the lock is held the store is poisoned and every later operation
raises StorePoisonedError.
"""

import functools
import logging
import threading
from contextlib import contextmanager
from copy import deepcopy
from typing import Any, Dict, Iterator, List, Optional, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from errors import (
    ConfigError, ConversionError, ErrorCode, SerializationError,
    StorePoisonedError, error_context
)
from serialization import to_json, to_structured
from utils.error_logging import config_error_logger
from zirv_config.settings import RegistrySettings

logger = logging.getLogger(__name__)

T = TypeVar('T')

_MISSING = object()


def _type_name(target: Any) -> str:
    return getattr(target, '__name__', None) or repr(target)


@functools.lru_cache(maxsize=256)
def _cached_adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _type_adapter(target: Any) -> TypeAdapter:
    """Get the TypeAdapter for a target, building each schema once."""
    try:
        hash(target)
    except TypeError:
        # Unhashable targets cannot be cached
        return TypeAdapter(target)
    return _cached_adapter(target)


class ConfigStore:
    """
    Thread-safe store of namespaced configuration blocks.

    Each namespace holds whatever shape its subsystem registered. A
    registration fully replaces the previous value of its namespace; there
    is no merging and no removal.
    """

    def __init__(self, settings: Optional[RegistrySettings] = None):
        """
        Create an empty store.

        Args:
            settings: Path and conversion settings (defaults if omitted)
        """
        self.settings = settings or RegistrySettings()
        self._root: Dict[str, Any] = {}
        self._lock = threading.Lock()
        self._poisoned = False

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    @contextmanager
    def _critical_section(self, operation: str) -> Iterator[Dict[str, Any]]:
        """Hold the store lock, poisoning the store if the body fails."""
        with self._lock:
            if self._poisoned:
                raise StorePoisonedError(
                    f"Configuration store is poisoned; refusing {operation}",
                    details={"operation": operation}
                )
            try:
                yield self._root
            except BaseException as e:
                self._poisoned = True
                config_error_logger.critical(
                    f"Configuration store poisoned during {operation}: {e!r}"
                )
                raise

    def register(self, namespace: str, value: Any) -> None:
        """
        Register a configuration block under a namespace.

        The value is converted to its structured form before the lock is
        taken, then stored with a single assignment so readers never see a
        half-written namespace.

        Args:
            namespace: Non-empty top-level key (for example "server")
            value: Anything serialization.to_structured accepts

        Raises:
            ConfigError: If the namespace is not a non-empty string
            SerializationError: If the value cannot be converted
            StorePoisonedError: If the store is poisoned
        """
        if not isinstance(namespace, str) or not namespace:
            raise ConfigError(
                f"Namespace must be a non-empty string, got {namespace!r}",
                ErrorCode.INVALID_NAMESPACE,
                {"namespace": repr(namespace)}
            )

        with error_context(
            component_name="ConfigStore",
            operation=f"registering namespace '{namespace}'",
            error_class=SerializationError,
            error_code=ErrorCode.CONFIG_SERIALIZATION_ERROR,
        ):
            structured = to_structured(value)

        with self._critical_section("register") as root:
            replaced = namespace in root
            root[namespace] = structured

        if replaced:
            logger.info(f"Replaced configuration for namespace: {namespace}")
        else:
            logger.debug(f"Registered configuration for namespace: {namespace}")

    def snapshot(self) -> Dict[str, Any]:
        """
        Get the full configuration.

        Returns:
            An independent deep copy of every registered namespace
        """
        with self._critical_section("snapshot") as root:
            return deepcopy(root)

    def read_path(self, path: str) -> Optional[Any]:
        """
        Get the value at a delimited key path (e.g. "server.port").

        Every segment is matched literally, so "a..b" looks up the empty
        key between "a" and "b".

        Args:
            path: Key path

        Returns:
            A copy of the resolved value, or None if any segment is missing
            or passes through something that is not a mapping
        """
        value = self._resolve(path)
        return None if value is _MISSING else value

    def _resolve(self, path: str) -> Any:
        parts = path.split(self.settings.delimiter)

        with self._critical_section("read") as root:
            current: Any = root
            for part in parts:
                if not isinstance(current, dict) or part not in current:
                    return _MISSING
                current = current[part]
            return deepcopy(current)

    def read_path_typed(
            self,
            path: str,
            target: Type[T],
            strict: Optional[bool] = None) -> Optional[T]:
        """
        Get the value at a key path converted to a target type.

        A value that fails conversion is reported on the config error
        logger and treated as absent.

        Args:
            path: Key path
            target: Anything pydantic.TypeAdapter accepts (int, a model,
                List[str], zirv_config.types.U16, ...)
            strict: Pydantic strict mode; defaults to the store settings,
                which default to strict

        Returns:
            The converted value, or None if the path is missing or the
            value has the wrong shape

        Raises:
            pydantic.PydanticSchemaGenerationError: If pydantic cannot build
                a schema for the target. This is a bug at the call site and
                is not treated as absence.
        """
        try:
            return self.read_path_strict(path, target, strict)
        except ConversionError as e:
            if self.settings.log_conversion_failures:
                config_error_logger.error(
                    f"Failed to parse config key {path} into type "
                    f"{e.details['target']}: {e.details['original_error']}"
                )
            return None

    def read_path_strict(
            self,
            path: str,
            target: Type[T],
            strict: Optional[bool] = None) -> Optional[T]:
        """
        Like read_path_typed, but a conversion failure raises.

        The stored value is validated from its JSON text. In strict mode a
        mapping still becomes a model or dataclass and an ISO string still
        becomes a datetime, but strings, booleans and floats never become
        integers.

        Returns:
            The converted value, or None if the path is missing

        Raises:
            ConversionError: If the value exists but cannot be converted
        """
        value = self._resolve(path)
        if value is _MISSING:
            return None

        if strict is None:
            strict = self.settings.strict_conversion

        adapter = _type_adapter(target)
        try:
            return adapter.validate_json(to_json(value, indent=None), strict=strict)
        except ValidationError as e:
            raise ConversionError(
                f"Config key {path} cannot be converted to {_type_name(target)}",
                details={
                    "path": path,
                    "target": _type_name(target),
                    "errors": e.errors(include_url=False),
                    "original_error": str(e),
                }
            ) from e

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get a configuration value, falling back to a default.

        Args:
            path: Key path
            default: Value returned when the path does not resolve

        Returns:
            Configuration value or default
        """
        value = self._resolve(path)
        return default if value is _MISSING else value

    def require(self, path: str) -> Any:
        """
        Get a required configuration value.

        Unlike read_path, a stored null counts as present.

        Raises:
            ConfigError: If the path does not resolve
        """
        value = self._resolve(path)
        if value is _MISSING:
            raise ConfigError(
                f"Required configuration key not found: {path}",
                ErrorCode.CONFIG_NOT_FOUND,
                {"path": path}
            )
        return value

    def namespaces(self) -> List[str]:
        """List registered namespaces in the order they first appeared."""
        with self._critical_section("list") as root:
            return list(root.keys())

    def __contains__(self, path: str) -> bool:
        return self._resolve(path) is not _MISSING

    def __repr__(self) -> str:
        return f"ConfigStore(namespaces={len(self._root)}, poisoned={self._poisoned})"
