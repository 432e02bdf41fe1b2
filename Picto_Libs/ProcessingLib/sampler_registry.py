"""
Sampler Registry.

This module provides a centralized registry of resampling kernels so that
scalers and configuration objects can refer to samplers by name.

Classes:
    SamplerRegistry: Registry mapping names to sampler factories

Functions:
    get_default_registry: Get the global default registry (singleton)
    register_default_samplers: Register all built-in samplers
    resolve_sampler: Turn a name, class or instance into a sampler instance
"""

from typing import Any, Callable, Dict, List, Optional
import logging

from Picto_Libs.ProcessingLib.sampler import SAMPLERS, Sampler
from Picto_Libs.errors import InvalidArgument

logger = logging.getLogger(__name__)

# Type alias for a callable producing a sampler instance
SamplerFactory = Callable[..., Sampler]


class SamplerRegistry:
    """
    Registry for resampling kernels.

    Example:
        >>> registry = SamplerRegistry()
        >>> registry.register("linear", Linear)
        >>> sampler = registry.get_sampler("linear")
        >>> sampler.support()
        1.0
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._factories: Dict[str, SamplerFactory] = {}

    def register(self, name: str, factory: SamplerFactory) -> None:
        """
        Register a sampler factory.

        Args:
            name: Unique sampler name (case-insensitive)
            factory: Callable returning a Sampler, usually the sampler class

        Raises:
            ValueError: If name is empty or factory is not callable
            RuntimeError: If name is already registered
        """
        name = str(name).strip().lower()

        if not name:
            raise ValueError("name cannot be empty")

        if not callable(factory):
            raise ValueError(f"factory must be callable, got {type(factory)}")

        if name in self._factories:
            raise RuntimeError(
                f"Sampler '{name}' is already registered. "
                f"Use unregister() first to replace it."
            )

        self._factories[name] = factory
        logger.debug(f"Registered sampler: {name}")

    def unregister(self, name: str) -> bool:
        """
        Unregister a sampler.

        Returns:
            True if unregistered, False if name was not registered
        """
        name = str(name).strip().lower()

        if name in self._factories:
            del self._factories[name]
            logger.debug(f"Unregistered sampler: {name}")
            return True

        return False

    def get_sampler(self, name: str, **params: Any) -> Sampler:
        """
        Build a sampler by name.

        Args:
            name: Registered sampler name
            **params: Keyword arguments for parameterized samplers (e.g. sigma)

        Raises:
            KeyError: If name is not registered
        """
        name = str(name).strip().lower()

        if name not in self._factories:
            available = ", ".join(self.list_samplers())
            raise KeyError(
                f"No sampler registered as '{name}'. "
                f"Available samplers: {available}"
            )

        return self._factories[name](**params)

    def has_sampler(self, name: str) -> bool:
        return str(name).strip().lower() in self._factories

    def list_samplers(self) -> List[str]:
        """Sorted list of registered sampler names."""
        return sorted(self._factories.keys())


# Global singleton registry
_default_registry: Optional[SamplerRegistry] = None


def get_default_registry() -> SamplerRegistry:
    """
    Get the global default registry (singleton).

    Creates the registry on first call and registers the built-in samplers.
    """
    global _default_registry

    if _default_registry is None:
        _default_registry = SamplerRegistry()
        register_default_samplers(_default_registry)

    return _default_registry


def register_default_samplers(registry: SamplerRegistry) -> None:
    """
    Register the built-in samplers: nearest, linear, cubic, gaussian,
    lanczos2 and lanczos3.
    """
    for sampler in SAMPLERS:
        registry.register(sampler.__name__, sampler)

    logger.info("Registered default samplers")


def resolve_sampler(sampler: Any, registry: Optional[SamplerRegistry] = None) -> Sampler:
    """
    Accept a sampler instance, a Sampler subclass or a registered name.

    Raises:
        InvalidArgument: If the value cannot be turned into a sampler
    """
    if isinstance(sampler, Sampler):
        return sampler

    if isinstance(sampler, type) and issubclass(sampler, Sampler):
        return sampler()

    if isinstance(sampler, str):
        registry = registry or get_default_registry()
        try:
            return registry.get_sampler(sampler)
        except KeyError as e:
            raise InvalidArgument(str(e)) from e

    raise InvalidArgument(f"Expected sampler, sampler class or name, got {type(sampler)}")
