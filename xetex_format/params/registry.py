"""
Glue Parameter Registry.

Central storage for the engine's glue parameter definitions. This module
provides the GlueParRegistry class which serves as the single source of truth
for the order, kind and introduction version of every glue parameter.

Usage
-----
The global REGISTRY instance is populated by importing the definitions module.
Once populated, parameters can be queried in declaration order:

    from xetex_format.params import REGISTRY

    # Every parameter known to the newest format
    pars = REGISTRY.get_latest()

    # Only the parameters a given format version knows about
    pars = REGISTRY.get_for_version(0)

Ordering
--------
The position of a parameter in a query result is the numeric identifier the
engine assigns to it, and those identifiers are baked into format files.
Parameters are therefore only ever appended: names must be unique and the
introduction versions must never decrease along the declaration order.

Thread Safety
-------------
The registry is populated once at import time and frozen (made immutable).
After freezing, it is safe to read from multiple threads. Attempts to
register new parameters after freezing will raise RegistryFrozenError.
"""

from typing import Dict, List, Tuple

from .schema import GluePar, FormatVersion, BASELINE_VERSION


class RegistryFrozenError(RuntimeError):
    """Raised when attempting to modify a frozen registry."""


class GlueParRegistry:
    """
    Ordered, append-only registry of glue parameters.

    Attributes:
        _pars: Parameters in declaration order.
        _by_name: Dictionary mapping parameter names to their declaration index.
        _frozen: Whether the registry has been frozen (immutable).
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._pars: List[GluePar] = []
        self._by_name: Dict[str, int] = {}
        self._frozen: bool = False
        self._pars_frozen: Tuple[GluePar, ...] = None

    def freeze(self) -> None:
        """
        Freeze the registry, preventing further modifications.

        This method is idempotent (safe to call multiple times).
        """
        if not self._frozen:
            self._frozen = True
            self._pars_frozen = tuple(self._pars)

    @property
    def is_frozen(self) -> bool:
        """Return True if the registry has been frozen."""
        return self._frozen

    def register(self, par: GluePar) -> None:
        """
        Append a parameter definition.

        Args:
            par: The parameter definition to append.

        Raises:
            RegistryFrozenError: If the registry has been frozen.
            ValueError: If the name is already registered, or if the
                parameter was introduced before the last registered one
                (which would shift identifiers of an older format).
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register '{par.name}': registry is frozen. "
                "All parameters must be registered during module initialization."
            )

        if par.name in self._by_name:
            raise ValueError(f"Duplicate glue parameter '{par.name}'")

        if self._pars and par.since < self._pars[-1].since:
            raise ValueError(
                f"Glue parameter '{par.name}' (since {par.since}) cannot follow "
                f"'{self._pars[-1].name}' (since {self._pars[-1].since}): "
                "new parameters must be appended with the current or a later version"
            )

        self._by_name[par.name] = len(self._pars)
        self._pars.append(par)

    def get(self, name: str) -> GluePar:
        """Look up a parameter by name. Raises KeyError if unknown."""
        return self._pars[self._by_name[name]]

    def __len__(self) -> int:
        return len(self._pars)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def get_latest(self) -> Tuple[GluePar, ...]:
        """
        Get the glue parameters used in the latest engine format.

        Returns:
            Every registered parameter, in declaration order.
        """
        if self._frozen:
            return self._pars_frozen
        return tuple(self._pars)

    def get_for_version(self, version: FormatVersion) -> Tuple[GluePar, ...]:
        """
        Get the glue parameters used in a specific engine format version.

        Args:
            version: The format version. Versions newer than any parameter
                     yield the full list; versions older than the baseline
                     yield nothing.

        Returns:
            Parameters with since <= version, in declaration order.
        """
        return tuple(par for par in self.get_latest() if version >= par.since)

    @property
    def latest_version(self) -> FormatVersion:
        """The newest format version introducing a parameter."""
        if not self._pars:
            return BASELINE_VERSION
        return max(par.since for par in self._pars)


# Global registry instance - populated when definitions module is imported
REGISTRY = GlueParRegistry()
