"""
Glue Parameter Schema Package.

Single source of truth for the engine's glue ("skip") parameters.

Import Order
------------
The imports below follow a specific order:
1. REGISTRY is imported first (empty at this point)
2. Schema classes (GluePar, GlueParKind) for type definitions
3. definitions module is imported LAST to populate and freeze REGISTRY

After initialization, REGISTRY.is_frozen is True and any attempt to
register new parameters will raise RegistryFrozenError.
"""

from typing import Tuple

from .registry import REGISTRY, RegistryFrozenError
from .schema import GluePar, GlueParKind, FormatVersion, BASELINE_VERSION

# IMPORTANT: This import populates REGISTRY with all parameter definitions
# and freezes it. It must come after REGISTRY is imported and must not be removed.
from . import definitions  # noqa: F401  pylint: disable=unused-import


def get_latest_gluepars() -> Tuple[GluePar, ...]:
    """Get information about the glue parameters used in the latest engine format."""
    return REGISTRY.get_latest()


def get_gluepars_for_version(version: FormatVersion) -> Tuple[GluePar, ...]:
    """Get information about the glue parameters used in a specific engine format version."""
    return REGISTRY.get_for_version(version)


__all__ = [
    'REGISTRY', 'RegistryFrozenError', 'GluePar', 'GlueParKind',
    'FormatVersion', 'BASELINE_VERSION',
    'get_latest_gluepars', 'get_gluepars_for_version',
]
