"""
Glue Parameter Schema Definitions.

This module defines the core types for the engine's glue parameter table:
- GlueParKind: Classification of a glue parameter (regular or math glue)
- GluePar: Defines a single parameter (name, kind, introduction version)

The kind decides which primitive command the engine uses to assign the
parameter; the introduction version decides which format versions know it.
"""

from dataclasses import dataclass
from enum import Enum


# Format versions are plain non-negative integers.
FormatVersion = int

# Every parameter in the original table carries this version.
BASELINE_VERSION: FormatVersion = 0


class GlueParKind(Enum):
    """
    Different kinds of glue parameters.

    - REGULAR: An ordinary glue ("skip") parameter
    - MATH: A math glue ("muskip") parameter, measured in math units
    """
    REGULAR = "regular"
    MATH = "math"


@dataclass(frozen=True)
class GluePar:
    """
    Information about a single glue parameter.

    Attributes:
        name: Parameter name in the engine's naming convention
              (e.g., "line_skip", "XeTeX_linebreak_skip")
        kind: Regular or math glue
        since: First format version in which the parameter was introduced
    """
    name: str
    kind: GlueParKind
    since: FormatVersion = BASELINE_VERSION

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Glue parameter name must be a non-empty string, got {self.name!r}")
        if not isinstance(self.kind, GlueParKind):
            raise ValueError(f"Glue parameter '{self.name}' has invalid kind {self.kind!r}")
        if isinstance(self.since, bool) or not isinstance(self.since, int) or self.since < 0:
            raise ValueError(f"Glue parameter '{self.name}' needs a non-negative integer 'since', got {self.since!r}")

    @property
    def c_identifier(self) -> str:
        """Suffix of the C identifier macro: the name lowercased, underscores kept."""
        return self.name.lower()

    @property
    def primitive_name(self) -> str:
        """Name of the engine primitive: underscores removed, case kept."""
        return self.name.replace("_", "")
