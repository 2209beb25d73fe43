"""
Glue Parameter Definitions.

The engine's glue parameters in declaration order. The position of each entry
is its GLUE_PAR__* identifier in the generated header, so new parameters go at
the end of the table with the format version that introduces them. Never
reorder, remove or rename an entry.
"""

from typing import List, Tuple

from .schema import GluePar, GlueParKind, FormatVersion
from .registry import REGISTRY

R, M = GlueParKind.REGULAR, GlueParKind.MATH

GLUE_PARS: List[Tuple[str, GlueParKind, FormatVersion]] = [
    ("line_skip",                R, 0),
    ("baseline_skip",            R, 0),
    ("par_skip",                 R, 0),
    ("above_display_skip",       R, 0),
    ("below_display_skip",       R, 0),
    ("above_display_short_skip", R, 0),
    ("below_display_short_skip", R, 0),
    ("left_skip",                R, 0),
    ("right_skip",               R, 0),
    ("top_skip",                 R, 0),
    ("split_top_skip",           R, 0),
    ("tab_skip",                 R, 0),
    ("space_skip",               R, 0),
    ("xspace_skip",              R, 0),
    ("par_fill_skip",            R, 0),
    ("XeTeX_linebreak_skip",     R, 0),
    ("thin_mu_skip",             M, 0),
    ("med_mu_skip",              M, 0),
    ("thick_mu_skip",            M, 0),
]


def load_all_definitions() -> None:
    """Register every glue parameter and freeze the registry. Idempotent."""
    if REGISTRY.is_frozen:
        return

    for name, kind, since in GLUE_PARS:
        REGISTRY.register(GluePar(name=name, kind=kind, since=since))

    REGISTRY.freeze()


load_all_definitions()
