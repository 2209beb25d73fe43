"""
C Header Generator.

Generates the glue parameter section of the engine's C header from the
parameter registry. Two blocks are produced from the same ordered parameter
list:

- the stanza: one GLUE_PAR__<name> identifier per parameter, numbered by
  position, followed by the GLUE_PARS count
- the primitives: one initializer row per parameter for the engine's
  PRIMITIVE_INITIALIZERS table, referring back to the stanza identifiers

Both writers only call stream.write(); errors raised by the stream propagate
unchanged and leave whatever was already written in place.
"""

import io
from typing import Dict, Iterable, Optional, Sequence, TextIO

from ..schema import GluePar, GlueParKind, FormatVersion


HEADER_GUARD = "TECTONIC_XETEX_FORMAT_H"

# Primitive command used to assign each kind of glue parameter
KIND_COMMANDS: Dict[GlueParKind, str] = {
    GlueParKind.REGULAR: "ASSIGN_GLUE",
    GlueParKind.MATH: "ASSIGN_MU_GLUE",
}


def _check_kind_commands(commands: Dict[GlueParKind, str]) -> None:
    """Raise ValueError unless every GlueParKind has a primitive command."""
    missing = [kind.name for kind in GlueParKind if kind not in commands]
    if missing:
        raise ValueError(f"No primitive command for glue parameter kind(s): {', '.join(missing)}")


_check_kind_commands(KIND_COMMANDS)


def emit_c_header_stanza(pars: Sequence[GluePar], stream: TextIO) -> None:
    """
    Emit C header identifiers for the glue parameters.

    The identifier of each parameter is its index in `pars`, so the order of
    `pars` must be the registry's declaration order.

    Args:
        pars: Ordered glue parameters (from the registry)
        stream: Writable text stream
    """
    stream.write("/* Glue (\"skip\") parameters */\n\n")

    for index, par in enumerate(pars):
        stream.write(f"#define GLUE_PAR__{par.c_identifier} {index}\n")

    stream.write(f"#define GLUE_PARS {len(pars)}\n\n")


def emit_c_header_primitives(pars: Iterable[GluePar], stream: TextIO) -> None:
    """
    Emit initializers for glue parameter primitives in the C header.

    Each row is a continuation line of the PRIMITIVE_INITIALIZERS macro.

    Args:
        pars: The same ordered glue parameters passed to emit_c_header_stanza
        stream: Writable text stream
    """
    for par in pars:
        cmd = KIND_COMMANDS[par.kind]

        stream.write(
            f"    {{ \"{par.primitive_name}\", {cmd}, "
            f"GLUE_BASE + GLUE_PAR__{par.c_identifier}, xf_prim_init_none }}, \\\n"
        )


def emit_c_header(pars: Sequence[GluePar], stream: TextIO,
                  version: Optional[FormatVersion] = None) -> None:
    """
    Emit a complete, include-guarded C header for the glue parameters.

    Args:
        pars: Ordered glue parameters
        stream: Writable text stream
        version: Format version the parameters were selected for, or None
                 for the latest format
    """
    stream.write("/* AUTO-GENERATED by xetex_format - Do not edit manually. */\n")
    stream.write(f"/* Format version: {'latest' if version is None else version} */\n\n")
    stream.write(f"#ifndef {HEADER_GUARD}\n")
    stream.write(f"#define {HEADER_GUARD}\n\n")

    emit_c_header_stanza(pars, stream)

    stream.write("#define PRIMITIVE_INITIALIZERS \\\n")
    emit_c_header_primitives(pars, stream)

    # The blank line terminates the macro's trailing continuation
    stream.write(f"\n#endif /* not {HEADER_GUARD} */\n")


def generate_c_header(pars: Sequence[GluePar], version: Optional[FormatVersion] = None) -> str:
    """
    Generate the full C header content.

    Returns:
        The header text, as written by emit_c_header
    """
    buf = io.StringIO()
    emit_c_header(pars, buf, version)
    return buf.getvalue()


if __name__ == "__main__":
    import sys
    from .. import REGISTRY

    emit_c_header(REGISTRY.get_latest(), sys.stdout)
