"""
Glue Parameter Listing Command.

Shows the glue parameters a format version knows about, with the identifiers
and primitive commands the generated header assigns to them.
"""

from .state import CFG
from .generate import select_gluepars
from .printer import cons
from .params.generators.c_header_gen import KIND_COMMANDS


def list_params():
    """Execute the list command based on the configuration."""
    version = CFG().version
    pars    = select_gluepars(version)
    title   = "latest format" if version is None else f"format version {version}"

    cons.print_table(
        f"Glue parameters ({title})",
        [("Id", "right"), ("Name", "left"), ("Kind", "left"), ("Command", "left"), ("Since", "right")],
        ([str(index), par.name, par.kind.value, KIND_COMMANDS[par.kind], str(par.since)]
         for index, par in enumerate(pars)),
    )
    cons.print(f"  Total: [cyan]{len(pars)}[/cyan]")
