"""
Generate the glue parameter C header from the parameter registry.

Run `xetex-format generate -o <header>` after adding parameters, and
`xetex-format generate -o <header> --check` in CI to verify the checked-in
header is current.
"""

import os
import sys
from typing import Optional, Tuple

from .printer import cons
from .common import XFException, file_read, file_write, create_directory
from .state import ARG, CFG
from .params import REGISTRY, GluePar, FormatVersion
from .params.generators import generate_c_header


def select_gluepars(version: Optional[FormatVersion]) -> Tuple[GluePar, ...]:
    """The parameters of `version`, or of the latest format when it is None."""
    if version is None:
        return REGISTRY.get_latest()
    return REGISTRY.get_for_version(version)


def render(version: Optional[FormatVersion]) -> str:
    return generate_c_header(select_gluepars(version), version)


def _check_or_write(path: str, content: str, check_mode: bool) -> bool:
    """Check if file is up to date or write new content. Returns True on success."""
    name = os.path.basename(path)
    if check_mode:
        if not os.path.isfile(path):
            cons.print(f"[red]ERROR:[/red] {path} does not exist")
            return False
        if file_read(path) != content:
            cons.print(f"[red]ERROR:[/red] {path} is out of date")
            cons.print("[yellow]Run xetex-format generate to update[/yellow]")
            return False
        cons.print(f"[green]OK[/green] {name} is up to date")
    else:
        dirpath = os.path.dirname(path)
        if dirpath:
            create_directory(dirpath)
        if file_write(path, content, if_different=True):
            cons.print(f"[green]Generated[/green] {path}")
        else:
            cons.print(f"[green]OK[/green] {name} is unchanged")
    return True


def generate():
    """Render the header for the configured version to a file or standard output."""
    check_mode = ARG("check", False)
    config     = CFG()
    content    = render(config.version)

    if config.output is None:
        if check_mode:
            raise XFException("--check requires an output file (--output or 'output' in the configuration).")
        cons.write(content)
        return

    if not _check_or_write(config.output, content, check_mode):
        sys.exit(1)
