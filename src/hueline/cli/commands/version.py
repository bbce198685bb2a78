# topmark:header:start
#
#   project      : hueline
#   file         : version.py
#   file_relpath : src/hueline/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""hueline `version` command.

Prints the hueline version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hueline.ansi import Ansi
from hueline.constants import HUELINE_VERSION
from hueline.utils.version import pep440_to_semver

if TYPE_CHECKING:
    from hueline.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the installed version of hueline.",
)
@click.option(
    "--semver",
    is_flag=True,
    default=False,
    help="Render the version as SemVer instead of PEP 440 (maps rc→-rc.N, dev→-dev.N).",
)
@click.pass_context
def version_command(ctx: click.Context, *, semver: bool = False) -> None:
    """Show the installed version of hueline.

    Args:
        ctx (click.Context): The Click context.
        semver (bool): Render as SemVer if True, PEP 440 (default) if False.
    """
    console: ClickConsole = ctx.obj["console"]
    verbosity: int = ctx.obj.get("verbosity_level", 0)

    version_text: str = HUELINE_VERSION
    if semver:
        try:
            version_text = pep440_to_semver(HUELINE_VERSION)
        except ValueError as exc:
            # Fall back to the raw version; surface the reason when verbose.
            if verbosity > 0:
                console.warn(f"[warn] {exc}")

    if verbosity > 0:
        label: str = "semver" if semver else "pep440"
        console.print(console.styled(f"hueline version ({label}):", Ansi.BOLD, Ansi.UNDERLINE))
        console.print(f"    {console.styled(version_text, Ansi.BOLD)}")
    else:
        console.print(console.styled(version_text, Ansi.BOLD))
