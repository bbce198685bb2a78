# topmark:header:start
#
#   project      : hueline
#   file         : version.py
#   file_relpath : src/hueline/utils/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Version string conversion for the `version` command."""

from __future__ import annotations

import re
from typing import Final

# The PEP 440 subset hueline releases use:
#   X.Y.Z, X.Y.Z{a,b,rc}N, X.Y.Z.devN, optional +local
# .postN is rejected (no SemVer equivalent).
_PEP440_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    ^
    (?P<release>(?:0|[1-9]\d*)\.(?:0|[1-9]\d*)\.(?:0|[1-9]\d*))
    (?:(?P<pre_label>a|b|rc)(?P<pre_num>\d+))?
    (?:\.post(?P<post>\d+))?
    (?:\.dev(?P<dev>\d+))?
    (?:\+(?P<local>[0-9A-Za-z]+(?:\.[0-9A-Za-z]+)*))?
    $
    """,
    re.VERBOSE,
)

_PRE_LABELS: Final[dict[str, str]] = {"a": "alpha", "b": "beta", "rc": "rc"}


def pep440_to_semver(pep440_version: str) -> str:
    """Convert a PEP 440 version to SemVer.

    Maps ``rcN`` to ``-rc.N``, ``aN`` to ``-alpha.N``, ``bN`` to ``-beta.N``
    and ``.devN`` to ``-dev.N`` (or ``.dev.N`` after a pre-release). Local
    segments are kept as build metadata.

    Args:
        pep440_version (str): The version in PEP 440 format.

    Returns:
        str: The version in SemVer format.

    Raises:
        ValueError: If the version is not recognized or is a post-release.
    """
    m: re.Match[str] | None = _PEP440_RE.match(pep440_version)
    if m is None:
        raise ValueError(f"Not a recognized PEP 440 version: {pep440_version!r}")
    if m.group("post") is not None:
        raise ValueError(f"Post-releases are not valid SemVer: {pep440_version!r}")

    out: str = m.group("release")
    if m.group("pre_label"):
        out += f"-{_PRE_LABELS[m.group('pre_label')]}.{m.group('pre_num')}"
    if m.group("dev"):
        out += f"{'.' if m.group('pre_label') else '-'}dev.{m.group('dev')}"
    if m.group("local"):
        out += f"+{m.group('local')}"
    return out
