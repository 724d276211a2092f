"""Configuration for the pyiita package.

Controls which selection rule :func:`pyiita.iita` uses when the caller does
not pass ``selrule`` explicitly.

Resolution order (first match wins):
    1. Programmatic override via :func:`set_default_selrule`.
    2. The ``PYIITA_SELRULE`` environment variable.
    3. ``"minimal"``.

Valid rule names are ``"minimal"`` and ``"corrected"`` (case-insensitive).

Examples:
    Use the corrected rule globally from the shell::

        export PYIITA_SELRULE=corrected

    Use it programmatically::

        import pyiita
        pyiita.set_default_selrule("corrected")

    Restore the default resolution order::

        pyiita.set_default_selrule("auto")
"""

from __future__ import annotations

import os

from pyiita.core.exceptions import InvalidArgumentError

_VALID_SELRULES = {"minimal", "corrected", "auto"}

ENV_VAR = "PYIITA_SELRULE"

# Sentinel indicating "no programmatic override has been set".
_selrule_override: str | None = None


def get_default_selrule() -> str:
    """Return the active default selection rule (``"minimal"`` or ``"corrected"``).

    Resolution order:
        1. Value set by :func:`set_default_selrule` (unless ``"auto"``).
        2. ``PYIITA_SELRULE`` environment variable.
        3. ``"minimal"``.
    """
    # 1. Programmatic override
    if _selrule_override is not None and _selrule_override != "auto":
        return _selrule_override

    # 2. Environment variable
    env = os.environ.get(ENV_VAR, "").strip().lower()
    if env in ("minimal", "corrected"):
        return env

    # 3. Default
    return "minimal"


def set_default_selrule(name: str) -> None:
    """Override the default selection rule.

    Args:
        name: One of ``"minimal"``, ``"corrected"``, or ``"auto"``
            (case-insensitive). ``"auto"`` restores the default
            resolution order.

    Raises:
        InvalidArgumentError: If *name* is not a recognised rule.
    """
    global _selrule_override
    normalised = str(name).strip().lower()
    if normalised not in _VALID_SELRULES:
        raise InvalidArgumentError(
            f"Unknown selection rule '{name}'. Choose from: {sorted(_VALID_SELRULES)}"
        )
    _selrule_override = normalised
