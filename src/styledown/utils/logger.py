"""Logger lookup under the ``styledown`` namespace."""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for ``name``, prefixed with ``styledown.``.

    Names already inside the package namespace are used as given.
    """
    if not (name == "styledown" or name.startswith("styledown.")):
        name = f"styledown.{name}"
    return logging.getLogger(name)
