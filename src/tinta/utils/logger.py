"""Package logger names.

Every module logs through ``get_logger(__name__)`` so records land under the
``tinta`` hierarchy. The library never installs handlers or sets levels;
callers opt in, e.g. ``logging.getLogger("tinta.lexer").setLevel(logging.DEBUG)``.

Only DEBUG records are emitted, from the segmenter, formatter, assembler,
editing host and image collaborator.
"""

from __future__ import annotations

import logging

ROOT = "tinta"


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``tinta`` hierarchy.

    Names outside the package are nested below it:

        >>> get_logger("mymodule").name
        'tinta.mymodule'
        >>> get_logger("tinta.storage").name
        'tinta.storage'
    """
    if name != ROOT and not name.startswith(ROOT + "."):
        name = f"{ROOT}.{name}"
    return logging.getLogger(name)
