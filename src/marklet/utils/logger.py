"""Logger lookup for Marklet modules.

Every logger lives under the ``marklet`` namespace, so applications can
configure the whole library through ``logging.getLogger("marklet")``. The
library never installs handlers.
"""

import logging

_ROOT = "marklet"


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for ``name`` under the ``marklet`` namespace.

    Module ``__name__`` values are already namespaced and pass through.
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
