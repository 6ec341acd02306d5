from __future__ import annotations

import logging

from checkout_connector.core.config import settings

LOGGER_NAMESPACE = "checkout_connector"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Configure the ``checkout_connector`` logger namespace.

    The namespace gets its own stream handler and ``propagate = False`` so
    connector logs reach stderr regardless of how the host application set
    up the root logger.  Calling this more than once never stacks handlers.

    The package never calls this itself; it is the setup hook for the host
    application, called once at startup::

        from checkout_connector.core.logging import configure_logging

        configure_logging("DEBUG")
    """
    name = (level or settings.log_level).upper()
    log = logging.getLogger(LOGGER_NAMESPACE)
    log.setLevel(getattr(logging, name, logging.INFO))
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
    log.propagate = False
    return log
