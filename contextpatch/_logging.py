"""
Opt-in logging for the patch pipeline.

Every public function takes ``logger=None, log: bool = False`` and turns them
into something with the ``logging.Logger`` call surface:

    log = resolve_logger(logger=logger, enabled=log, name=__name__)
    log.debug(f"Hunk #{i + 1}: matched via {tier}")

Nothing is emitted unless the caller passes a logger or ``log=True``.
"""
from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "contextpatch"


class NoopLogger:
    """Swallows every record; stands in when the caller did not opt in."""

    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug

    def isEnabledFor(self, level: int) -> bool:  # noqa: N802 - mirrors logging.Logger
        return False


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.DEBUG,
) -> logging.Logger | NoopLogger:
    """
    Pick the logger a pipeline step should write to.

    A passed ``logger`` wins and is used untouched (so a host's handlers and
    levels apply). Otherwise ``enabled`` yields the named ``contextpatch.*``
    logger at ``level``, propagating to root; else a NoopLogger.
    """
    if logger is not None:
        return logger
    if enabled:
        lg = logging.getLogger(name or ROOT_LOGGER_NAME)
        lg.setLevel(level)
        lg.propagate = True
        return lg
    return NoopLogger()


def debug_enabled(log) -> bool:
    """True when ``log`` would keep a DEBUG record; duck-typed loggers count as enabled."""
    check = getattr(log, "isEnabledFor", None)
    if check is None:
        return True
    return bool(check(logging.DEBUG))
