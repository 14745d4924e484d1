"""Language context binding for structured logging.

Binds the language chain and key being resolved to every log entry made
while a resolution is in progress, so miss diagnostics emitted deep in the
resolver carry enough context to be actionable.

Usage:
    from localization.logging import bind_language_context

    with bind_language_context(chain=["de", "en"], key="nav.dashboard"):
        logger.debug("translation_key_missed")

Dependencies:
    - structlog.contextvars
"""

from contextlib import contextmanager
from typing import Any, Generator, Optional, Sequence

import structlog


@contextmanager
def bind_language_context(
    chain: Optional[Sequence[str]] = None,
    key: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind resolution-scoped context to all logs within the block.

    Args:
        chain: Ordered language codes being consulted.
        key: Dotted key path being resolved.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.
    """
    context: dict[str, Any] = {}

    if chain is not None:
        context["language_chain"] = list(chain)

    if key is not None:
        context["translation_key"] = key

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())
