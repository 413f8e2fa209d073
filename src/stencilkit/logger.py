"""Contains the name for the logger of stencilkit modules.

``stencilkit`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
The derivative operations only emit ``DEBUG`` records, e.g. when the step
size falls back to machine epsilon or when a sample returned by the
differentiated function is cast to the precision of the evaluation point.

Nothing is displayed unless the calling application configures logging
for ``stencilkit.logger.stencilkit_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.DEBUG,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "stencilkit"
stencilkit_logger = logging.getLogger(logger_name)
