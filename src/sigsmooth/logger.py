"""Contains the name for the logger of sigsmooth modules.

``sigsmooth`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
Logging messages are grouped in different levels:

* ``DEBUG``: Details of each filter application (filter name, curve size, range).
* ``WARNING``: An indication that something unexpected
    happened which may require attention, e.g. an empty smoothing range.

By default, only messages of level ``WARNING`` are displayed.

Calling applications can configure the format and log level of the displayed messages
by `Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``sigsmooth.logger.sigsmooth_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.DEBUG,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "sigsmooth"
sigsmooth_logger = logging.getLogger(logger_name)
