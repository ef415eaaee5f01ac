import datetime
import logging
import time


class DeltaTimeFormatter(logging.Formatter):
    """Allows to log the time relative to a reference time by adding an
    attribute `delta` to the :class:`.logging.LogRecord`.

    >>> import logging, sys, time
    >>> logger = logging.getLogger('demo')
    >>> stream_handler = logging.StreamHandler(stream=sys.stdout)
    >>> delta_time_formatter = DeltaTimeFormatter('%(delta)s: %(message)s')
    >>> stream_handler.setFormatter(delta_time_formatter)
    >>> logger.addHandler(stream_handler)
    >>> delta_time_formatter.set_reference_time(time.time())
    >>> logger.warning('Hello world!')  # doctest: +SKIP
    0:00:00.000: Hello world!
    """

    _reference_time = time.time()

    def format(self, record: logging.LogRecord) -> str:
        delta = datetime.timedelta(seconds=record.created - self._reference_time)
        record.delta = str(delta)[:-3]
        return super().format(record)

    def get_reference_time(self) -> float:
        """Get the reference time in seconds since the :ref:`epoch <epoch>`.
        This is compatible with the output of :func:`.time.time`.
        """
        return self._reference_time

    def set_reference_time(self, reference_time: float) -> None:
        """Set the reference time to `reference_time` seconds since the
        :ref:`epoch <epoch>`.
        """
        self._reference_time = reference_time


class Timer:
    """A simple timer measuring the wall time in seconds relative to the last
    :meth:`.reset`. Instances are implicitly reset when they are created.

    >>> timer = Timer()
    >>> timer.get() >= 0.0
    True
    """

    def __init__(self) -> None:
        self.reset()

    def get(self) -> float:
        """Get the wall time since last :meth:`.reset` in seconds.
        """
        return time.time() - self._reference_time

    def reset(self) -> None:
        """Reset the timer to 0.0 seconds.
        """
        self._reference_time = time.time()
