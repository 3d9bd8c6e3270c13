"""
Execution timing for arbitrary callables.

A call is timed by running it once between two monotonic clock readings and
handing the resulting ``Measurement`` to a sink. The call's return value or
exception reaches the caller untouched.

    @log_execution_time
    def process_order():
        ...

    result = time_call(lambda: client.fetch(), "client.fetch")
"""
import functools
import inspect
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

from exec_timer.monitoring.logger import get_logger

logger = get_logger("metrics")

T = TypeVar('T')

# Monotonic clock in fractional seconds
monotonic: Callable[[], float] = time.perf_counter

@dataclass(frozen=True)
class Measurement:
    """Elapsed time of a single completed call."""
    identifier: str
    duration_ms: int

    def __post_init__(self):
        _validate_identifier(self.identifier)
        if self.duration_ms < 0:
            raise ValueError(f"duration_ms must be >= 0, got {self.duration_ms}")

    def to_log_line(self) -> str:
        return f"{self.identifier} executed in {self.duration_ms}ms"

MeasurementSink = Callable[[Measurement], None]

def log_measurement(measurement: Measurement) -> None:
    """Default sink: one INFO line on the metrics logger."""
    logger.info(
        measurement.to_log_line(),
        extra={
            "identifier": measurement.identifier,
            "duration_ms": measurement.duration_ms,
        },
    )

def _validate_identifier(identifier: str) -> None:
    if not isinstance(identifier, str) or not identifier:
        raise ValueError("identifier must be a non-empty string")

def _elapsed_ms(start: float, end: float) -> int:
    # clamp: a misbehaving clock must never produce a negative duration
    return max(0, int((end - start) * 1000))

def _emit(measurement: Measurement, sink: Optional[MeasurementSink]) -> None:
    try:
        (sink or log_measurement)(measurement)
    except Exception as e:
        logger.error(
            f"Measurement sink failed for {measurement.identifier}: {str(e)}",
            exc_info=True,
        )

def time_call(
    operation: Callable[[], T],
    identifier: str,
    sink: Optional[MeasurementSink] = None,
) -> T:
    """
    Run ``operation`` once and emit how long it took.

    Args:
        operation: Zero-argument callable to execute
        identifier: Name of the operation, used verbatim in the measurement
        sink: Receives the measurement; defaults to ``log_measurement``

    Returns:
        Whatever ``operation`` returned, unchanged

    Raises:
        ValueError: If ``identifier`` is empty (checked before running)
        Exception: Anything ``operation`` raises, re-raised unchanged after
            the measurement is emitted
    """
    _validate_identifier(identifier)
    start = monotonic()
    try:
        return operation()
    finally:
        _emit(Measurement(identifier, _elapsed_ms(start, monotonic())), sink)

def log_execution_time(
    func: Optional[Callable[..., Any]] = None,
    *,
    identifier: Optional[str] = None,
    sink: Optional[MeasurementSink] = None,
):
    """
    Decorator that logs execution time of a function or coroutine function.

    Can be applied bare (``@log_execution_time``) or with keyword arguments
    (``@log_execution_time(identifier="OrderService.processOrder")``). The
    default identifier is ``<module>.<qualname>`` of the decorated function.
    Every call produces exactly one measurement.
    """
    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        name = identifier if identifier is not None else f"{fn.__module__}.{fn.__qualname__}"
        _validate_identifier(name)

        if inspect.iscoroutinefunction(fn):
            @functools.wraps(fn)
            async def async_wrapper(*args, **kwargs):
                start = monotonic()
                try:
                    return await fn(*args, **kwargs)
                finally:
                    _emit(Measurement(name, _elapsed_ms(start, monotonic())), sink)
            return async_wrapper

        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            return time_call(functools.partial(fn, *args, **kwargs), name, sink)
        return wrapper

    if func is None:
        return decorator
    return decorator(func)
