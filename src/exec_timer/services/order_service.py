"""Demo order service whose processing step is timed."""
import time
from typing import Optional

from exec_timer.config import settings
from exec_timer.monitoring.logger import get_logger
from exec_timer.monitoring.metrics import log_execution_time

logger = get_logger("order_service")

class OrderService:
    """Processes orders by simulating a long-running task."""

    def __init__(self, delay_ms: Optional[int] = None):
        """
        Args:
            delay_ms: Simulated processing time in milliseconds.
                Defaults to ``ORDER_PROCESSING_DELAY_MS``.
        """
        if delay_ms is None:
            delay_ms = settings.ORDER_PROCESSING_DELAY_MS
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")
        self.delay_ms = delay_ms

    @log_execution_time
    def process_order(self) -> None:
        logger.info("Processing order...")
        time.sleep(self.delay_ms / 1000)
        logger.info("Order processed.")
