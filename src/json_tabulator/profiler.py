"""Performance profiler for JSON Tabulator conversions."""

import time
import psutil
import logging
from typing import Dict, Any, Optional, List
from dataclasses import dataclass
from contextlib import contextmanager


@dataclass
class PerformanceMetrics:
    """Performance metrics for one conversion."""
    operation_name: str
    duration: float
    input_size: int
    output_size: int
    memory_start_mb: float
    memory_end_mb: float
    memory_peak_mb: float
    throughput_mbps: float


class PerformanceProfiler:
    """
    Records duration, memory and throughput of conversion operations.

    Memory figures are the resident set size of the current process as
    reported by psutil.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the performance profiler.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: List[PerformanceMetrics] = []
        self.current_operation: Optional[str] = None
        self.start_time: Optional[float] = None
        self.start_memory: float = 0.0
        self.peak_memory: float = 0.0
        self.input_size = 0
        self.output_size = 0

    @contextmanager
    def profile_operation(self, operation_name: str, input_size: int = 0):
        """
        Context manager for profiling operations.

        Call ``record_output`` inside the block to include the output size
        in the throughput figures.

        Args:
            operation_name: Name of the operation being profiled
            input_size: Size of input data in bytes
        """
        self.start_profiling(operation_name, input_size)
        try:
            yield self
        finally:
            self.stop_profiling()

    def start_profiling(self, operation_name: str, input_size: int = 0) -> None:
        """Start profiling an operation."""
        self.current_operation = operation_name
        self.start_time = time.perf_counter()
        self.input_size = input_size
        self.output_size = 0
        self.start_memory = self._current_memory_mb()
        self.peak_memory = self.start_memory

        self.logger.debug(f"Started profiling: {operation_name}")

    def sample_performance(self) -> None:
        """Sample current memory usage."""
        if not self.current_operation:
            return
        self.peak_memory = max(self.peak_memory, self._current_memory_mb())

    def record_output(self, output_size: int) -> None:
        """Record the output size of the running operation."""
        self.output_size = output_size
        self.sample_performance()

    def stop_profiling(self) -> PerformanceMetrics:
        """
        Stop profiling and return metrics.

        Returns:
            PerformanceMetrics object with collected data

        Raises:
            ValueError: If no operation is being profiled
        """
        if not self.current_operation or self.start_time is None:
            raise ValueError("No active profiling session")

        duration = time.perf_counter() - self.start_time
        end_memory = self._current_memory_mb()
        self.peak_memory = max(self.peak_memory, end_memory)
        throughput = (self.input_size / 1024 / 1024) / duration if duration > 0 else 0.0  # MB/s

        metrics = PerformanceMetrics(
            operation_name=self.current_operation,
            duration=duration,
            input_size=self.input_size,
            output_size=self.output_size,
            memory_start_mb=self.start_memory,
            memory_end_mb=end_memory,
            memory_peak_mb=self.peak_memory,
            throughput_mbps=throughput
        )
        self.metrics_history.append(metrics)

        self.logger.info(f"Performance Summary - {self.current_operation}: "
                         f"{duration * 1000:.1f}ms, {throughput:.2f} MB/s, "
                         f"peak memory {self.peak_memory:.1f} MB")

        self.current_operation = None
        self.start_time = None
        return metrics

    def get_performance_summary(self) -> Dict[str, Any]:
        """
        Get summary of all performance metrics.

        Returns:
            Dictionary with performance summary
        """
        if not self.metrics_history:
            return {"total_operations": 0}

        count = len(self.metrics_history)
        return {
            "total_operations": count,
            "total_duration": sum(m.duration for m in self.metrics_history),
            "total_input_bytes": sum(m.input_size for m in self.metrics_history),
            "total_output_bytes": sum(m.output_size for m in self.metrics_history),
            "average_throughput_mbps": sum(m.throughput_mbps for m in self.metrics_history) / count,
            "max_memory_peak_mb": max(m.memory_peak_mb for m in self.metrics_history),
            "operations": [
                {
                    "name": m.operation_name,
                    "duration": m.duration,
                    "memory_peak": m.memory_peak_mb
                }
                for m in self.metrics_history
            ]
        }

    def _current_memory_mb(self) -> float:
        try:
            return psutil.Process().memory_info().rss / 1024 / 1024
        except psutil.Error as e:
            self.logger.warning(f"Performance sampling failed: {e}")
            return self.peak_memory
