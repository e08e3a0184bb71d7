"""
In-process counters for observability. Process-local; for multi-worker use external metrics (e.g. Prometheus).
"""
import threading

# Segments whose reply could not be parsed and were skipped.
segment_parse_failures_total: int = 0
# Runs aborted because a model call failed.
generation_failures_total: int = 0
_lock = threading.Lock()


def increment_segment_parse_failures_total() -> int:
    """Increment segment_parse_failures_total; return new value. Thread-safe."""
    global segment_parse_failures_total
    with _lock:
        segment_parse_failures_total += 1
        return segment_parse_failures_total


def increment_generation_failures_total() -> int:
    """Increment generation_failures_total; return new value. Thread-safe."""
    global generation_failures_total
    with _lock:
        generation_failures_total += 1
        return generation_failures_total
