import time
from typing import Optional


def calculate_ms(start_time: float) -> float:
    """Calculate elapsed time in milliseconds."""
    return round((time.perf_counter() - start_time) * 1000, 2)


def print_node_summary(node_name: str, success: bool, timing_ms: float, **kwargs) -> None:
    """
    Print a compact summary of node execution, e.g.
    [generate] ✅ source=gemini | took 812 ms
    """
    status = "✅" if success else "❌"
    extra_info = ""
    if kwargs:
        extra_info = " " + " | ".join(f"{k}={v}" for k, v in kwargs.items()) + " |"
    print(f"[{node_name}] {status}{extra_info} took {timing_ms:.0f} ms")


def print_pipeline_summary(state: dict) -> None:
    timings = state.get("timings", {})
    total_ms: Optional[float] = state.get("total_ms") or 0
    error = state.get("error")

    if error:
        print(f"[pipeline] ❌ failed: {error}")
    breakdown = ", ".join(f"{k}={v:.0f}ms" for k, v in timings.items())
    print(f"[pipeline] ⏱ total {total_ms:.0f} ms ({breakdown})")
