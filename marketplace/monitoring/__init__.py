"""
모니터링
로깅, 메트릭 기능 제공
"""

from .logger import get_logger, setup_logging
from .metrics import MetricsCollector

# 글로벌 인스턴스
global_metrics = MetricsCollector()

__all__ = [
    "setup_logging",
    "get_logger",
    "MetricsCollector",
    "global_metrics",
]
