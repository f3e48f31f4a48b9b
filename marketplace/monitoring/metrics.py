"""
성능 메트릭
API 요청/오류 카운터와 지연 시간 히스토그램
"""

import statistics
from collections import deque
from datetime import datetime
from typing import Any, Dict, Optional

from .logger import get_logger

logger = get_logger(__name__)


class Metric:
    """개별 메트릭"""

    def __init__(self, name: str, metric_type: str = "gauge", window_size: int = 100):
        self.name = name
        self.metric_type = metric_type  # gauge, counter, histogram
        self.values = deque(maxlen=window_size)
        self._counter = 0
        self.created_at = datetime.now()

    def record(self, value: float):
        """값 기록"""
        if self.metric_type == "counter":
            self._counter += value
            self.values.append(self._counter)
        else:
            self.values.append(value)

    def get_value(self) -> float:
        """현재 값 조회"""
        if self.metric_type == "counter":
            return self._counter
        return self.values[-1] if self.values else 0

    def get_stats(self) -> Dict[str, float]:
        """통계 정보"""
        if not self.values:
            return {"count": 0, "mean": 0, "min": 0, "max": 0, "p50": 0, "p95": 0}

        values = list(self.values)
        sorted_values = sorted(values)
        count = len(values)

        return {
            "count": count,
            "mean": statistics.mean(values),
            "min": sorted_values[0],
            "max": sorted_values[-1],
            "p50": sorted_values[int(count * 0.5)],
            "p95": sorted_values[int(count * 0.95)] if count > 20 else sorted_values[-1],
        }


class MetricsCollector:
    """메트릭 수집기"""

    def __init__(self):
        self.metrics: Dict[str, Metric] = {}

        # API 메트릭
        self.register("api.requests", "counter")
        self.register("api.errors", "counter")
        self.register("api.validation_errors", "counter")
        self.register("api.latency", "histogram")

        # 비즈니스 메트릭
        self.register("users.registered", "counter")
        self.register("products.created", "counter")
        self.register("trx.created", "counter")

    def register(self, name: str, metric_type: str = "gauge", window_size: int = 100) -> Metric:
        """메트릭 등록"""
        if name not in self.metrics:
            self.metrics[name] = Metric(name, metric_type, window_size)
        return self.metrics[name]

    def record(self, name: str, value: float):
        """값 기록"""
        if name not in self.metrics:
            self.register(name)
        self.metrics[name].record(value)

    def increment(self, name: str, amount: float = 1):
        """카운터 증가"""
        if name not in self.metrics:
            self.register(name, "counter")
        self.metrics[name].record(amount)

    def get_metric(self, name: str) -> Optional[Metric]:
        return self.metrics.get(name)

    def get_summary(self) -> Dict[str, Any]:
        """메트릭 요약"""
        requests = self.metrics["api.requests"].get_value()
        errors = self.metrics["api.errors"].get_value()

        return {
            "timestamp": datetime.now().isoformat(),
            "api": {
                "total_requests": requests,
                "total_errors": errors,
                "validation_errors": self.metrics["api.validation_errors"].get_value(),
                "error_rate": errors / max(requests, 1),
                "latency": self.metrics["api.latency"].get_stats(),
            },
            "business": {
                "users_registered": self.metrics["users.registered"].get_value(),
                "products_created": self.metrics["products.created"].get_value(),
                "trx_created": self.metrics["trx.created"].get_value(),
            },
        }

    def reset(self):
        """모든 메트릭 초기화"""
        self.__init__()
