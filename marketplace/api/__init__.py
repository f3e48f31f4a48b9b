"""
마켓플레이스 API
FastAPI 기반 RESTful API 서버
"""

from .main import app

__all__ = ["app"]
