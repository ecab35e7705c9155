# src/api/middleware/__init__.py
from api.middleware.hit_counting import HitCountingApp

__all__ = ["HitCountingApp"]
