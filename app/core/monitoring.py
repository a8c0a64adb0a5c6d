"""
Health check utilities
"""

import psutil
import time
from datetime import datetime
from typing import Dict, Any
from pydantic import BaseModel, ConfigDict

from app.core.config import Settings, settings


class SystemHealth(BaseModel):
    """System health status model"""

    status: str
    timestamp: datetime
    uptime: float
    memory_usage: Dict[str, Any]
    providers: Dict[str, bool]

    model_config = ConfigDict()


class HealthChecker:
    """Health checking with process metrics and provider configuration"""

    def __init__(self, config: Settings | None = None):
        self.start_time = time.time()
        self._config = config or settings

    def get_memory_info(self) -> Dict[str, Any]:
        """Get memory usage information"""
        memory = psutil.virtual_memory()
        return {
            "total": memory.total,
            "available": memory.available,
            "used": memory.used,
            "percentage": memory.percent,
        }

    def get_provider_status(self) -> Dict[str, bool]:
        """Report which providers have their credentials configured"""
        cfg = self._config
        return {
            "twitter": bool(cfg.twitter_bearer_token),
            "facebook": bool(cfg.facebook_api_key),
            "google_news": bool(cfg.google_api_key and cfg.google_search_engine_id),
        }

    def get_system_health(self) -> SystemHealth:
        """Get service health status"""
        uptime = time.time() - self.start_time
        memory = self.get_memory_info()
        providers = self.get_provider_status()

        # A provider without credentials answers 500, so the service is degraded
        status = "healthy"
        if memory["percentage"] > 90:
            status = "unhealthy"
        elif memory["percentage"] > 80 or not all(providers.values()):
            status = "warning"

        return SystemHealth(
            status=status,
            timestamp=datetime.now(),
            uptime=uptime,
            memory_usage=memory,
            providers=providers,
        )


# Global health checker instance
health_checker = HealthChecker()
