"""Engine configuration and logging."""

from retirement_engine.core.config import Settings, settings
from retirement_engine.core.logging import configure_logging, get_logger, scenario_id_ctx

__all__ = [
    "Settings",
    "settings",
    "configure_logging",
    "get_logger",
    "scenario_id_ctx",
]
