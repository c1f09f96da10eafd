from .loader import ConfigError, load_engine_config, load_script, load_yaml_config
from .models import EngineConfig, EngineSection, LoggingSection, SurfaceSection

__all__ = [
    "ConfigError",
    "EngineConfig",
    "EngineSection",
    "LoggingSection",
    "SurfaceSection",
    "load_engine_config",
    "load_script",
    "load_yaml_config",
]
