from .config_loader import HeuristicsConfig, DEFAULT_CONFIG_FILE

__all__ = ["HeuristicsConfig", "DEFAULT_CONFIG_FILE"]
