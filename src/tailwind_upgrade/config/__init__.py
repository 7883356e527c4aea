from .loader import UpgradeConfig, load_config_from_path, CONFIG_FILENAME

__all__ = ["UpgradeConfig", "load_config_from_path", "CONFIG_FILENAME"]
