from .loader import (
    CSV_URL_ENV,
    DEFAULT_CONFIG_PATH,
    DEFAULT_SHEETS_CSV_URL,
    ConfigError,
    SheetConfig,
    load_config,
)

__all__ = [
    "CSV_URL_ENV",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_SHEETS_CSV_URL",
    "ConfigError",
    "SheetConfig",
    "load_config",
]
