from .loader import ConfigFile, load_config_file, resolve_config

__all__ = ["ConfigFile", "load_config_file", "resolve_config"]
