"""Layered configuration for the watch service.

Values are resolved with the following precedence:
1. The watched root's .watchmanconfig (root.config_file)
2. Argument tier (values set from the command line)
3. Global tier (WATCHMAN_CONFIG_FILE, then set_global writes)

Architecture:
- ConfigValue/ConfigDocument: immutable tagged JSON values
- DocumentStore: argument and global documents under a ReadWriteLock
- get_json: precedence resolution
- get_string/get_int/get_bool/get_double: typed accessors
- compute_root_files: root marker policy
- WatchConfig: service object with startup load and shutdown
"""

from watchcfg.config.accessors import (
    DEFAULT_TROUBLE_URL,
    get_bool,
    get_double,
    get_int,
    get_string,
    get_trouble_url,
)
from watchcfg.config.loader import (
    CONFIG_FILE_ENV_VAR,
    get_global_config_path,
    load_config_file,
    load_global_config,
)
from watchcfg.config.models import LoggingConfig
from watchcfg.config.resolver import get_json
from watchcfg.config.root_files import RootFiles, compute_root_files
from watchcfg.config.rwlock import ReadWriteLock
from watchcfg.config.service import WatchConfig
from watchcfg.config.store import ConfigTier, DocumentStore
from watchcfg.config.values import (
    ConfigDocument,
    ConfigValue,
    ValueKind,
    document_from_python,
    document_to_python,
)

__all__ = [
    # Values
    "ConfigDocument",
    "ConfigValue",
    "ValueKind",
    "document_from_python",
    "document_to_python",
    # Store
    "ConfigTier",
    "DocumentStore",
    "ReadWriteLock",
    # Resolution
    "get_json",
    "get_string",
    "get_int",
    "get_bool",
    "get_double",
    "get_trouble_url",
    "DEFAULT_TROUBLE_URL",
    "RootFiles",
    "compute_root_files",
    # Loader
    "CONFIG_FILE_ENV_VAR",
    "get_global_config_path",
    "load_config_file",
    "load_global_config",
    # Service
    "WatchConfig",
    # Models
    "LoggingConfig",
]
