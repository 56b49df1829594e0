"""Find, parse and read .env files."""

from envseek.accessors import get_bool, get_float, get_int, get_string, must_get_string
from envseek.config import DEFAULT_ENV_FILE, DEFAULT_MAX_DEPTH, SearchConfig, default_search_config
from envseek.errors import EnvIOError, EnvSeekError, EnvStoreError, FormatError, InvalidKeyError, MissingRequiredError
from envseek.loader import load, load_file, load_with_config, unload
from envseek.parser import ParsedAssignment, is_valid_key, parse_file, parse_line, parse_lines
from envseek.store import EnvironmentStore, MappingEnvironment, ProcessEnvironment, default_store
from envseek.traversal import iter_candidate_files

__all__ = [
    "DEFAULT_ENV_FILE",
    "DEFAULT_MAX_DEPTH",
    "EnvIOError",
    "EnvSeekError",
    "EnvStoreError",
    "EnvironmentStore",
    "FormatError",
    "InvalidKeyError",
    "MappingEnvironment",
    "MissingRequiredError",
    "ParsedAssignment",
    "ProcessEnvironment",
    "SearchConfig",
    "default_search_config",
    "default_store",
    "get_bool",
    "get_float",
    "get_int",
    "get_string",
    "is_valid_key",
    "iter_candidate_files",
    "load",
    "load_file",
    "load_with_config",
    "must_get_string",
    "parse_file",
    "parse_line",
    "parse_lines",
    "unload",
]
