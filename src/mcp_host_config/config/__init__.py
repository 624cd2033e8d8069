"""Reading, merging, and writing host config files."""

from ._merge import merge_configs, read_merged_config
from ._reader import parse_host_config, read_host_config
from ._result import ReadResult
from ._writer import write_configs, write_host_config

__all__ = [
    "ReadResult",
    "merge_configs",
    "parse_host_config",
    "read_host_config",
    "read_merged_config",
    "write_configs",
    "write_host_config",
]
