from ._core import Config, InvalidArgumentError, get_config
from ._dict import Dict
from ._grouping import Partition, chunk, group_by, group_items, partition
from ._seq import Seq

__all__ = [
    "Config",
    "Dict",
    "InvalidArgumentError",
    "Partition",
    "Seq",
    "chunk",
    "get_config",
    "group_by",
    "group_items",
    "partition",
]
