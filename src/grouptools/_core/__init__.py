from ._config import Config, get_config
from ._errors import InvalidArgumentError
from ._main import CommonBase, Pipeable

__all__ = [
    "CommonBase",
    "Config",
    "InvalidArgumentError",
    "Pipeable",
    "get_config",
]
