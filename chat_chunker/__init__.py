# Auto-register passes on package import (e.g., when importing any submodule)
from . import passes  # noqa: F401
from .config import DEFAULT_CONFIG, SplitterConfig, load_config
from .splitter import split_chat_artifact, split_chat_text

__all__: list[str] = [
    "DEFAULT_CONFIG",
    "SplitterConfig",
    "load_config",
    "split_chat_artifact",
    "split_chat_text",
]
