"""Configuration for validate-docs."""

from .DocsConfig import DocsConfig
from .LogConfig import LogConfig

__all__ = ["DocsConfig", "LogConfig"]
