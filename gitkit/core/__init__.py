"""Core building blocks shared by the git layer and the CLI."""

from gitkit.core.config import GitConfig, load_config, load_config_or_default
from gitkit.core.errors import ErrorCode
from gitkit.core.result import Err, Ok, Result, is_err, is_ok

__all__ = [
    "Err",
    "ErrorCode",
    "GitConfig",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
    "load_config",
    "load_config_or_default",
]
