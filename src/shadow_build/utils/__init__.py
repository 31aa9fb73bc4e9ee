"""Utility modules for shadow-build."""

from .console import (
    _rich_success,
    _rich_error,
    _rich_warning,
    _rich_info,
    _rich_echo,
    _create_facts_table,
    _get_console,
    STATUS_SYMBOLS
)
from .helpers import detect_arch, detect_platform, find_tool

__all__ = [
    '_rich_success',
    '_rich_error',
    '_rich_warning',
    '_rich_info',
    '_rich_echo',
    '_create_facts_table',
    '_get_console',
    'STATUS_SYMBOLS',
    'detect_arch',
    'detect_platform',
    'find_tool',
]
