"""
Configuration for the Konduto SDK.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from konduto.config.settings import DEFAULT_ENDPOINT, KondutoSettings, get_settings

__all__ = [
    "DEFAULT_ENDPOINT",
    "KondutoSettings",
    "get_settings",
]
