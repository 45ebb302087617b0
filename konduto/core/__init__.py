"""
Core state shared by all Konduto API calls.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from konduto.core.state import STATE, ConfigState, StateSnapshot

__all__ = ["STATE", "ConfigState", "StateSnapshot"]
