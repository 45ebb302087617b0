"""
Utility functions for the Konduto SDK.

Author: Yobie Benjamin
Date: 2026-10-18
"""
