# src/jalali_calendars/config/__init__.py
"""
Configuration Module

Provides centralized configuration management using Pydantic Settings.
"""

from jalali_calendars.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
