# src/jalali_calendars/adapters/rendering/__init__.py
"""
Rendering Interfaces

Abstract list and grid surfaces implemented by the host UI toolkit.
"""

from jalali_calendars.adapters.rendering.base import GridSurface, ListSurface

__all__ = ["GridSurface", "ListSurface"]
