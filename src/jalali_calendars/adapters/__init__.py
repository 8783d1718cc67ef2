# src/jalali_calendars/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external collaborators:
- Formatting (display text)
- Scheduling (deferred callbacks)
- Rendering (list and grid surface interfaces)
"""

__all__ = []
