"""Kernel value types shared by every resource-id surface.

Rules:
- Kernel code must not import from adapter layers (e.g. `resource_id.db`).
- Kernel types stay small and immutable; no allocation policy lives here.
"""
