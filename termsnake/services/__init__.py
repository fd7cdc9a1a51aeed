"""
Terminal-facing services: frame rendering and raw-mode control.
"""
