"""
Package marker for shared helpers under `monitor_service.common`.
It groups process-wide settings and logging configuration used by the API layer.
"""
