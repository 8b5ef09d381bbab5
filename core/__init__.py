"""Core module - ERP-neutral settings and observability.

ERP-specific logic (Holded, etc.) belongs in /connectors/.
"""

__version__ = "1.0.0"
