"""
Dentist booking client: backend API client, catalog pipelines and booking flows.
"""

__version__ = "1.0.0"
