"""
Core module for shared domain infrastructure.

This module contains:
- Domain exceptions
- Database error translation
- Prometheus metrics
"""
