"""
Core module for shared domain infrastructure.

This module contains:
- Domain exceptions, value objects and the clock
- Service configuration and Prometheus metrics
- Middleware components
"""
