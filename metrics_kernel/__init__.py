"""
Metrics Kernel

Relational store and services behind the production-metrics dashboard:
- Weekly KPI samples (efficiency, production rate, defects ppm)
- Staff roster with availability status
- Structured JSON logging and typed exceptions shared by all layers
"""

__version__ = "0.1.0"
