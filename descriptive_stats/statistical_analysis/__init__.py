"""
Statistical Analysis Module

This module contains the descriptive statistics engine.
"""

from .engine import StatisticsEngine, compute_statistics

__all__ = ['StatisticsEngine', 'compute_statistics']
