"""
VCF Prioritizer Configuration Module

Centralized annotation field names, defaults, severity hierarchies and ranking thresholds.
"""

from .constants import (
    ANNOTATION_FIELDS,
    ANNOTATION_DEFAULTS,
    VEP_CONSEQUENCE_SEVERITY,
    APPRIS_TIERS,
    TSL_TIERS
)
from .ranking_config import (
    PRIORITY_RANKS,
    COMPHET_RANKS,
    RANKING_THRESHOLDS,
    load_config
)

__all__ = [
    'ANNOTATION_FIELDS',
    'ANNOTATION_DEFAULTS',
    'VEP_CONSEQUENCE_SEVERITY',
    'APPRIS_TIERS',
    'TSL_TIERS',
    'PRIORITY_RANKS',
    'COMPHET_RANKS',
    'RANKING_THRESHOLDS',
    'load_config'
]
