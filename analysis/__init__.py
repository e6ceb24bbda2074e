"""
VCF Prioritizer Analysis Module

Core engine for variant ranking, compound het reconciliation and
representative consequence selection.
"""

from .variant_processor import VariantProcessor
from .priority_classifier import PriorityClassifier
from .comphet_reconciler import CompHetReconciler, CompHetLinkToken
from .consequence_selector import ConsequenceSelector

__all__ = [
    'VariantProcessor',
    'PriorityClassifier',
    'CompHetReconciler',
    'CompHetLinkToken',
    'ConsequenceSelector'
]
