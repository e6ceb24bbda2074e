"""
VCF Prioritizer Preprocessing

Builders for VCFs from non-VCF sources (psap reports, plain variant lists)
and reference-based allele anchoring.
"""

from .allele_anchor import ReferenceGenome, anchor_variant
from .psap_converter import read_psap_report, psap_to_variants
from .variant_list import parse_variant_line, parse_variant_lines

__all__ = [
    'ReferenceGenome',
    'anchor_variant',
    'read_psap_report',
    'psap_to_variants',
    'parse_variant_line',
    'parse_variant_lines'
]
