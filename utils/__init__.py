"""
VCF Prioritizer Utilities

Annotation access, variant predicates, CSQ parsing and VCF helpers.
"""

# Import all utility functions for easy access
from .annotation_utils import (
    get_annotation,
    has_annotation,
    get_float,
    get_string,
    get_string_list
)

from .predicate_utils import (
    get_population_frequency,
    is_rare,
    is_damaging_missense,
    is_loss_of_function,
    is_splice_damaging,
    is_constrained_gene
)

from .csq_utils import (
    parse_csq_schema,
    parse_csq_records
)

from .vcf_utils import (
    InputFormatError,
    Variant,
    variant_key
)

__all__ = [
    # Annotation access
    'get_annotation',
    'has_annotation',
    'get_float',
    'get_string',
    'get_string_list',

    # Predicates
    'get_population_frequency',
    'is_rare',
    'is_damaging_missense',
    'is_loss_of_function',
    'is_splice_damaging',
    'is_constrained_gene',

    # CSQ parsing
    'parse_csq_schema',
    'parse_csq_records',

    # VCF helpers
    'InputFormatError',
    'Variant',
    'variant_key'
]
