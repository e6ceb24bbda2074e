"""
Annotation Utilities

Typed, default-tolerant lookups into a variant's INFO annotations. Works with
pysam.VariantRecord and the in-memory Variant alike.

Absent keys and values of an unexpected type both resolve to the caller's
default; optional upstream annotators may or may not have run.
"""


def get_annotation(variant, key):
    """Raw annotation value, or None when absent (a pysam Flag reported as False counts as absent)"""
    value = variant.info.get(key)
    if value is False:
        return None
    return value


def has_annotation(variant, key):
    """True when the annotation is present on the variant"""
    return get_annotation(variant, key) is not None


def get_float(variant, key, default):
    """
    Numeric annotation as float

    Args:
        variant: Variant or pysam.VariantRecord
        key: INFO field name
        default: Returned when the field is absent or not a single number

    Returns:
        float: Annotation value or default
    """
    value = get_annotation(variant, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return float(value)


def get_string(variant, key, default):
    """String annotation, or default when absent or not a string"""
    value = get_annotation(variant, key)
    if not isinstance(value, str):
        return default
    return value


def get_string_list(variant, key, default=None):
    """
    Multi-valued string annotation as a list

    A single string becomes a one-element list; tuples/lists (pysam Number=.)
    are returned as lists when every element is a string.
    """
    value = get_annotation(variant, key)
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return list(value)
    return default
