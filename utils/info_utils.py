"""
INFO Utilities

Simple per-variant derived fields: combining numeric INFO fields by
max/min/mean, and recording a variant's own coordinates under a label.
"""

import numpy as np

from utils.annotation_utils import get_float

AGGREGATE_OPERATORS = ['max', 'min', 'mean']


def aggregate_header_fields(prefix, operator):
    """INFO declarations written by aggregate_fields"""
    validate_operator(operator)
    return [
        (f"{prefix}_{operator}", 1, 'Float', f"{prefix} {operator}"),
        (f"{prefix}_{operator}_name", 1, 'String', f"which {prefix} was the {operator}"),
    ]


def validate_operator(operator):
    if operator not in AGGREGATE_OPERATORS:
        raise ValueError(f"Unknown operator '{operator}', expected one of {AGGREGATE_OPERATORS}")


def combine_values(values, names, operator):
    """
    Combine numeric values

    Args:
        values: Numeric values, at least one
        names: Field name for each value
        operator: 'max', 'min' or 'mean'

    Returns:
        tuple: (value, name); for max/min the first extreme field wins, mean is named 'mean'
    """
    validate_operator(operator)
    arr = np.asarray(values, dtype=float)
    if operator == 'max':
        idx = int(np.argmax(arr))
        return float(arr[idx]), names[idx]
    if operator == 'min':
        idx = int(np.argmin(arr))
        return float(arr[idx]), names[idx]
    return float(np.mean(arr)), 'mean'


def aggregate_fields(variant, fields, prefix, operator):
    """
    Write <prefix>_<op> and <prefix>_<op>_name from the numeric fields present on the variant

    Returns:
        bool: False when none of the fields held a number (variant left unchanged)
    """
    values = []
    names = []
    for name in fields:
        value = get_float(variant, name, None)
        if value is not None:
            values.append(value)
            names.append(name)

    if not values:
        return False

    value, name = combine_values(values, names, operator)
    variant.info[f"{prefix}_{operator}"] = value
    variant.info[f"{prefix}_{operator}_name"] = name
    return True


def coords_header_fields(label):
    return [
        (f"{label}_chr", 1, 'String', f"chromosome from {label}"),
        (f"{label}_pos", 1, 'Integer', f"position from {label}"),
    ]


def add_coords(variant, label):
    """Copy chromosome and 1-based position into <label>_chr / <label>_pos"""
    variant.info[f"{label}_chr"] = variant.chrom
    variant.info[f"{label}_pos"] = int(variant.pos)
