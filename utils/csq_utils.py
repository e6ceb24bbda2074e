"""
CSQ Utilities

Parse the VEP consequence schema declared in the VCF header and split
per-transcript CSQ entries into key/value records.
"""

from config.constants import CSQ_FIELD, CSQ_FORMAT_MARKER
from utils.vcf_utils import InputFormatError


def parse_csq_schema(description):
    """
    Extract CSQ keys from the header description

    Args:
        description: INFO description, e.g. 'Consequence annotations from Ensembl VEP. Format: Allele|Consequence|...'

    Returns:
        list: CSQ keys in declaration order
    """
    if not description or CSQ_FORMAT_MARKER not in description:
        raise InputFormatError(f"{CSQ_FIELD} header description has no '{CSQ_FORMAT_MARKER}' schema")
    schema = description.split(CSQ_FORMAT_MARKER, 1)[1].strip().strip('"')
    return schema.split('|')


def get_csq_schema(header):
    """CSQ keys from a pysam header; fatal when the VCF was never annotated with VEP"""
    if CSQ_FIELD not in header.info:
        raise InputFormatError(f"no {CSQ_FIELD} field, please annotate with VEP")
    return parse_csq_schema(header.info[CSQ_FIELD].description)


def parse_csq_entry(keys, entry):
    """One pipe-delimited CSQ entry as a dict; missing trailing values become ''"""
    values = entry.split('|')
    return {key: values[i] if i < len(values) else '' for i, key in enumerate(keys)}


def parse_csq_records(keys, entries):
    return [parse_csq_entry(keys, entry) for entry in entries]
