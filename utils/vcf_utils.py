"""
VCF Utilities

Variant model, identity keys and pysam reader/writer helpers shared by all
commands.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

import pysam


class InputFormatError(ValueError):
    """Raised when the input is structurally unusable (missing header schema, malformed link token, ...)."""


@dataclass
class Variant:
    """In-memory variant record with the same attribute surface as pysam.VariantRecord."""
    chrom: str
    pos: int
    ref: str
    alts: Tuple[str, ...] = ()
    id: Optional[str] = None
    info: Dict[str, Any] = field(default_factory=dict)


def variant_key(variant) -> Tuple[str, int, str, str]:
    """Identity of a variant: chromosome, position, reference and first alternate allele."""
    alt = variant.alts[0] if variant.alts else '.'
    return (variant.chrom, variant.pos, variant.ref, alt)


def format_variant_id(variant) -> str:
    """Format identity as chrom-pos-ref-alt for log messages."""
    return '-'.join(str(part) for part in variant_key(variant))


def add_info_fields(header: pysam.VariantHeader, info_fields: Iterable[Tuple]) -> None:
    """
    Declare INFO fields on a header, skipping fields that already exist.

    Args:
        header: pysam header to extend
        info_fields: (id, number, type, description) tuples
    """
    for field_id, number, field_type, description in info_fields:
        if field_id in header.info:
            logging.debug(f"INFO field {field_id} already declared, keeping existing definition")
            continue
        header.info.add(field_id, number, field_type, description)


def _write_mode(path: str) -> str:
    """Choose pysam write mode from output path (BGZF for .gz)."""
    return 'wz' if str(path).endswith('.gz') else 'w'


def open_vcf_reader(path: str = '-') -> pysam.VariantFile:
    """Open a VCF/BCF for reading; '-' reads stdin."""
    return pysam.VariantFile(str(path))


def open_vcf_writer(path: str, header: pysam.VariantHeader) -> pysam.VariantFile:
    """Open a VCF for writing with the given header; '-' writes stdout."""
    return pysam.VariantFile(str(path), _write_mode(path), header=header)


def build_header(variants: List[Variant], info_fields: Iterable[Tuple]) -> pysam.VariantHeader:
    """
    Build a fresh header for variants that did not come from a VCF.

    Contigs are declared in first-seen order.
    """
    header = pysam.VariantHeader()
    for chrom in dict.fromkeys(v.chrom for v in variants):
        header.contigs.add(chrom)
    add_info_fields(header, info_fields)
    return header


def write_variants(variants: List[Variant], info_fields: Iterable[Tuple], output_path: str = '-') -> int:
    """
    Write in-memory variants to a new VCF.

    Args:
        variants: Variants to write, in output order
        info_fields: INFO declarations for the keys used in variant.info
        output_path: Output path ('-' for stdout)

    Returns:
        int: Number of records written
    """
    header = build_header(variants, info_fields)
    written = 0
    with open_vcf_writer(output_path, header) as out:
        for variant in variants:
            record = out.new_record(
                contig=variant.chrom,
                start=variant.pos - 1,
                stop=variant.pos - 1 + len(variant.ref),
                alleles=(variant.ref,) + tuple(variant.alts),
                id=variant.id
            )
            for key, value in variant.info.items():
                record.info[key] = value
            out.write(record)
            written += 1
    return written
