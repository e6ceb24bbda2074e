"""
Allele anchoring

Replace a placeholder allele ('*' or '-') with a VCF-style anchored
REF/ALT pair using the reference base preceding the variant.
"""

import logging

import pysam

from utils.vcf_utils import format_variant_id


class ReferenceGenome:
    """Single-base lookups from an indexed FASTA"""

    def __init__(self, fasta_path):
        self.fasta = pysam.FastaFile(str(fasta_path))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.fasta.close()

    def preceding_base(self, chrom, pos):
        """Base immediately before 1-based position pos"""
        return self.fasta.fetch(chrom, pos - 2, pos - 1)


def anchor_variant(variant, character, preceding_base):
    """
    Anchor a variant whose ALT or REF is the placeholder character.

    Deletion (ALT == character):  pos-1, REF = base+REF, ALT = base
    Insertion (REF == character): pos-1, REF = base,     ALT = base+ALT

    Args:
        variant: Variant or pysam.VariantRecord (modified in place)
        character: Placeholder allele
        preceding_base: Callable (chrom, pos) -> reference base before pos

    Returns:
        bool: True if the variant was rewritten
    """
    alt = variant.alts[0] if variant.alts else None

    if alt == character:
        base = preceding_base(variant.chrom, variant.pos)
        new_ref, new_alt = base + variant.ref, base
    elif variant.ref == character and alt is not None:
        base = preceding_base(variant.chrom, variant.pos)
        new_ref, new_alt = base, base + alt
    else:
        return False

    logging.debug(f"anchoring {format_variant_id(variant)} with base {base}")
    variant.pos = variant.pos - 1
    variant.ref = new_ref
    variant.alts = (new_alt,)
    variant.id = None
    return True
