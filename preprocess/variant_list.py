"""
Variant list conversion

Turn plain 'chrom-pos-ref-alt-sampleId' lines into Variant records tagged
with the sample they were observed in.
"""

from utils.vcf_utils import InputFormatError, Variant


def parse_variant_line(line):
    """Parse one 'chrom-pos-ref-alt-sample' line"""
    parts = line.strip().split('-')
    if len(parts) < 5:
        raise InputFormatError(f"expected chrom-pos-ref-alt-sample, got '{line.strip()}'")
    chrom, pos, ref, alt, sample = parts[:5]
    try:
        pos = int(pos)
    except ValueError:
        raise InputFormatError("could not convert position string to int, something is wrong with format")
    return Variant(chrom=chrom, pos=pos, ref=ref, alts=(alt,), info={'sample': sample})


def parse_variant_lines(lines):
    """Parse all data lines; lines containing '#' and blank lines are skipped"""
    return [
        parse_variant_line(line)
        for line in lines
        if line.strip() and '#' not in line
    ]
