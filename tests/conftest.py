"""Pytest configuration and fixtures."""

import pysam
import pytest

from utils.vcf_utils import Variant

INFO_HEADER_LINES = [
    '##INFO=<ID=vep_Consequence,Number=1,Type=String,Description="Consequence">',
    '##INFO=<ID=vep_IMPACT,Number=1,Type=String,Description="Impact">',
    '##INFO=<ID=vep_SYMBOL,Number=1,Type=String,Description="Gene symbol">',
    '##INFO=<ID=CADD_phred,Number=1,Type=Float,Description="CADD phred">',
    '##INFO=<ID=REVEL_score,Number=1,Type=Float,Description="REVEL">',
    '##INFO=<ID=gnomAD_pLI,Number=1,Type=Float,Description="pLI">',
    '##INFO=<ID=eAF_popmax,Number=1,Type=Float,Description="exome popmax AF">',
    '##INFO=<ID=gAF_popmax,Number=1,Type=Float,Description="genome popmax AF">',
    '##INFO=<ID=TOPMed_AF,Number=1,Type=Float,Description="TOPMed AF">',
    '##INFO=<ID=spliceAI_max,Number=1,Type=Float,Description="SpliceAI max">',
    '##INFO=<ID=recessive,Number=.,Type=String,Description="recessive samples">',
    '##INFO=<ID=x_recessive,Number=.,Type=String,Description="x recessive samples">',
    '##INFO=<ID=denovo,Number=.,Type=String,Description="de novo samples">',
    '##INFO=<ID=hq_denovo,Number=.,Type=String,Description="hq de novo samples">',
    '##INFO=<ID=phom,Number=1,Type=Float,Description="psap homo score">',
    '##INFO=<ID=pchet,Number=1,Type=Float,Description="psap compound het score">',
    '##INFO=<ID=slivar_comphet,Number=.,Type=String,Description="slivar comphet">',
    '##INFO=<ID=comphet_rank,Number=1,Type=Float,Description="comphet rank">',
]

CSQ_FORMAT = 'Allele|Consequence|IMPACT|SYMBOL|Feature|BIOTYPE|CANONICAL|APPRIS|TSL'
CSQ_HEADER_LINE = (
    '##INFO=<ID=CSQ,Number=.,Type=String,'
    f'Description="Consequence annotations from Ensembl VEP. Format: {CSQ_FORMAT}">'
)


def render_vcf(records, extra_header=None, contigs=('1', '2', 'X')):
    """Build VCF text from (chrom, pos, ref, alt, info) tuples"""
    lines = ['##fileformat=VCFv4.2']
    lines += [f'##contig=<ID={c},length=248956422>' for c in contigs]
    lines += INFO_HEADER_LINES
    lines += list(extra_header or [])
    lines.append('#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO')
    for chrom, pos, ref, alt, info in records:
        lines.append(f'{chrom}\t{pos}\t.\t{ref}\t{alt}\t.\tPASS\t{info or "."}')
    return '\n'.join(lines) + '\n'


@pytest.fixture
def make_variant():
    """Factory for in-memory variants with only the given annotations."""
    def _make(chrom='1', pos=1000, ref='A', alt='G', **info):
        return Variant(chrom=chrom, pos=pos, ref=ref, alts=(alt,), info=dict(info))
    return _make


@pytest.fixture
def vcf_file(tmp_path):
    """Factory writing a small VCF to tmp_path and returning its path."""
    def _write(records, name='input.vcf', extra_header=None):
        path = tmp_path / name
        path.write_text(render_vcf(records, extra_header))
        return path
    return _write


@pytest.fixture
def read_vcf():
    """Read every record of a VCF as (chrom, pos, ref, alts, id, info dict)."""
    def _read(path):
        with pysam.VariantFile(str(path)) as vcf:
            return [
                (rec.chrom, rec.pos, rec.ref, rec.alts, rec.id, dict(rec.info.items()))
                for rec in vcf
            ]
    return _read
