#!/usr/bin/env python3
"""
VCF Variant Prioritizer

DESCRIPTION:
    Prioritizes annotated variants for clinical/research review. Combines
    population frequency, predicted impact and inheritance annotations
    (VEP, vcfanno, slivar, psap) into a rank, reconciles compound het pairs
    and extracts representative transcript consequences.

RANK LADDER (first match wins, INFO 'rank'):
    1.0  damaging missense/LoF, rare, in a risk gene
    2.0  LoF, rare, constrained gene
    2.5  damaging missense or splice-damaging, rare, constrained gene
    3.0  recessive candidate, frequency <= 1%, phom < 0.002
    4.0  damaging and rare
    5.0  LoF/missense/splice at 0.01%-0.1% frequency
    5.5  de novo
    6.0  recessive candidate with damaging call or moderate phom
    Compound het halves also get INFO 'comphet_rank' (3.0 or 6.0) from pchet.

USAGE:
    vcf_prioritizer.py rank BRCA1 SCN2A < in.vcf > ranked.vcf
    vcf_prioritizer.py filter-comphet -i ranked.vcf -o comphet.vcf
    vcf_prioritizer.py pull-csq --extract SYMBOL,HGVSc < vep.vcf > out.vcf
    vcf_prioritizer.py manip-info --operator max --prefix splice SpliceAI_AG SpliceAI_DL
    vcf_prioritizer.py coords --label hg19
    vcf_prioritizer.py anchor --character '*' --reference ref.fa
    vcf_prioritizer.py psap2vcf --txt report.txt --proband S1 -o psap.vcf
    vcf_prioritizer.py mk-vcf < variants.txt > variants.vcf

All commands read stdin and write stdout unless -i/-o are given. Logging
goes to stderr.
"""

import argparse
import logging
import sys

from analysis.variant_processor import VariantProcessor
from config.constants import PSAP_HEADER_FIELDS, VARIANT_LIST_HEADER_FIELDS
from config.ranking_config import load_config
from preprocess.psap_converter import read_psap_report, psap_to_variants
from preprocess.variant_list import parse_variant_lines
from utils.vcf_utils import write_variants

__version__ = "1.0.0"


def run_rank(args):
    thresholds = load_config(args.config) if args.config else None
    VariantProcessor(args.input, args.output).rank(args.risk_genes, thresholds)


def run_filter_comphet(args):
    VariantProcessor(args.input, args.output).filter_comphet()


def run_pull_csq(args):
    fields = [f.strip() for f in args.extract.split(',') if f.strip()]
    if not fields:
        raise ValueError("--extract needs at least one CSQ field name")
    VariantProcessor(args.input, args.output).pull_csq(fields)


def run_manip_info(args):
    VariantProcessor(args.input, args.output).manip_info(args.fields, args.prefix, args.operator)


def run_coords(args):
    VariantProcessor(args.input, args.output).coords(args.label)


def run_anchor(args):
    VariantProcessor(args.input, args.output).anchor(args.reference, args.character)


def run_psap2vcf(args):
    variants = psap_to_variants(read_psap_report(args.txt, args.proband))
    written = write_variants(variants, PSAP_HEADER_FIELDS, args.output)
    logging.info(f"Wrote {written:,} psap variants")


def run_mk_vcf(args):
    if args.input == '-':
        variants = parse_variant_lines(sys.stdin)
    else:
        with open(args.input, 'r') as f:
            variants = parse_variant_lines(f)
    written = write_variants(variants, VARIANT_LIST_HEADER_FIELDS, args.output)
    logging.info(f"Wrote {written:,} variants")


def build_parser():
    parser = argparse.ArgumentParser(
        description='Prioritize, pair and summarize annotated VCF variants',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")

    io_parser = argparse.ArgumentParser(add_help=False)
    io_parser.add_argument('--input', '-i', default='-', help='Input file (default: stdin)')
    io_parser.add_argument('--output', '-o', default='-', help='Output VCF (default: stdout, .gz for BGZF)')

    subparsers = parser.add_subparsers(dest='command', metavar='command')
    subparsers.required = True

    p = subparsers.add_parser('rank', parents=[io_parser],
                              help='create INFO rank/comphet_rank from annotations')
    p.add_argument('risk_genes', nargs='*', help='Risk gene symbols (rank 1.0)')
    p.add_argument('--config', '-c', help='JSON file with ranking threshold overrides')
    p.set_defaults(func=run_rank)

    p = subparsers.add_parser('filter-comphet', aliases=['filterCompHet'], parents=[io_parser],
                              help='remove compound het pairs that dont both have ranks')
    p.set_defaults(func=run_filter_comphet)

    p = subparsers.add_parser('pull-csq', aliases=['pullCSQ'], parents=[io_parser],
                              help='extract CSQ fields of the canonical and most severe transcripts')
    p.add_argument('--extract', '-e', required=True, help='Comma separated CSQ fields to extract')
    p.set_defaults(func=run_pull_csq)

    p = subparsers.add_parser('manip-info', aliases=['manipInfo'], parents=[io_parser],
                              help='make new INFO field based off other fields')
    p.add_argument('--operator', required=True, choices=['max', 'min', 'mean'],
                   help='how to combine fields')
    p.add_argument('--prefix', required=True, help='prefix of new field being created')
    p.add_argument('fields', nargs='+', help='INFO fields to combine')
    p.set_defaults(func=run_manip_info)

    p = subparsers.add_parser('coords', parents=[io_parser],
                              help='add coordinates of variant to INFO field')
    p.add_argument('--label', required=True, help='label of coords, i.e. hg19 -> hg19_pos')
    p.set_defaults(func=run_coords)

    p = subparsers.add_parser('anchor', parents=[io_parser],
                              help='replace placeholder allele (*, -) with anchored ref/alt')
    p.add_argument('--character', default='*', help='placeholder allele to replace')
    p.add_argument('--reference', required=True, help='indexed reference FASTA for the anchor base')
    p.set_defaults(func=run_anchor)

    p = subparsers.add_parser('psap2vcf', help='convert psap report txt to VCF with popScores in INFO')
    p.add_argument('--txt', required=True, help='psap report to extract values from')
    p.add_argument('--proband', required=True, help='proband name')
    p.add_argument('--output', '-o', default='-', help='Output VCF (default: stdout)')
    p.set_defaults(func=run_psap2vcf)

    p = subparsers.add_parser('mk-vcf', aliases=['mkVcf'], parents=[io_parser],
                              help='convert chrom-pos-ref-alt-sample lines to VCF')
    p.set_defaults(func=run_mk_vcf)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Set up logging (stderr, keeps stdout free for VCF output)
    logging.basicConfig(
        format='%(asctime)s - %(levelname)s - %(message)s',
        level=logging.DEBUG if args.debug else logging.INFO
    )

    try:
        args.func(args)
    except KeyboardInterrupt:
        logging.error("Interrupted by user")
        return 1
    except Exception as e:
        logging.error(f"{args.command} failed: {e}")
        if args.debug:
            import traceback
            logging.error(traceback.format_exc())
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
