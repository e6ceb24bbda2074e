"""
psap report conversion

Convert a psap per-proband report (tab-separated) into Variant records
carrying popScores as pdom/phom/pchet, ready to be written as VCF and
merged into the annotated call set.
"""

import logging

import pandas as pd

from config.constants import PSAP_MODEL_FIELDS
from utils.vcf_utils import InputFormatError, Variant

# Report columns holding chrom, pos, ref, alt
PSAP_COORDINATE_COLUMNS = [0, 1, 3, 4]


def read_psap_report(txt_path, proband):
    """
    Read a psap report and keep the model/score columns of one proband

    Returns:
        pd.DataFrame: columns chrom, pos, ref, alt, model, score
    """
    report = pd.read_csv(txt_path, sep='\t', dtype=str, keep_default_na=False)

    model_column = f"Dz.Model.{proband}"
    score_column = f"popScore.{proband}"
    if model_column not in report.columns:
        raise InputFormatError("could not find proband column using supplied proband name")
    if score_column not in report.columns:
        raise InputFormatError(f"could not find score column '{score_column}' in psap report")
    if len(report.columns) <= max(PSAP_COORDINATE_COLUMNS):
        raise InputFormatError("psap report has too few columns for chrom/pos/ref/alt")

    coords = report.iloc[:, PSAP_COORDINATE_COLUMNS].copy()
    coords.columns = ['chrom', 'pos', 'ref', 'alt']
    table = coords.assign(model=report[model_column], score=report[score_column])
    logging.info(f"Read {len(table):,} psap rows for proband {proband}")
    return table


def psap_to_variants(table):
    """
    Merge psap rows into one Variant per chrom/pos/ref/alt

    Rows with an unrecognised model contribute no score; the variant is still emitted.

    Returns:
        list: Variants in first-seen order
    """
    variants = {}
    for row in table.itertuples(index=False):
        key = (row.chrom, row.pos, row.ref, row.alt)
        variant = variants.get(key)
        if variant is None:
            try:
                pos = int(row.pos)
            except ValueError:
                raise InputFormatError(f"invalid position '{row.pos}' in psap report")
            variant = Variant(chrom=row.chrom, pos=pos, ref=row.ref, alts=(row.alt,))
            variants[key] = variant

        field = PSAP_MODEL_FIELDS.get(row.model)
        if field is None:
            continue
        try:
            variant.info[field] = float(row.score)
        except ValueError:
            raise InputFormatError(f"invalid psap score '{row.score}' for {'-'.join(key)}")

    return list(variants.values())
