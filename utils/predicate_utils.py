"""
Predicate Utilities

Boolean classifiers over a variant's annotations: damaging missense,
loss-of-function, splice damage, gene constraint and rarity, plus the
population frequency resolution they share.

Every predicate is total: missing inputs fall back to ANNOTATION_DEFAULTS.
"""

from config.constants import (
    ANNOTATION_FIELDS,
    ANNOTATION_DEFAULTS,
    HIGH_IMPACT,
    MISSENSE_CONSEQUENCE
)
from config.ranking_config import RANKING_THRESHOLDS
from utils.annotation_utils import get_float, get_string, has_annotation


def get_population_frequency(variant):
    """Exome popmax frequency, falling back to genome popmax, else 0.0"""
    for key in (ANNOTATION_FIELDS['exome_af'], ANNOTATION_FIELDS['genome_af']):
        af = get_float(variant, key, None)
        if af is not None:
            return af
    return ANNOTATION_DEFAULTS['population_af']


def get_topmed_frequency(variant):
    """TOPMed allele frequency (third, independent frequency source)"""
    return get_float(variant, ANNOTATION_FIELDS['topmed_af'], ANNOTATION_DEFAULTS['topmed_af'])


def get_phom(variant):
    return get_float(variant, ANNOTATION_FIELDS['phom'], ANNOTATION_DEFAULTS['phom'])


def get_pchet(variant):
    return get_float(variant, ANNOTATION_FIELDS['pchet'], ANNOTATION_DEFAULTS['pchet'])


def get_consequence(variant):
    return get_string(variant, ANNOTATION_FIELDS['consequence'], ANNOTATION_DEFAULTS['consequence'])


def get_gene_symbol(variant):
    return get_string(variant, ANNOTATION_FIELDS['gene_symbol'], ANNOTATION_DEFAULTS['gene_symbol'])


def is_rare(variant, thresholds=RANKING_THRESHOLDS):
    """Population frequency <= rare_af_max AND TOPMed frequency < rare_topmed_max"""
    return (
        get_population_frequency(variant) <= thresholds['rare_af_max'] and
        get_topmed_frequency(variant) < thresholds['rare_topmed_max']
    )


def is_missense(variant):
    return get_consequence(variant) == MISSENSE_CONSEQUENCE


def is_damaging_missense(variant, thresholds=RANKING_THRESHOLDS):
    """
    Missense consequence with a deleterious CADD or REVEL score

    Args:
        variant: Variant or pysam.VariantRecord
        thresholds: Ranking threshold table

    Returns:
        bool: True for missense_variant with CADD >= cadd_min or REVEL >= revel_min
    """
    cadd = get_float(variant, ANNOTATION_FIELDS['cadd'], ANNOTATION_DEFAULTS['cadd'])
    revel = get_float(variant, ANNOTATION_FIELDS['revel'], ANNOTATION_DEFAULTS['revel'])
    deleterious = cadd >= thresholds['cadd_min'] or revel >= thresholds['revel_min']
    return is_missense(variant) and deleterious


def is_loss_of_function(variant):
    """VEP impact is HIGH"""
    impact = get_string(variant, ANNOTATION_FIELDS['impact'], ANNOTATION_DEFAULTS['impact'])
    return impact == HIGH_IMPACT


def is_splice_damaging(variant, thresholds=RANKING_THRESHOLDS):
    """SpliceAI max delta score >= splice_ai_min"""
    score = get_float(variant, ANNOTATION_FIELDS['splice_ai'], ANNOTATION_DEFAULTS['splice_ai'])
    return score >= thresholds['splice_ai_min']


def is_constrained_gene(variant, thresholds=RANKING_THRESHOLDS):
    """gnomAD pLI >= pli_min"""
    pli = get_float(variant, ANNOTATION_FIELDS['pli'], ANNOTATION_DEFAULTS['pli'])
    return pli >= thresholds['pli_min']


def is_damaging(variant, thresholds=RANKING_THRESHOLDS):
    """Any of damaging missense, loss-of-function or splice damage"""
    return (
        is_damaging_missense(variant, thresholds) or
        is_loss_of_function(variant) or
        is_splice_damaging(variant, thresholds)
    )


def is_recessive_candidate(variant):
    """Flagged by the recessive or x-linked recessive inheritance filter"""
    return (
        has_annotation(variant, ANNOTATION_FIELDS['recessive']) or
        has_annotation(variant, ANNOTATION_FIELDS['x_recessive'])
    )


def is_denovo(variant):
    """Flagged by either de novo filter"""
    return (
        has_annotation(variant, ANNOTATION_FIELDS['denovo']) or
        has_annotation(variant, ANNOTATION_FIELDS['hq_denovo'])
    )


def has_comphet_token(variant):
    return has_annotation(variant, ANNOTATION_FIELDS['comphet'])
