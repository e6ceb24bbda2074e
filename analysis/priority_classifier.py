"""
Priority Classifier

Assigns each variant a rank from an ordered rule list (most specific first,
first match wins) and, independently, a compound-het secondary rank from the
psap pair probability.
"""

import logging
from typing import Callable, NamedTuple, Optional

import pandas as pd

from config.constants import RANK_FIELD, COMPHET_RANK_FIELD
from config.ranking_config import RANKING_THRESHOLDS
from utils.predicate_utils import (
    get_population_frequency,
    get_topmed_frequency,
    get_phom,
    get_pchet,
    get_gene_symbol,
    is_rare,
    is_missense,
    is_damaging_missense,
    is_loss_of_function,
    is_splice_damaging,
    is_constrained_gene,
    is_damaging,
    is_recessive_candidate,
    is_denovo,
    has_comphet_token
)
from utils.vcf_utils import format_variant_id


class RankRule(NamedTuple):
    """One step of the rank ladder."""
    rank: float
    name: str
    predicate: Callable


class PriorityClassifier:
    """Rank variants with an ordered, first-match-wins rule list"""

    def __init__(self, risk_genes=None, thresholds=None):
        """
        Initialize classifier

        Args:
            risk_genes: Gene symbols of a priori interest (rank 1.0)
            thresholds: Threshold table, defaults to RANKING_THRESHOLDS
        """
        self.risk_genes = frozenset(risk_genes or [])
        self.thresholds = dict(thresholds) if thresholds else dict(RANKING_THRESHOLDS)

        self.rules = [
            RankRule(1.0, 'risk_gene_damaging', self._risk_gene_damaging),
            RankRule(2.0, 'constrained_lof', self._constrained_lof),
            RankRule(2.5, 'constrained_missense_splice', self._constrained_missense_splice),
            RankRule(3.0, 'strong_recessive', self._strong_recessive),
            RankRule(4.0, 'rare_damaging', self._rare_damaging),
            RankRule(5.0, 'low_frequency_coding', self._low_frequency_coding),
            RankRule(5.5, 'denovo', self._denovo),
            RankRule(6.0, 'weak_recessive', self._weak_recessive),
        ]
        self.comphet_rules = [
            RankRule(3.0, 'strong_comphet', self._strong_comphet),
            RankRule(6.0, 'weak_comphet', self._weak_comphet),
        ]

    # ===== PRIMARY RULES =====

    def _risk_gene_damaging(self, variant):
        t = self.thresholds
        return (
            (is_damaging_missense(variant, t) or is_loss_of_function(variant)) and
            is_rare(variant, t) and
            get_gene_symbol(variant) in self.risk_genes
        )

    def _constrained_lof(self, variant):
        t = self.thresholds
        return is_loss_of_function(variant) and is_rare(variant, t) and is_constrained_gene(variant, t)

    def _constrained_missense_splice(self, variant):
        t = self.thresholds
        return (
            (is_damaging_missense(variant, t) or is_splice_damaging(variant, t)) and
            is_rare(variant, t) and
            is_constrained_gene(variant, t)
        )

    def _strong_recessive(self, variant):
        t = self.thresholds
        if get_population_frequency(variant) > t['recessive_af_max']:
            return False
        if get_topmed_frequency(variant) > t['recessive_af_max']:
            return False
        return is_recessive_candidate(variant) and get_phom(variant) < t['phom_strong_max']

    def _rare_damaging(self, variant):
        t = self.thresholds
        return is_damaging(variant, t) and is_rare(variant, t)

    def _low_frequency_coding(self, variant):
        t = self.thresholds
        coding = is_loss_of_function(variant) or is_missense(variant) or is_splice_damaging(variant, t)
        af = get_population_frequency(variant)
        return coding and t['low_af_min'] <= af <= t['low_af_max']

    def _denovo(self, variant):
        return is_denovo(variant)

    def _weak_recessive(self, variant):
        t = self.thresholds
        if not is_recessive_candidate(variant):
            return False
        if get_population_frequency(variant) < t['recessive_damaging_af_max'] and is_damaging(variant, t):
            return True
        return t['phom_strong_max'] <= get_phom(variant) < t['phom_weak_max']

    # ===== COMPOUND HET RULES =====

    def _strong_comphet(self, variant):
        return get_pchet(variant) < self.thresholds['pchet_strong_max']

    def _weak_comphet(self, variant):
        t = self.thresholds
        return t['pchet_strong_max'] <= get_pchet(variant) < t['pchet_weak_max']

    # ===== CLASSIFICATION =====

    def match_rule(self, variant) -> Optional[RankRule]:
        """First rule whose predicate holds, or None"""
        for rule in self.rules:
            if rule.predicate(variant):
                return rule
        return None

    def classify(self, variant) -> Optional[float]:
        """Primary rank, or None when no rule matches (not prioritized)"""
        rule = self.match_rule(variant)
        return rule.rank if rule else None

    def classify_comphet(self, variant) -> Optional[float]:
        """Compound-het secondary rank; None unless the variant carries a comp-het link token"""
        if not has_comphet_token(variant):
            return None
        for rule in self.comphet_rules:
            if rule.predicate(variant):
                return rule.rank
        return None

    def annotate(self, variant):
        """
        Write rank and comphet_rank onto the variant

        Existing values are overwritten; an unassigned rank removes any value
        left by an earlier run.

        Returns:
            tuple: (rank, comphet_rank), either may be None
        """
        rule = self.match_rule(variant)
        rank = rule.rank if rule else None
        if rule:
            variant.info[RANK_FIELD] = rank
            logging.debug(f"{format_variant_id(variant)}: rank {rank} ({rule.name})")
        else:
            _clear_field(variant, RANK_FIELD)

        comphet_rank = self.classify_comphet(variant)
        if comphet_rank is not None:
            variant.info[COMPHET_RANK_FIELD] = comphet_rank
            logging.debug(f"{format_variant_id(variant)}: comphet_rank {comphet_rank}")
        else:
            _clear_field(variant, COMPHET_RANK_FIELD)

        return rank, comphet_rank


def _clear_field(variant, key):
    if key in variant.info:
        del variant.info[key]
        logging.debug(f"{format_variant_id(variant)}: removed stale {key}")


def summarize_ranks(ranks):
    """
    Count variants per rank for the run summary

    Args:
        ranks: Iterable of rank values (None for unranked)

    Returns:
        pd.Series: Counts indexed by rank label, ordered by rank
    """
    labels = pd.Series([r if r is not None else 'unranked' for r in ranks], dtype=object)
    counts = labels.value_counts()
    order = sorted((r for r in counts.index if r != 'unranked'), key=float)
    if 'unranked' in counts.index:
        order.append('unranked')
    return counts.reindex(order)
