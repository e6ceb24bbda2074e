"""
Consequence Selector

Picks one representative transcript consequence from a variant's CSQ
entries by narrowing the candidates through a cascade of tie-breakers:

- canonical-first: CANONICAL, APPRIS, TSL, protein-coding biotype, severity
- severity-first:  severity, CANONICAL, APPRIS, TSL, protein-coding biotype

Each step keeps only candidates with the best score; a step that would
leave nothing keeps the previous set. Remaining ties go to the first
candidate in input order.
"""

from config.constants import (
    CSQ_KEYS,
    VEP_CONSEQUENCE_SEVERITY,
    APPRIS_TIERS,
    TSL_TIERS,
    CANONICAL_FLAG,
    PROTEIN_CODING_BIOTYPE
)


def canonical_score(record):
    return 1 if record.get(CSQ_KEYS['canonical']) == CANONICAL_FLAG else 0


def appris_score(record):
    return APPRIS_TIERS.get(record.get(CSQ_KEYS['appris'], ''), 0)


def tsl_score(record):
    return TSL_TIERS.get(record.get(CSQ_KEYS['tsl'], ''), 0)


def biotype_score(record):
    return 1 if record.get(CSQ_KEYS['biotype']) == PROTEIN_CODING_BIOTYPE else 0


def severity_score(record):
    """Severity of the first '&'-joined term; VEP lists the most severe term first"""
    first_term = record.get(CSQ_KEYS['consequence'], '').split('&')[0]
    return VEP_CONSEQUENCE_SEVERITY.get(first_term, 0)


def narrow(candidates, scorer):
    """Keep the candidates with the maximum score, or all of them if none would remain"""
    if not candidates:
        return candidates
    scores = [scorer(c) for c in candidates]
    best = max(scores)
    kept = [c for c, s in zip(candidates, scores) if s == best]
    return kept or candidates


POLICIES = {
    'canonical': (canonical_score, appris_score, tsl_score, biotype_score, severity_score),
    'severity': (severity_score, canonical_score, appris_score, tsl_score, biotype_score),
}


class ConsequenceSelector:
    """Select a representative CSQ record with a fixed tie-break cascade"""

    def __init__(self, policy='canonical'):
        if policy not in POLICIES:
            raise ValueError(f"Unknown consequence selection policy '{policy}', expected one of {sorted(POLICIES)}")
        self.policy = policy
        self.steps = POLICIES[policy]

    def select(self, records):
        """
        Args:
            records: CSQ records (dicts) for one variant, in input order

        Returns:
            dict or None: The representative record, None for no records
        """
        candidates = list(records)
        for scorer in self.steps:
            if len(candidates) <= 1:
                break
            candidates = narrow(candidates, scorer)
        return candidates[0] if candidates else None
