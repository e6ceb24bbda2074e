"""
Tests for representative consequence selection
"""

import pytest

from analysis.consequence_selector import ConsequenceSelector, narrow, severity_score


def csq(feature, consequence='intron_variant', canonical='', appris='', tsl='', biotype='protein_coding'):
    return {
        'Feature': feature,
        'Consequence': consequence,
        'CANONICAL': canonical,
        'APPRIS': appris,
        'TSL': tsl,
        'BIOTYPE': biotype,
    }


class TestCanonicalPolicy:
    """Tests for the canonical-first cascade."""

    def test_single_canonical_wins(self):
        records = [
            csq('ENST1', consequence='stop_gained'),
            csq('ENST2', consequence='intron_variant', canonical='YES'),
        ]
        assert ConsequenceSelector('canonical').select(records)['Feature'] == 'ENST2'

    def test_appris_breaks_canonical_tie(self):
        records = [
            csq('ENST1', canonical='YES', appris='ALT1'),
            csq('ENST2', canonical='YES', appris='P1'),
        ]
        assert ConsequenceSelector().select(records)['Feature'] == 'ENST2'

    def test_tsl_breaks_appris_tie(self):
        records = [
            csq('ENST1', appris='P2', tsl='3'),
            csq('ENST2', appris='P2', tsl='1'),
        ]
        assert ConsequenceSelector().select(records)['Feature'] == 'ENST2'

    def test_biotype_then_severity(self):
        records = [
            csq('ENST1', consequence='stop_gained', biotype='nonsense_mediated_decay'),
            csq('ENST2', consequence='synonymous_variant'),
            csq('ENST3', consequence='missense_variant'),
        ]
        assert ConsequenceSelector().select(records)['Feature'] == 'ENST3'


class TestSeverityPolicy:
    """Tests for the severity-first cascade."""

    def test_most_severe_wins(self):
        records = [
            csq('ENST1', consequence='intron_variant', canonical='YES'),
            csq('ENST2', consequence='stop_gained'),
        ]
        assert ConsequenceSelector('severity').select(records)['Feature'] == 'ENST2'

    def test_canonical_breaks_severity_tie(self):
        records = [
            csq('ENST1', consequence='missense_variant'),
            csq('ENST2', consequence='missense_variant', canonical='YES'),
        ]
        assert ConsequenceSelector('severity').select(records)['Feature'] == 'ENST2'

    def test_first_term_of_combined_consequence(self):
        """Only the leading '&' term counts towards severity."""
        records = [
            csq('ENST1', consequence='intron_variant&stop_gained'),
            csq('ENST2', consequence='missense_variant&splice_region_variant'),
        ]
        assert ConsequenceSelector('severity').select(records)['Feature'] == 'ENST2'


class TestFallbacks:
    """Tests for ties, unknown values and empty input."""

    def test_full_tie_picks_first(self):
        records = [csq('ENST1'), csq('ENST2'), csq('ENST3')]
        assert ConsequenceSelector().select(records)['Feature'] == 'ENST1'
        assert ConsequenceSelector('severity').select(records)['Feature'] == 'ENST1'

    def test_unknown_tiers_score_zero(self):
        records = [
            csq('ENST1', appris='bogus', tsl='9'),
            csq('ENST2', appris='P5'),
        ]
        assert ConsequenceSelector().select(records)['Feature'] == 'ENST2'

    def test_single_record(self):
        record = csq('ENST1', biotype='lncRNA')
        assert ConsequenceSelector().select([record]) is record

    def test_no_records(self):
        assert ConsequenceSelector().select([]) is None

    def test_unknown_policy(self):
        with pytest.raises(ValueError, match='Unknown consequence selection policy'):
            ConsequenceSelector('random')

    def test_missing_keys_tolerated(self):
        records = [{'Feature': 'ENST1'}, {'Feature': 'ENST2', 'CANONICAL': 'YES'}]
        assert ConsequenceSelector().select(records)['Feature'] == 'ENST2'


class TestNarrow:
    """Tests for a single tie-break step."""

    def test_keeps_all_maxima(self):
        records = [csq('A', 'stop_gained'), csq('B', 'intron_variant'), csq('C', 'stop_gained')]
        assert [r['Feature'] for r in narrow(records, severity_score)] == ['A', 'C']

    def test_empty(self):
        assert narrow([], severity_score) == []
