"""
Tests for input conversion: allele anchoring, psap reports, variant lists
"""

import pytest

from preprocess.allele_anchor import anchor_variant
from preprocess.psap_converter import read_psap_report, psap_to_variants
from preprocess.variant_list import parse_variant_line, parse_variant_lines
from utils.vcf_utils import InputFormatError

PSAP_REPORT = (
    "Chr\tStart\tEnd\tRef\tAlt\tGene\tDz.Model.S1\tpopScore.S1\n"
    "1\t1000\t1000\tA\tG\tGENE1\tDOM-het\t0.2\n"
    "1\t1000\t1000\tA\tG\tGENE1\tREC-hom\t0.001\n"
    "2\t500\t500\tC\tT\tGENE2\tREC-chet\t0.01\n"
    "2\t700\t700\tG\tA\tGENE2\tNone\t.\n"
)


def fixed_base(base):
    calls = []

    def _lookup(chrom, pos):
        calls.append((chrom, pos))
        return base
    _lookup.calls = calls
    return _lookup


class TestAnchorVariant:
    """Tests for placeholder allele anchoring."""

    def test_deletion(self, make_variant):
        variant = make_variant(pos=101, ref='AC', alt='*')
        variant.id = 'rs1'
        lookup = fixed_base('T')
        assert anchor_variant(variant, '*', lookup)
        assert (variant.pos, variant.ref, variant.alts) == (100, 'TAC', ('T',))
        assert variant.id is None
        assert lookup.calls == [('1', 101)]

    def test_insertion(self, make_variant):
        variant = make_variant(pos=101, ref='-', alt='GG')
        assert anchor_variant(variant, '-', fixed_base('T'))
        assert (variant.pos, variant.ref, variant.alts) == (100, 'T', ('TGG',))

    def test_snv_untouched(self, make_variant):
        variant = make_variant(pos=101, ref='A', alt='G')
        lookup = fixed_base('T')
        assert not anchor_variant(variant, '*', lookup)
        assert (variant.pos, variant.ref, variant.alts) == (101, 'A', ('G',))
        assert lookup.calls == []

    def test_other_placeholder_untouched(self, make_variant):
        variant = make_variant(pos=101, ref='A', alt='-')
        assert not anchor_variant(variant, '*', fixed_base('T'))


class TestPsapReport:
    """Tests for psap report conversion."""

    @pytest.fixture
    def report_path(self, tmp_path):
        path = tmp_path / 'psap_report.txt'
        path.write_text(PSAP_REPORT)
        return str(path)

    def test_read_report(self, report_path):
        table = read_psap_report(report_path, 'S1')
        assert list(table.columns) == ['chrom', 'pos', 'ref', 'alt', 'model', 'score']
        assert len(table) == 4

    def test_unknown_proband(self, report_path):
        with pytest.raises(InputFormatError, match='could not find proband column'):
            read_psap_report(report_path, 'S2')

    def test_rows_merged_per_variant(self, report_path):
        variants = psap_to_variants(read_psap_report(report_path, 'S1'))
        assert [(v.chrom, v.pos) for v in variants] == [('1', 1000), ('2', 500), ('2', 700)]
        assert variants[0].info == {'pdom': 0.2, 'phom': 0.001}
        assert variants[1].info == {'pchet': 0.01}

    def test_unknown_model_emits_bare_variant(self, report_path):
        variants = psap_to_variants(read_psap_report(report_path, 'S1'))
        assert variants[2].info == {}

    def test_bad_score(self, tmp_path):
        path = tmp_path / 'bad.txt'
        path.write_text(
            "Chr\tStart\tEnd\tRef\tAlt\tDz.Model.S1\tpopScore.S1\n"
            "1\t1000\t1000\tA\tG\tREC-hom\tNA\n"
        )
        with pytest.raises(InputFormatError, match='invalid psap score'):
            psap_to_variants(read_psap_report(str(path), 'S1'))


class TestVariantList:
    """Tests for chrom-pos-ref-alt-sample lines."""

    def test_parse_line(self):
        variant = parse_variant_line('1-12345-A-G-S1\n')
        assert (variant.chrom, variant.pos, variant.ref, variant.alts) == ('1', 12345, 'A', ('G',))
        assert variant.info == {'sample': 'S1'}

    def test_bad_position(self):
        with pytest.raises(InputFormatError, match='could not convert position'):
            parse_variant_line('1-abc-A-G-S1')

    def test_too_few_fields(self):
        with pytest.raises(InputFormatError):
            parse_variant_line('1-12345-A-G')

    def test_comments_and_blanks_skipped(self):
        variants = parse_variant_lines(['#header\n', '\n', '2-5-C-T-S2\n', 'X-9-G-A-S3\n'])
        assert [(v.chrom, v.pos) for v in variants] == [('2', 5), ('X', 9)]
