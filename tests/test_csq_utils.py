"""
Tests for VEP CSQ parsing
"""

import pysam
import pytest

from conftest import CSQ_FORMAT, CSQ_HEADER_LINE
from utils.csq_utils import get_csq_schema, parse_csq_schema, parse_csq_entry, parse_csq_records
from utils.vcf_utils import InputFormatError


class TestSchema:
    """Tests for CSQ schema extraction."""

    def test_parse_description(self):
        keys = parse_csq_schema(f'Consequence annotations from Ensembl VEP. Format: {CSQ_FORMAT}')
        assert keys == CSQ_FORMAT.split('|')

    def test_trailing_quote_stripped(self):
        assert parse_csq_schema('VEP. Format: Allele|SYMBOL"') == ['Allele', 'SYMBOL']

    def test_no_format_marker(self):
        with pytest.raises(InputFormatError):
            parse_csq_schema('Consequence annotations')

    def test_from_header(self, vcf_file):
        path = vcf_file([], extra_header=[CSQ_HEADER_LINE])
        with pysam.VariantFile(str(path)) as vcf:
            assert get_csq_schema(vcf.header) == CSQ_FORMAT.split('|')

    def test_header_without_csq(self, vcf_file):
        path = vcf_file([])
        with pysam.VariantFile(str(path)) as vcf:
            with pytest.raises(InputFormatError, match='please annotate with VEP'):
                get_csq_schema(vcf.header)


class TestEntries:
    """Tests for per-transcript entries."""

    def test_entry(self):
        record = parse_csq_entry(['Allele', 'Consequence', 'SYMBOL'], 'G|missense_variant|BRCA1')
        assert record == {'Allele': 'G', 'Consequence': 'missense_variant', 'SYMBOL': 'BRCA1'}

    def test_short_entry_padded(self):
        record = parse_csq_entry(['Allele', 'Consequence', 'SYMBOL'], 'G|intron_variant')
        assert record['SYMBOL'] == ''

    def test_empty_values_kept(self):
        record = parse_csq_entry(['Allele', 'CANONICAL', 'TSL'], 'G||1')
        assert record == {'Allele': 'G', 'CANONICAL': '', 'TSL': '1'}

    def test_records(self):
        records = parse_csq_records(['Allele', 'Feature'], ['G|ENST1', 'G|ENST2'])
        assert [r['Feature'] for r in records] == ['ENST1', 'ENST2']
