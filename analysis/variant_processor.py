"""
Variant Processor

Main orchestrator for the VCF commands: opens the input stream, declares
the INFO fields a command writes, runs each record through the relevant
component and writes the result.
"""

import logging

from config.constants import (
    CSQ_FIELD,
    RANK_HEADER_FIELDS
)
from utils.annotation_utils import get_string_list
from utils.csq_utils import get_csq_schema, parse_csq_records
from utils.info_utils import (
    aggregate_fields,
    aggregate_header_fields,
    add_coords,
    coords_header_fields
)
from utils.vcf_utils import add_info_fields, open_vcf_reader, open_vcf_writer
from preprocess.allele_anchor import ReferenceGenome, anchor_variant
from .priority_classifier import PriorityClassifier, summarize_ranks
from .comphet_reconciler import CompHetReconciler
from .consequence_selector import ConsequenceSelector


class VariantProcessor:
    """Run one command over a VCF stream"""

    def __init__(self, input_path='-', output_path='-'):
        """
        Args:
            input_path: VCF/BCF to read ('-' for stdin)
            output_path: VCF to write ('-' for stdout, .gz for BGZF)
        """
        self.input_path = input_path
        self.output_path = output_path

    def _stream(self, info_fields, transform):
        """
        Declare info_fields, apply transform to every record and write it

        Returns:
            int: Number of records written
        """
        written = 0
        with open_vcf_reader(self.input_path) as vcf_in:
            add_info_fields(vcf_in.header, info_fields)
            with open_vcf_writer(self.output_path, vcf_in.header) as vcf_out:
                for record in vcf_in:
                    transform(record)
                    vcf_out.write(record)
                    written += 1
        return written

    def rank(self, risk_genes, thresholds=None):
        """Write rank/comphet_rank on every variant"""
        logging.info(f"Ranking variants ({len(risk_genes)} risk genes)")
        classifier = PriorityClassifier(risk_genes, thresholds)
        ranks = []

        def transform(record):
            rank, _ = classifier.annotate(record)
            ranks.append(rank)

        written = self._stream(RANK_HEADER_FIELDS, transform)

        logging.info(f"Ranked {written:,} variants")
        for label, count in summarize_ranks(ranks).items():
            logging.info(f"   rank {label}: {count:,}")
        return written

    def filter_comphet(self, require_rank=True):
        """Keep only variants whose compound het partner is also present"""
        logging.info("Pairing compound het variants")
        reconciler = CompHetReconciler(require_rank=require_rank)

        with open_vcf_reader(self.input_path) as vcf_in:
            paired = reconciler.reconcile(vcf_in)
            with open_vcf_writer(self.output_path, vcf_in.header) as vcf_out:
                for record in paired:
                    vcf_out.write(record)

        return len(paired)

    def pull_csq(self, fields):
        """
        Copy CSQ keys of the representative transcripts into INFO

        For each field f: canonical_<f> from the canonical-first pick and
        <f> from the severity-first pick, written only when non-empty.
        """
        logging.info(f"Extracting CSQ fields: {', '.join(fields)}")
        canonical_selector = ConsequenceSelector('canonical')
        severity_selector = ConsequenceSelector('severity')

        info_fields = []
        for f in fields:
            info_fields.append((f"canonical_{f}", 1, 'String', f"canonical {f} pulled from csq"))
            info_fields.append((f, 1, 'String', f"most severe {f} pulled from csq"))

        written = 0
        missing_csq = 0
        with open_vcf_reader(self.input_path) as vcf_in:
            csq_keys = get_csq_schema(vcf_in.header)
            add_info_fields(vcf_in.header, info_fields)
            with open_vcf_writer(self.output_path, vcf_in.header) as vcf_out:
                for record in vcf_in:
                    entries = get_string_list(record, CSQ_FIELD)
                    if entries:
                        records = parse_csq_records(csq_keys, entries)
                        canonical = canonical_selector.select(records)
                        severe = severity_selector.select(records)
                        for f in fields:
                            if canonical.get(f):
                                record.info[f"canonical_{f}"] = canonical[f]
                            if severe.get(f):
                                record.info[f] = severe[f]
                    else:
                        missing_csq += 1
                    vcf_out.write(record)
                    written += 1

        logging.info(f"Processed {written:,} variants ({missing_csq:,} without {CSQ_FIELD})")
        return written

    def manip_info(self, fields, prefix, operator):
        """Combine numeric INFO fields into <prefix>_<operator>"""
        header_fields = aggregate_header_fields(prefix, operator)
        combined = []

        def transform(record):
            combined.append(aggregate_fields(record, fields, prefix, operator))

        written = self._stream(header_fields, transform)
        logging.info(f"Combined {sum(combined):,} of {written:,} variants by {operator}")
        return written

    def coords(self, label):
        """Record each variant's chromosome and position under label"""
        written = self._stream(coords_header_fields(label), lambda record: add_coords(record, label))
        logging.info(f"Added {label} coordinates to {written:,} variants")
        return written

    def anchor(self, reference_path, character='*'):
        """Anchor placeholder alleles against the reference genome"""
        anchored = []
        with ReferenceGenome(reference_path) as reference:
            def transform(record):
                anchored.append(anchor_variant(record, character, reference.preceding_base))

            written = self._stream([], transform)

        logging.info(f"Anchored {sum(anchored):,} of {written:,} variants")
        return written
