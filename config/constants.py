"""
Annotation Field Names, Defaults and VEP Severity Hierarchies

Field names written by the upstream annotators (VEP, vcfanno, slivar, psap),
the default used when a field is absent, and the transcript-selection
hierarchies used to pick a representative CSQ entry.
"""

# INFO fields read by the prioritization predicates
ANNOTATION_FIELDS = {
    'consequence': 'vep_Consequence',
    'impact': 'vep_IMPACT',
    'gene_symbol': 'vep_SYMBOL',
    'cadd': 'CADD_phred',
    'revel': 'REVEL_score',
    'pli': 'gnomAD_pLI',
    'exome_af': 'eAF_popmax',       # primary population frequency
    'genome_af': 'gAF_popmax',      # fallback population frequency
    'topmed_af': 'TOPMed_AF',       # independent third frequency source
    'splice_ai': 'spliceAI_max',
    'recessive': 'recessive',
    'x_recessive': 'x_recessive',
    'denovo': 'denovo',
    'hq_denovo': 'hq_denovo',
    'phom': 'phom',
    'pchet': 'pchet',
    'comphet': 'slivar_comphet',
}

# Value used when a field is absent or holds an unexpected type.
# phom/pchet default to 1.0 so that a missing probability never passes a "< threshold" test.
ANNOTATION_DEFAULTS = {
    'consequence': '.',
    'impact': '.',
    'gene_symbol': '.',
    'cadd': 0.0,
    'revel': 0.0,
    'pli': 0.0,
    'population_af': 0.0,
    'topmed_af': 0.0,
    'splice_ai': 0.0,
    'phom': 1.0,
    'pchet': 1.0,
}

# INFO fields written by the ranking and comp-het commands
RANK_FIELD = 'rank'
COMPHET_RANK_FIELD = 'comphet_rank'
COMPHET_FIELD = ANNOTATION_FIELDS['comphet']

RANK_HEADER_FIELDS = [
    (RANK_FIELD, 1, 'Float', 'variant classifications'),
    (COMPHET_RANK_FIELD, 1, 'Float', 'variant classifications for half of compound het'),
]

# VEP consequence field and the CSQ keys used for transcript selection
CSQ_FIELD = 'CSQ'
CSQ_FORMAT_MARKER = 'Format: '
CSQ_KEYS = {
    'consequence': 'Consequence',
    'canonical': 'CANONICAL',
    'appris': 'APPRIS',
    'tsl': 'TSL',
    'biotype': 'BIOTYPE',
}

# Most severe first; higher score wins. Unlisted terms score 0.
VEP_CONSEQUENCE_SEVERITY = {
    'transcript_ablation': 36,
    'splice_acceptor_variant': 35,
    'splice_donor_variant': 34,
    'stop_gained': 33,
    'frameshift_variant': 32,
    'stop_lost': 31,
    'start_lost': 30,
    'transcript_amplification': 29,
    'inframe_insertion': 28,
    'inframe_deletion': 27,
    'missense_variant': 26,
    'protein_altering_variant': 25,
    'splice_region_variant': 24,
    'incomplete_terminal_codon_variant': 23,
    'start_retained_variant': 22,
    'stop_retained_variant': 21,
    'synonymous_variant': 20,
    'coding_sequence_variant': 19,
    'mature_miRNA_variant': 18,
    '5_prime_UTR_variant': 17,
    '3_prime_UTR_variant': 16,
    'non_coding_transcript_exon_variant': 15,
    'intron_variant': 14,
    'NMD_transcript_variant': 13,
    'non_coding_transcript_variant': 12,
    'upstream_gene_variant': 11,
    'downstream_gene_variant': 10,
    'TFBS_ablation': 9,
    'TFBS_amplification': 8,
    'TF_binding_site_variant': 7,
    'regulatory_region_ablation': 6,
    'regulatory_region_amplification': 5,
    'feature_elongation': 4,
    'regulatory_region_variant': 3,
    'feature_truncation': 2,
    'intergenic_variant': 1
}

# APPRIS principal/alternative isoform tiers
APPRIS_TIERS = {
    'P1': 7,
    'P2': 6,
    'P3': 5,
    'P4': 4,
    'P5': 3,
    'ALT1': 2,
    'ALT2': 1
}

# Ensembl transcript support level tiers
TSL_TIERS = {
    '1': 6,
    '2': 5,
    '3': 4,
    '4': 3,
    '5': 2,
    'NA': 1
}

CANONICAL_FLAG = 'YES'
PROTEIN_CODING_BIOTYPE = 'protein_coding'

# Classifier vocabulary
HIGH_IMPACT = 'HIGH'
MISSENSE_CONSEQUENCE = 'missense_variant'

# psap report model labels -> INFO field written by psap2vcf
PSAP_MODEL_FIELDS = {
    'DOM-het': 'pdom',
    'REC-hom': 'phom',
    'REC-chet': 'pchet'
}

PSAP_HEADER_FIELDS = [
    ('pdom', 1, 'Float', 'psap dominate score'),
    ('phom', 1, 'Float', 'psap homo score'),
    ('pchet', 1, 'Float', 'psap compound het score'),
]

VARIANT_LIST_HEADER_FIELDS = [
    ('sample', '.', 'String', 'samples'),
]
