"""
Variant ranking configuration

RANK LADDER (first matching rule wins):
- 1.0: damaging missense/LoF, rare, in a caller-supplied risk gene
- 2.0: LoF, rare, constrained gene
- 2.5: damaging missense or splice-damaging, rare, constrained gene
- 3.0: recessive candidate with low homozygous probability
- 4.0: damaging and rare
- 5.0: damaging or missense at low (not ultra-rare) frequency
- 5.5: de novo
- 6.0: recessive candidate with moderate evidence

Thresholds are tunables; several differ between historical versions of the
rule set, so they can be overridden from a JSON config file.
"""

import json
from pathlib import Path

PRIORITY_RANKS = [1.0, 2.0, 2.5, 3.0, 4.0, 5.0, 5.5, 6.0]
COMPHET_RANKS = [3.0, 6.0]

RANKING_THRESHOLDS = {
    # Damaging missense
    'cadd_min': 25.0,
    'revel_min': 0.5,

    # Splice damage and gene constraint
    'splice_ai_min': 0.2,
    'pli_min': 0.5,

    # Rarity
    'rare_af_max': 0.0001,            # population frequency <= this
    'rare_topmed_max': 0.001,         # TOPMed frequency < this

    # Recessive (3.0)
    'recessive_af_max': 0.01,         # both frequencies <= this
    'phom_strong_max': 0.002,         # phom < this

    # Low frequency band (5.0)
    'low_af_min': 0.0001,
    'low_af_max': 0.001,

    # Weak recessive (6.0)
    'recessive_damaging_af_max': 0.01,  # population frequency < this
    'phom_weak_max': 0.05,              # phom_strong_max <= phom < this

    # Compound het secondary rank
    'pchet_strong_max': 0.002,
    'pchet_weak_max': 0.05,
}


def load_config(config_path):
    """
    Load ranking threshold overrides from a JSON configuration file

    Example:
        {"thresholds": {"splice_ai_min": 0.5}}

    Args:
        config_path: Path to JSON configuration file

    Returns:
        dict: Complete threshold table (defaults updated with overrides)
    """
    if not Path(config_path).exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, 'r') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in configuration file: {e}")

    if not isinstance(config, dict):
        raise ValueError("Configuration file must contain a JSON object")

    overrides = config.get('thresholds', {})
    if not isinstance(overrides, dict):
        raise ValueError("'thresholds' section must be a JSON object")

    unknown = [name for name in overrides if name not in RANKING_THRESHOLDS]
    if unknown:
        raise ValueError(f"Unknown ranking thresholds in config: {unknown}")

    thresholds = dict(RANKING_THRESHOLDS)
    for name, value in overrides.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Threshold '{name}' must be numeric, got {value!r}")
        thresholds[name] = float(value)

    return thresholds
