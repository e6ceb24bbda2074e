"""
Compound Het Reconciler

Rebuilds compound-heterozygous pairs from an unordered variant stream and
drops halves whose partner never appears. Pairing needs the whole stream,
so every participating variant is buffered until emit().

Link tokens come from slivar (`sample/gene/pairId/...`); the third field
identifies the pair.
"""

import logging
from dataclasses import dataclass
from typing import List, NamedTuple, Optional

from config.constants import COMPHET_FIELD, COMPHET_RANK_FIELD
from utils.annotation_utils import get_string_list, has_annotation
from utils.vcf_utils import InputFormatError, variant_key, format_variant_id


class CompHetLinkToken(NamedTuple):
    """Parsed slivar comp-het token; `raw` is written back unchanged."""
    raw: str
    group: str
    gene: str
    pair_id: str

    @classmethod
    def parse(cls, raw):
        fields = raw.split('/')
        if len(fields) < 3:
            raise InputFormatError(
                f"malformed {COMPHET_FIELD} token '{raw}': expected group/gene/pairId/..."
            )
        return cls(raw=raw, group=fields[0], gene=fields[1], pair_id=fields[2])


class CompHetMember(NamedTuple):
    variant: object
    token: CompHetLinkToken


@dataclass
class CompHetGroup:
    """Up to two sightings of one pairId; complete once the second arrives"""
    pair_id: str
    first: CompHetMember
    second: Optional[CompHetMember] = None
    complete: bool = False

    def add(self, member):
        """Record a later sighting; a repeat of the first member's own variant cannot complete the pair"""
        if variant_key(member.variant) == variant_key(self.first.variant):
            logging.debug(f"pair {self.pair_id} sighted again on {format_variant_id(member.variant)}; ignored")
            return
        if self.complete:
            logging.warning(
                f"pair {self.pair_id} seen more than twice; replacing second member "
                f"with {format_variant_id(member.variant)}"
            )
        self.second = member
        self.complete = True

    def members(self):
        return [self.first, self.second] if self.complete else [self.first]


class CompHetReconciler:
    """Pair comp-het halves across the full stream and emit only completed pairs"""

    def __init__(self, require_rank=True):
        """
        Args:
            require_rank: Only variants carrying comphet_rank take part (the
                ranking step marks the halves worth keeping). When False,
                every variant carrying a link token takes part.
        """
        self.require_rank = require_rank
        self.groups = {}
        self._seen_order = []   # identity keys, first-seen order
        self._variants = {}     # identity key -> first record with that key
        self._token_order = {}  # identity key -> token strings as they appear on the variant
        self.consumed = 0

    def _participates(self, variant):
        if self.require_rank:
            return has_annotation(variant, COMPHET_RANK_FIELD)
        return has_annotation(variant, COMPHET_FIELD)

    def parse_tokens(self, variant) -> List[CompHetLinkToken]:
        """Parse every link token on a variant; a participating variant without one is fatal"""
        raw_tokens = get_string_list(variant, COMPHET_FIELD)
        if raw_tokens is None:
            raise InputFormatError(
                f"should be a slivar compound het vcf, i.e. all variants should have info field "
                f"'{COMPHET_FIELD}' ({format_variant_id(variant)} has none)"
            )
        return [CompHetLinkToken.parse(raw) for raw in raw_tokens]

    def add(self, variant):
        """Consume one variant from the stream"""
        self.consumed += 1
        if not self._participates(variant):
            return

        tokens = self.parse_tokens(variant)
        key = variant_key(variant)
        if key not in self._variants:
            self._variants[key] = variant
            self._seen_order.append(key)
            self._token_order[key] = []

        for token in tokens:
            if token.raw not in self._token_order[key]:
                self._token_order[key].append(token.raw)

            member = CompHetMember(variant, token)
            group = self.groups.get(token.pair_id)
            if group is None:
                self.groups[token.pair_id] = CompHetGroup(pair_id=token.pair_id, first=member)
            else:
                group.add(member)

    def emit(self):
        """
        Variants belonging to at least one completed pair, each exactly once

        The link-token field of an emitted variant is rewritten to the comma-joined
        tokens of its completed pairs, in the order they appear on the variant.

        Returns:
            list: Variants in first-seen order
        """
        paired_tokens = {}
        for group in self.groups.values():
            if not group.complete:
                logging.debug(f"dropping unpaired comp-het half {group.pair_id}")
                continue
            for member in group.members():
                paired_tokens.setdefault(variant_key(member.variant), set()).add(member.token.raw)

        emitted = []
        for key in self._seen_order:
            tokens = paired_tokens.get(key)
            if not tokens:
                continue
            variant = self._variants[key]
            ordered = [raw for raw in self._token_order[key] if raw in tokens]
            variant.info[COMPHET_FIELD] = ','.join(ordered)
            emitted.append(variant)

        complete = sum(1 for g in self.groups.values() if g.complete)
        logging.info(
            f"Compound het pairs: {complete:,} complete, {len(self.groups) - complete:,} unpaired; "
            f"{len(emitted):,} of {self.consumed:,} variants kept"
        )
        return emitted

    def reconcile(self, variants):
        """Consume the whole stream, then emit paired variants"""
        for variant in variants:
            self.add(variant)
        return self.emit()
