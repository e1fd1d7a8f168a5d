"""Mod list reconciliation.

This module holds the whole check: it walks the parsed references in input
order, asks a `ModSource` for each one and classifies the answer. Printing and
progress bars live in the CLI layer and are reached only through
`ReconcileHooks`, so the same routine backs tests and any other entry point.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from modcheck.core.domain.models import (
    CheckResult,
    Classification,
    ModRecord,
    ModReference,
    Report,
)
from modcheck.core.errors import ModLookupError
from modcheck.core.interfaces.mod_source import ModSource

logger = logging.getLogger(__name__)


@dataclass
class ReconcileHooks:
    """Optional callbacks for UI layers (progress, inline warnings)."""

    on_start: Callable[[int], None] | None = None
    on_result: Callable[[CheckResult], None] | None = None
    on_flagged: Callable[[CheckResult], None] | None = None


def classify(reference: ModReference, record: ModRecord | None) -> Classification:
    """Classify one lookup outcome.

    Order matters: deleted beats hidden, hidden beats renamed. A reference
    without a recorded name id (bare numeric id) can never be renamed.
    """

    if record is None or record.is_deleted:
        return Classification.deleted()
    if record.is_hidden:
        return Classification.hidden()
    if reference.name_id is not None and reference.name_id != record.name_id:
        return Classification.renamed(reference.name_id, record.name_id)
    return Classification.ok()


def check_reference(source: ModSource, reference: ModReference) -> CheckResult:
    logger.debug("checking %s", reference.raw)
    try:
        record = source.lookup(reference)
    except ModLookupError as exc:
        logger.debug("lookup failed for <%s>: %s", reference.raw, exc.reason)
        return CheckResult(
            reference=reference,
            classification=Classification.lookup_failed(exc.reason, exc.status_code),
        )
    return CheckResult(reference=reference, classification=classify(reference, record), record=record)


def reconcile(
    source: ModSource,
    references: Sequence[ModReference],
    *,
    hooks: ReconcileHooks | None = None,
) -> Report:
    """Look up every reference (one request each, in order) and build the report.

    Per-item failures are recorded as `LookupFailed`; only exceptions other
    than `ModLookupError` escape.
    """

    hooks = hooks or ReconcileHooks()
    report = Report()

    if hooks.on_start:
        hooks.on_start(len(references))

    for reference in references:
        result = check_reference(source, reference)
        report.add(result)

        if result.classification.flagged:
            logger.info(
                "%s <%s>: %s",
                result.classification.status.label(),
                reference.raw,
                result.classification.describe(),
            )
            if hooks.on_flagged:
                hooks.on_flagged(result)
        if hooks.on_result:
            hooks.on_result(result)

    logger.info("checked %d mods, %d flagged", len(report), len(report.flagged()))
    return report
