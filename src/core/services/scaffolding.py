"""Idempotent trip scaffolding.

The engine creates the trip folder and then each starter document, in order,
never overwriting anything that already exists. Every step ends in exactly one
`CreationOutcome`; vault errors are converted at the step boundary so callers
always receive the complete sequence, even when every step failed.

UI concerns (printing, colours) stay out of here: front ends subscribe to
`ScaffoldHooks` and render outcomes as they arrive.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Mapping

from core.config import AppSettings
from core.domain.models import (
    ContentSource,
    CreationOutcome,
    OutcomeStatus,
    ScaffoldReport,
    TemplateSource,
    TripLocation,
    TripRequest,
)
from core.interfaces.vault import Vault
from core.services.path_deriver import derive
from core.services.templates import resolve_content, template_catalogue

logger = logging.getLogger(__name__)

FOLDER_LABEL = "Folder"


@dataclass
class ScaffoldHooks:
    """Optional callbacks for UI layers (notifications, warnings)."""

    outcome: Callable[[CreationOutcome], None] | None = None
    warning: Callable[[str], None] | None = None


def _reason(exc: BaseException) -> str:
    text = str(exc).strip()
    return text or exc.__class__.__name__


async def _create_once(
    *,
    label: str,
    path: str,
    exists: Callable[[], Awaitable[bool]],
    create: Callable[[], Awaitable[ContentSource | None]],
) -> CreationOutcome:
    """Run one check-then-create step and convert its result to an outcome."""

    try:
        if await exists():
            return CreationOutcome(label=label, path=path, status=OutcomeStatus.ALREADY_EXISTS)
        source = await create()
    except Exception as exc:
        logger.error("Error creating %s %r: %s", label.lower(), path, exc)
        logger.debug("Creation failure details", exc_info=exc)
        return CreationOutcome(
            label=label,
            path=path,
            status=OutcomeStatus.FAILED,
            reason=_reason(exc),
        )
    return CreationOutcome(
        label=label,
        path=path,
        status=OutcomeStatus.CREATED,
        content_source=source,
    )


async def scaffold(
    vault: Vault,
    location: TripLocation,
    templates: Mapping[str, TemplateSource | None],
    hooks: ScaffoldHooks | None = None,
) -> ScaffoldReport:
    hooks = hooks or ScaffoldHooks()
    report = ScaffoldReport(location=location)

    def emit(outcome: CreationOutcome) -> None:
        report.outcomes.append(outcome)
        if not hooks.outcome:
            return
        # A broken notifier must not cut the outcome sequence short.
        try:
            hooks.outcome(outcome)
        except Exception as exc:
            logger.error("Outcome hook failed for %r: %s", outcome.path, exc)
            logger.debug("Outcome hook failure details", exc_info=exc)

    async def make_folder() -> None:
        await vault.create_folder(location.folder_path)

    # A failed folder is reported but does not stop the documents below it.
    emit(
        await _create_once(
            label=FOLDER_LABEL,
            path=location.folder_path,
            exists=lambda: vault.exists(location.folder_path),
            create=make_folder,
        )
    )

    for artifact in location.artifact_paths:

        async def make_document(label: str = artifact.label, path: str = artifact.path) -> ContentSource:
            resolved = await resolve_content(
                vault,
                label=label,
                templates=templates,
                warning=hooks.warning,
            )
            await vault.create_document(path, resolved.content)
            return resolved.source

        emit(
            await _create_once(
                label=artifact.label,
                path=artifact.path,
                exists=lambda path=artifact.path: vault.exists(path),
                create=make_document,
            )
        )

    return report


async def plan_trip(
    *,
    settings: AppSettings,
    request: TripRequest,
    vault: Vault,
    hooks: ScaffoldHooks | None = None,
) -> ScaffoldReport:
    """Derive the trip location and scaffold it.

    `InvalidInput` propagates from `derive` before any vault call is made.
    """

    location = derive(request, settings.root_folder)
    templates = template_catalogue(settings.templates_folder)
    logger.info(
        "Planning trip to %s in %s under %s",
        request.destination,
        request.month,
        location.folder_path,
    )
    return await scaffold(vault, location, templates, hooks)
