"""Template catalogue and built-in default bodies for trip documents.

A missing template is the normal first-run state, so lookup is an explicit
optional: callers get `None` (or a non-document) and fall back to the default
body. Only an actual read error is handled as an exception, and it degrades
the same way.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Mapping

from core.config import DEFAULT_TEMPLATES_FOLDER
from core.domain.models import ContentSource, TemplateSource
from core.interfaces.vault import Vault
from core.services.path_deriver import (
    ITINERARY_LABEL,
    PACKING_LIST_LABEL,
    join_vault_path,
)

logger = logging.getLogger(__name__)

TEMPLATE_FILENAMES: dict[str, str] = {
    ITINERARY_LABEL: "Itinerary Template.md",
    PACKING_LIST_LABEL: "Packing List Template.md",
}

_DEFAULT_BODIES: dict[str, str] = {
    ITINERARY_LABEL: (
        "# Trip Itinerary\n"
        "\n"
        "Add one section per day with plans, bookings and addresses.\n"
    ),
    PACKING_LIST_LABEL: (
        "# Packing List\n"
        "\n"
        "- [ ] Add the items you need to pack, one per line.\n"
    ),
}


@dataclass(frozen=True)
class ResolvedContent:
    content: str
    source: ContentSource


def template_catalogue(
    templates_folder: str | None = None,
) -> dict[str, TemplateSource]:
    """Return the template reference for every known artifact label."""

    folder = (templates_folder or "").strip() or DEFAULT_TEMPLATES_FOLDER
    return {
        label: TemplateSource(label=label, path=join_vault_path(folder, filename))
        for label, filename in TEMPLATE_FILENAMES.items()
    }


def default_body(label: str) -> str:
    body = _DEFAULT_BODIES.get(label)
    if body is not None:
        return body
    return f"# {label}\n"


async def resolve_content(
    vault: Vault,
    *,
    label: str,
    templates: Mapping[str, TemplateSource | None],
    warning: Callable[[str], None] | None = None,
) -> ResolvedContent:
    """Pick the content for a new document: template text or default body."""

    template = templates.get(label)
    if template is None:
        return ResolvedContent(content=default_body(label), source=ContentSource.DEFAULT)

    try:
        if not await vault.is_document(template.path):
            # Absent, or a folder sitting where the template should be.
            if await vault.exists(template.path):
                message = f"Template '{template.path}' is not a document; using default {label} content."
                logger.info(message)
                if warning:
                    warning(message)
            else:
                logger.debug("Template not found: %s", template.path)
            return ResolvedContent(content=default_body(label), source=ContentSource.DEFAULT)

        text = await vault.read_document(template.path)
    except Exception as exc:
        message = f"Template '{template.path}' could not be read ({exc}); using default {label} content."
        logger.info(message)
        if warning:
            warning(message)
        return ResolvedContent(content=default_body(label), source=ContentSource.DEFAULT)

    return ResolvedContent(content=text, source=ContentSource.TEMPLATE)
