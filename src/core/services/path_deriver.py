"""Derivation of a trip's storage location from its request.

Pure functions only: nothing here touches the vault, so the CLI can reject
bad input before any filesystem call happens.
"""

from __future__ import annotations

from core.config import DEFAULT_ROOT_FOLDER
from core.domain.errors import InvalidInput
from core.domain.models import ArtifactPath, TripLocation, TripRequest

ITINERARY_LABEL = "Itinerary"
PACKING_LIST_LABEL = "Packing List"

# Order matters for reporting: itinerary first, then packing list.
ARTIFACT_FILENAMES: tuple[tuple[str, str], ...] = (
    (ITINERARY_LABEL, "Trip Itinerary.md"),
    (PACKING_LIST_LABEL, "Packing List.md"),
)


def join_vault_path(*parts: str) -> str:
    """Join vault path segments with '/' ignoring empty segments."""

    cleaned = [p.strip("/") for p in parts if p and p.strip("/")]
    return "/".join(cleaned)


def normalize_root_folder(root_folder: str | None) -> str:
    root = (root_folder or "").strip().strip("/")
    return root or DEFAULT_ROOT_FOLDER


def trip_folder_name(request: TripRequest) -> str:
    # Raw values on purpose: path-unsafe characters are left to the vault.
    return f"{request.destination}-{request.month}"


def derive(request: TripRequest, root_folder: str) -> TripLocation:
    """Map a request to its folder and artifact paths.

    Raises `InvalidInput` when destination or month is blank.
    """

    missing = [
        name
        for name, value in (("destination", request.destination), ("month", request.month))
        if not value.strip()
    ]
    if missing:
        raise InvalidInput(missing)

    folder = f"{normalize_root_folder(root_folder)}/{trip_folder_name(request)}"
    artifacts = tuple(
        ArtifactPath(label=label, path=f"{folder}/{filename}")
        for label, filename in ARTIFACT_FILENAMES
    )
    return TripLocation(folder_path=folder, artifact_paths=artifacts)
