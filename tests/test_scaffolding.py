from __future__ import annotations

import asyncio

import pytest

from core.config import AppSettings
from core.domain.errors import InvalidInput
from core.domain.models import ContentSource, CreationOutcome, OutcomeStatus, TripRequest
from core.services.path_deriver import derive
from core.services.scaffolding import ScaffoldHooks, plan_trip, scaffold
from core.services.templates import default_body, template_catalogue

ITINERARY = "Trips/Lisbon-June/Trip Itinerary.md"
PACKING = "Trips/Lisbon-June/Packing List.md"


def _location():
    return derive(TripRequest(destination="Lisbon", month="June"), "Trips")


def _statuses(report) -> list[OutcomeStatus]:
    return [o.status for o in report.outcomes]


def test_scenario_a_fresh_vault_without_templates(fake_vault) -> None:
    report = asyncio.run(scaffold(fake_vault, _location(), template_catalogue()))

    assert _statuses(report) == [OutcomeStatus.CREATED] * 3
    assert [o.label for o in report.outcomes] == ["Folder", "Itinerary", "Packing List"]
    assert "Trips/Lisbon-June" in fake_vault.folders
    assert fake_vault.documents[ITINERARY] == default_body("Itinerary")
    assert fake_vault.documents[PACKING] == default_body("Packing List")
    assert all(o.content_source is ContentSource.DEFAULT for o in report.artifacts)
    assert report.ok


def test_scenario_b_second_run_is_idempotent(fake_vault) -> None:
    asyncio.run(scaffold(fake_vault, _location(), template_catalogue()))
    before = dict(fake_vault.documents)
    fake_vault.calls.clear()

    report = asyncio.run(scaffold(fake_vault, _location(), template_catalogue()))

    assert _statuses(report) == [OutcomeStatus.ALREADY_EXISTS] * 3
    assert fake_vault.documents == before
    assert not [c for c in fake_vault.calls if c[0].startswith("create")]


def test_scenario_d_template_takes_precedence(fake_vault) -> None:
    fake_vault.documents["Templates/TripPlanner/Packing List Template.md"] = "# Custom List\n- Passport"

    report = asyncio.run(scaffold(fake_vault, _location(), template_catalogue()))

    assert fake_vault.documents[PACKING] == "# Custom List\n- Passport"
    assert fake_vault.documents[ITINERARY] == default_body("Itinerary")
    by_label = {o.label: o for o in report.artifacts}
    assert by_label["Packing List"].content_source is ContentSource.TEMPLATE
    assert by_label["Itinerary"].content_source is ContentSource.DEFAULT


def test_existing_document_is_left_untouched(fake_vault) -> None:
    fake_vault.folders.add("Trips/Lisbon-June")
    fake_vault.documents[ITINERARY] = "my own notes"

    report = asyncio.run(scaffold(fake_vault, _location(), template_catalogue()))

    assert _statuses(report) == [
        OutcomeStatus.ALREADY_EXISTS,
        OutcomeStatus.ALREADY_EXISTS,
        OutcomeStatus.CREATED,
    ]
    assert fake_vault.documents[ITINERARY] == "my own notes"


def test_document_at_folder_path_counts_as_existing(fake_vault) -> None:
    fake_vault.documents["Trips/Lisbon-June"] = "not a folder"

    report = asyncio.run(scaffold(fake_vault, _location(), {}))

    assert report.folder is not None
    assert report.folder.status is OutcomeStatus.ALREADY_EXISTS
    assert fake_vault.documents["Trips/Lisbon-June"] == "not a folder"


def test_folder_failure_does_not_stop_documents(fake_vault) -> None:
    fake_vault.fail_create["Trips/Lisbon-June"] = PermissionError("permission denied")

    report = asyncio.run(scaffold(fake_vault, _location(), template_catalogue()))

    assert report.folder is not None
    assert report.folder.status is OutcomeStatus.FAILED
    assert report.folder.reason == "permission denied"
    assert [o.status for o in report.artifacts] == [OutcomeStatus.CREATED, OutcomeStatus.CREATED]
    assert not report.ok


def test_every_step_failing_still_returns_full_report(fake_vault) -> None:
    location = _location()
    fake_vault.fail_create[location.folder_path] = OSError("disk full")
    for artifact in location.artifact_paths:
        fake_vault.fail_create[artifact.path] = OSError()

    report = asyncio.run(scaffold(fake_vault, location, template_catalogue()))

    assert _statuses(report) == [OutcomeStatus.FAILED] * 3
    assert [o.reason for o in report.outcomes] == ["disk full", "OSError", "OSError"]
    assert len(report.failed) == 3


def test_lost_race_surfaces_as_failed_not_overwrite(fake_vault) -> None:
    fake_vault.documents[PACKING] = "written by someone else"
    fake_vault.hidden.add(PACKING)

    report = asyncio.run(scaffold(fake_vault, _location(), template_catalogue()))

    packing = report.artifacts[1]
    assert packing.status is OutcomeStatus.FAILED
    assert "already exists" in (packing.reason or "")
    assert fake_vault.documents[PACKING] == "written by someone else"


def test_template_folder_falls_back_to_default_and_warns(fake_vault) -> None:
    fake_vault.folders.add("Templates/TripPlanner/Itinerary Template.md")
    warnings: list[str] = []

    report = asyncio.run(
        scaffold(
            fake_vault,
            _location(),
            template_catalogue(),
            ScaffoldHooks(warning=warnings.append),
        )
    )

    assert report.artifacts[0].status is OutcomeStatus.CREATED
    assert fake_vault.documents[ITINERARY] == default_body("Itinerary")
    assert len(warnings) == 1
    assert "not a document" in warnings[0]


def test_unreadable_template_degrades_to_default(fake_vault) -> None:
    template = "Templates/TripPlanner/Packing List Template.md"
    fake_vault.documents[template] = "# Secret"
    fake_vault.unreadable.add(template)

    report = asyncio.run(scaffold(fake_vault, _location(), template_catalogue()))

    assert report.artifacts[1].status is OutcomeStatus.CREATED
    assert report.artifacts[1].content_source is ContentSource.DEFAULT
    assert fake_vault.documents[PACKING] == default_body("Packing List")


def test_explicitly_absent_template_skips_template_lookup(fake_vault) -> None:
    asyncio.run(scaffold(fake_vault, _location(), {"Itinerary": None, "Packing List": None}))

    assert not [c for c in fake_vault.calls if c[0] in ("is_document", "read_document")]


def test_hooks_receive_each_outcome_in_order(fake_vault) -> None:
    seen: list[CreationOutcome] = []

    report = asyncio.run(
        scaffold(fake_vault, _location(), template_catalogue(), ScaffoldHooks(outcome=seen.append))
    )

    assert seen == report.outcomes


def test_failing_outcome_hook_does_not_interrupt_scaffold(fake_vault) -> None:
    calls: list[str] = []

    def broken(outcome: CreationOutcome) -> None:
        calls.append(outcome.label)
        raise RuntimeError("notifier down")

    report = asyncio.run(
        scaffold(fake_vault, _location(), template_catalogue(), ScaffoldHooks(outcome=broken))
    )

    assert calls == ["Folder", "Itinerary", "Packing List"]
    assert _statuses(report) == [OutcomeStatus.CREATED] * 3
    assert set(fake_vault.documents) == {ITINERARY, PACKING}


def test_folder_is_created_before_any_document(fake_vault) -> None:
    asyncio.run(scaffold(fake_vault, _location(), template_catalogue()))

    creates = [c for c in fake_vault.calls if c[0].startswith("create")]
    assert creates == [
        ("create_folder", "Trips/Lisbon-June"),
        ("create_document", ITINERARY),
        ("create_document", PACKING),
    ]


def test_scenario_c_plan_trip_rejects_empty_destination(fake_vault) -> None:
    settings = AppSettings(_env_file=None)

    with pytest.raises(InvalidInput):
        asyncio.run(
            plan_trip(
                settings=settings,
                request=TripRequest(destination="", month="June"),
                vault=fake_vault,
            )
        )

    assert fake_vault.calls == []


def test_plan_trip_uses_configured_folders(fake_vault) -> None:
    settings = AppSettings(_env_file=None, root_folder="Travel", templates_folder="Tpl")
    fake_vault.documents["Tpl/Itinerary Template.md"] = "# Day by day"

    report = asyncio.run(
        plan_trip(
            settings=settings,
            request=TripRequest(destination="Lisbon", month="June"),
            vault=fake_vault,
        )
    )

    assert report.location.folder_path == "Travel/Lisbon-June"
    assert fake_vault.documents["Travel/Lisbon-June/Trip Itinerary.md"] == "# Day by day"
