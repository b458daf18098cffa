from __future__ import annotations

import json
from pathlib import Path

import pytest

from gear_guru.core.errors import ContentValidationError
from gear_guru.core.loader import load_member_bundle, parse_member_bundle

SAMPLE = Path(__file__).resolve().parents[1] / "content" / "sample_member.json"


def _payload() -> dict:
    return json.loads(SAMPLE.read_text(encoding="utf-8"))


def test_sample_bundle_loads() -> None:
    bundle = load_member_bundle(SAMPLE)

    assert bundle.profile.shoe_size == "10 (US)"
    assert bundle.profile.photo is not None and bundle.profile.photo.fallback == "image_016785.jpg"
    assert [entry.kind for entry in bundle.sizing] == ["Simple", "Detailed", "Simple", "Detailed"]
    assert bundle.gear_by_id()["boots"].status == "Update"


def test_missing_file_raises_clear_error(tmp_path: Path) -> None:
    with pytest.raises(ContentValidationError, match="Missing member data file"):
        load_member_bundle(tmp_path / "absent.json")


def test_invalid_json_raises_clear_error(tmp_path: Path) -> None:
    path = tmp_path / "member.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ContentValidationError, match="Invalid JSON in member.json"):
        load_member_bundle(path)


def test_schema_errors_list_field_paths() -> None:
    payload = _payload()
    payload["profile"]["age"] = -1
    payload["sizing"][0]["kind"] = "Fancy"

    with pytest.raises(ContentValidationError, match="Schema validation failed for member") as excinfo:
        parse_member_bundle(payload, source="member")

    details = excinfo.value.details
    assert any(detail.startswith("member:profile.age:") for detail in details)
    assert any(detail.startswith("member:sizing.0.kind:") for detail in details)


def test_unknown_fields_are_rejected() -> None:
    payload = _payload()
    payload["gear"][0]["colour"] = "red"

    with pytest.raises(ContentValidationError) as excinfo:
        parse_member_bundle(payload)

    assert any("gear.0.colour" in detail for detail in excinfo.value.details)


def test_duplicate_gear_ids_fail_validation() -> None:
    payload = _payload()
    payload["gear"].append(dict(payload["gear"][0]))

    with pytest.raises(ContentValidationError) as excinfo:
        parse_member_bundle(payload)

    assert any("Duplicate gear id 'skis'" in detail for detail in excinfo.value.details)


def test_non_object_payload_is_rejected() -> None:
    with pytest.raises(ContentValidationError, match="must be an object"):
        parse_member_bundle([1, 2, 3])


def test_unknown_status_passes_schema_and_is_left_to_the_resolver() -> None:
    payload = _payload()
    payload["gear"][0]["status"] = "Broken"

    assert parse_member_bundle(payload).gear[0].status == "Broken"


def test_absent_sizing_and_gear_stay_absent() -> None:
    payload = _payload()
    del payload["sizing"]
    del payload["gear"]

    bundle = parse_member_bundle(payload)

    assert bundle.sizing is None
    assert bundle.gear is None
    assert bundle.gear_by_id() == {}
