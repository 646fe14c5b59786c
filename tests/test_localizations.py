from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from core.services import (
    LocalizationError,
    add_service_localizations,
    check_base_translations,
    get_dir_names,
    get_locales,
)
from core.services.schemas import validate_services_i18n


def write_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def read_json(path: Path):
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture()
def locales(tmp_path) -> Path:
    folder = tmp_path / "locales"
    write_json(folder / "en" / "services.json", [{"servicesgroup.cdn.name": "CDN"}])
    write_json(folder / "es" / "services.json", [{"servicesgroup.cdn.name": "Red de entrega"}])
    return folder


def test_get_dir_names_lists_only_directories(tmp_path) -> None:
    (tmp_path / "fr").mkdir()
    (tmp_path / "de").mkdir()
    (tmp_path / "README.md").write_text("x", encoding="utf-8")

    assert get_dir_names(tmp_path) == ["de", "fr"]


def test_get_dir_names_missing_folder(tmp_path, caplog) -> None:
    with pytest.raises(FileNotFoundError):
        get_dir_names(tmp_path / "missing")
    assert "Error getting directories names" in caplog.text


def test_locales_are_merged_by_id(locales) -> None:
    assert get_locales(locales) == {
        "groups": {"cdn": {"en": {"name": "CDN"}, "es": {"name": "Red de entrega"}}}
    }


def test_locale_without_services_file_is_skipped(locales) -> None:
    (locales / "fr").mkdir()

    assert set(get_locales(locales)["groups"]["cdn"]) == {"en", "es"}


def test_malformed_locale_file_is_fatal(locales) -> None:
    (locales / "es" / "services.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(LocalizationError, match="Error getting grouped translations"):
        get_locales(locales)


def test_missing_groups_get_todo_placeholders(tmp_path, caplog) -> None:
    services_file = write_json(
        tmp_path / "services.json", {"blocked_services": [], "groups": [{"id": "cdn"}, {"id": "ads"}]}
    )
    base_file = write_json(tmp_path / "en" / "services.json", [{"servicesgroup.cdn.name": "CDN"}])

    with caplog.at_level(logging.WARNING):
        added = check_base_translations(services_file, base_file)

    assert added == [{"servicesgroup.ads.name": "TODO: name for group ads"}]
    assert read_json(base_file) == [
        {"servicesgroup.ads.name": "TODO: name for group ads"},
        {"servicesgroup.cdn.name": "CDN"},
    ]
    assert base_file.read_text(encoding="utf-8").startswith('[\n    {\n        "servicesgroup.ads.name"')
    assert "add missing translations to the base locale" in caplog.text


def test_complete_base_locale_is_left_alone(tmp_path) -> None:
    services_file = write_json(tmp_path / "services.json", {"groups": [{"id": "cdn"}]})
    base_file = write_json(tmp_path / "en" / "services.json", [{"servicesgroup.cdn.name": "CDN"}])
    before = base_file.read_text(encoding="utf-8")

    assert check_base_translations(services_file, base_file) == []
    assert base_file.read_text(encoding="utf-8") == before


def test_base_check_failures_are_only_logged(tmp_path, caplog) -> None:
    services_file = write_json(tmp_path / "services.json", {"groups": [{"id": "cdn"}]})

    with caplog.at_level(logging.ERROR):
        added = check_base_translations(services_file, tmp_path / "en" / "missing.json")

    assert added == []
    assert "Error when checking for translations in base locale" in caplog.text


def test_add_service_localizations_writes_combined_file(tmp_path, locales, caplog) -> None:
    services_file = write_json(
        tmp_path / "services.json", {"blocked_services": [], "groups": [{"id": "ads"}, {"id": "cdn"}]}
    )
    i18n_file = tmp_path / "dist" / "services_i18n.json"

    with caplog.at_level(logging.INFO):
        result = add_service_localizations(services_file, locales, i18n_file)

    written = read_json(i18n_file)
    assert written == result
    assert written == {
        "groups": {"cdn": {"en": {"name": "CDN"}, "es": {"name": "Red de entrega"}}}
    }
    validate_services_i18n(written)
    # default base locale comes from config
    assert {"servicesgroup.ads.name": "TODO: name for group ads"} in read_json(
        locales / "en" / "services.json"
    )
    assert "Successfully added localizations" in caplog.text


def test_non_ascii_names_are_written_as_is(tmp_path) -> None:
    folder = tmp_path / "locales"
    write_json(folder / "ru" / "services.json", [{"servicesgroup.cdn.name": "Сеть доставки"}])
    services_file = write_json(tmp_path / "services.json", {"groups": []})
    i18n_file = tmp_path / "i18n.json"

    add_service_localizations(
        services_file, folder, i18n_file, base_translations_file=folder / "ru" / "services.json"
    )

    assert "Сеть доставки" in i18n_file.read_text(encoding="utf-8")


def test_add_service_localizations_wraps_failures(tmp_path) -> None:
    services_file = write_json(tmp_path / "services.json", {"groups": []})

    with pytest.raises(LocalizationError, match="Error adding localizations"):
        add_service_localizations(services_file, tmp_path / "no-locales", tmp_path / "i18n.json")
