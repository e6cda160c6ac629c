"""Unit coverage for payroll year configuration loading."""

from __future__ import annotations

from pathlib import Path
from shutil import copy2

import pytest
import yaml

from paylinq.backend.config import year_config
from paylinq.backend.config.schema import ConfigurationError, PayFrequencyConfig


@pytest.fixture()
def isolated_config_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Return a temporary configuration directory patched into ``year_config``."""

    original_directory = year_config.CONFIG_DIRECTORY
    for filename in ("manifest.yaml", "2024.yaml", "2025.yaml"):
        copy2(original_directory / filename, tmp_path / filename)

    monkeypatch.setattr(year_config, "CONFIG_DIRECTORY", tmp_path)
    monkeypatch.setattr(year_config, "MANIFEST_FILE", tmp_path / "manifest.yaml")
    year_config.load_year_configuration.cache_clear()
    year_config.load_manifest.cache_clear()

    yield tmp_path

    year_config.load_year_configuration.cache_clear()
    year_config.load_manifest.cache_clear()


def _append_year(directory: Path, year: int, filename: str | None = None) -> None:
    manifest_path = directory / "manifest.yaml"
    manifest = yaml.safe_load(manifest_path.read_text())
    entry: dict[str, object] = {"year": year}
    if filename:
        entry["filename"] = filename
    manifest.setdefault("years", []).append(entry)
    manifest_path.write_text(yaml.safe_dump(manifest, sort_keys=False))
    year_config.load_manifest.cache_clear()


def test_shipped_years() -> None:
    assert year_config.available_years() == (2024, 2025)
    assert year_config.default_year() == 2025


def test_2025_configuration_values() -> None:
    config = year_config.load_year_configuration(2025)

    assert [bracket.rate for bracket in config.wage_tax] == [0.0, 0.08, 0.15, 0.25]
    assert config.wage_tax[-1].max is None
    assert config.social_contributions.aov.rate == 0.08
    assert config.social_contributions.aov.annual_cap is None
    assert config.social_contributions.aww.rate == 0.015
    assert config.pay_frequencies.default == "monthly"
    assert config.pay_frequencies.periods_per_year["bi-weekly"] == 26
    assert config.overtime.default_multiplier == 1.5


def test_new_year_is_discovered_from_manifest(isolated_config_directory: Path) -> None:
    (isolated_config_directory / "2026.yaml").write_text(
        (isolated_config_directory / "2025.yaml").read_text().replace("year: 2025", "year: 2026")
    )
    _append_year(isolated_config_directory, 2026)

    assert year_config.available_years() == (2024, 2025, 2026)
    assert year_config.load_year_configuration(2026).year == 2026


def test_custom_filename(isolated_config_directory: Path) -> None:
    (isolated_config_directory / "draft.yaml").write_text(
        (isolated_config_directory / "2025.yaml").read_text().replace("year: 2025", "year: 2027")
    )
    _append_year(isolated_config_directory, 2027, "draft.yaml")

    assert year_config.load_year_configuration(2027).year == 2027


def test_undeclared_year_is_not_found(isolated_config_directory: Path) -> None:
    with pytest.raises(FileNotFoundError):
        year_config.load_year_configuration(2030)


def test_missing_file_is_not_found(isolated_config_directory: Path) -> None:
    _append_year(isolated_config_directory, 2031)

    with pytest.raises(FileNotFoundError, match="missing"):
        year_config.load_year_configuration(2031)


def test_year_mismatch_is_rejected(isolated_config_directory: Path) -> None:
    (isolated_config_directory / "2032.yaml").write_text(
        (isolated_config_directory / "2025.yaml").read_text()
    )
    _append_year(isolated_config_directory, 2032)

    with pytest.raises(ConfigurationError, match="mismatch"):
        year_config.load_year_configuration(2032)


def test_invalid_schema_is_rejected(isolated_config_directory: Path) -> None:
    raw = yaml.safe_load((isolated_config_directory / "2025.yaml").read_text())
    raw["year"] = 2033
    raw["wage_tax"]["brackets"][1]["rate"] = -0.1
    (isolated_config_directory / "2033.yaml").write_text(yaml.safe_dump(raw))
    _append_year(isolated_config_directory, 2033)

    with pytest.raises(ConfigurationError, match="2033"):
        year_config.load_year_configuration(2033)


def test_duplicate_manifest_years_are_rejected(isolated_config_directory: Path) -> None:
    _append_year(isolated_config_directory, 2025)

    with pytest.raises(ConfigurationError, match="Duplicate"):
        year_config.load_manifest()


def test_pay_frequency_default_must_be_configured() -> None:
    with pytest.raises(ValueError, match="not a configured frequency"):
        PayFrequencyConfig(periods_per_year={"weekly": 52}, default="monthly")
