"""
Tests for the IFSCDirectory facade, the directory loader and the lookup script.

Uses the JSON fixtures under tests/fixtures.
"""

from __future__ import annotations

import importlib.util
import shutil
from pathlib import Path

import pytest

from ifsc import (
    DatasetError,
    DirectoryDatasetLoader,
    IFSCDirectory,
    InvalidCodeError,
    MappingDatasetLoader,
)
from tests.test_mocks import default_payloads


FIXTURES = Path(__file__).parent / "fixtures"
SCRIPT = Path(__file__).parent.parent / "scripts" / "ifsc_lookup.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("ifsc_lookup", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    assert spec.loader is not None
    spec.loader.exec_module(module)
    return module


class TestDirectoryDatasetLoader:
    def test_reads_file(self) -> None:
        loader = DirectoryDatasetLoader(FIXTURES)
        assert loader("banknames.json") == (FIXTURES / "banknames.json").read_bytes()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            DirectoryDatasetLoader(tmp_path)("IFSC.json")


class TestMappingDatasetLoader:
    def test_str_payload_encoded(self) -> None:
        assert MappingDatasetLoader({"a.json": "{}"})("a.json") == b"{}"

    def test_missing(self) -> None:
        with pytest.raises(KeyError):
            MappingDatasetLoader({})("a.json")


class TestIFSCDirectory:
    """End-to-end queries over the fixture datasets."""

    def test_from_directory(self) -> None:
        directory = IFSCDirectory.from_directory(FIXTURES)
        assert directory.validate("HDFC0000001") is True
        assert directory.validate("HDFC1000001") is False
        assert directory.get_bank_name("HDFC0000001") == "HDFC Bank"
        assert directory.get_bank_name("KSCB0000001") == "District Central Co-operative Bank"
        assert directory.get_bank_codes("hdfc bank") == ["HDFC", "HDFB"]
        assert directory.get_ifscs_by_bank_name("HDFC Bank") == ["HDFC0000001", "HDFB0000001"]
        assert directory.validate_ifsc_for_bank("HDFC Bank", "HDFC0000240") is True
        assert directory.validate_bank_code("SBIN") is True
        details = directory.get_bank_details("HDFC")
        assert details is not None and details.iin == "607152"

    def test_from_loader_matches_fixtures(self) -> None:
        from_memory = IFSCDirectory.from_loader(MappingDatasetLoader(default_payloads()))
        from_disk = IFSCDirectory.from_directory(FIXTURES)
        assert from_memory.stats() == from_disk.stats()

    def test_stats(self) -> None:
        stats = IFSCDirectory.from_directory(FIXTURES).stats()
        assert stats == {
            "bank_prefixes": 6,
            "branches": 11,
            "bank_names": 7,
            "sublets": 2,
            "custom_sublets": 3,
            "banks": 4,
            "distinct_bank_names": 6,
        }

    def test_invalid_code(self) -> None:
        with pytest.raises(InvalidCodeError):
            IFSCDirectory.from_directory(FIXTURES).get_bank_name("XXXX")

    def test_missing_dataset_fails_startup(self, tmp_path: Path) -> None:
        for path in FIXTURES.glob("*.json"):
            shutil.copy(path, tmp_path / path.name)
        (tmp_path / "custom-sublets.json").unlink()
        with pytest.raises(DatasetError) as exc_info:
            IFSCDirectory.from_directory(tmp_path)
        assert exc_info.value.dataset == "custom-sublets.json"
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_requires_indexes(self) -> None:
        with pytest.raises(TypeError):
            IFSCDirectory({})  # type: ignore[arg-type]

    def test_minimal_dataset(self) -> None:
        payloads = {
            "IFSC.json": '{"HDFC": ["0001", "0002"]}',
            "banknames.json": '{"HDFC": "HDFC Bank"}',
            "banks.json": "{}",
            "sublet.json": "{}",
            "custom-sublets.json": "{}",
        }
        directory = IFSCDirectory.from_loader(MappingDatasetLoader(payloads))
        assert directory.validate("HDFC0000001") is True
        assert directory.get_bank_name("HDFC0000001") == "HDFC Bank"
        assert directory.get_bank_codes("hdfc bank") == ["HDFC"]
        assert directory.validate("HDFC1000001") is False


class TestLookupScript:
    """Tests for scripts/ifsc_lookup.py."""

    def _run(self, capsys: pytest.CaptureFixture[str], *argv: str) -> tuple[int, str]:
        module = _load_script()
        code = module.main(["--data-dir", str(FIXTURES), *argv])
        return code, capsys.readouterr().out

    def test_validate(self, capsys: pytest.CaptureFixture[str]) -> None:
        code, out = self._run(capsys, "validate", "HDFC0000001")
        assert code == 0
        assert "HDFC0000001: valid" in out

    def test_validate_invalid(self, capsys: pytest.CaptureFixture[str]) -> None:
        code, out = self._run(capsys, "validate", "HDFC0000009")
        assert code == 1
        assert "invalid" in out

    def test_name(self, capsys: pytest.CaptureFixture[str]) -> None:
        code, out = self._run(capsys, "name", "SBIN0005678")
        assert code == 0
        assert out.strip().endswith("SBI Treasury Branch")

    def test_codes(self, capsys: pytest.CaptureFixture[str]) -> None:
        code, out = self._run(capsys, "codes", "HDFC Bank")
        assert code == 0
        assert out.strip().splitlines()[-2:] == ["HDFC", "HDFB"]

    def test_check(self, capsys: pytest.CaptureFixture[str]) -> None:
        code, out = self._run(capsys, "check", "State Bank of India", "HDFC0000001")
        assert code == 1
        assert "does not belong" in out

    def test_details(self, capsys: pytest.CaptureFixture[str]) -> None:
        code, out = self._run(capsys, "details", "HDFC")
        assert code == 0
        assert "ifsc: HDFC0000001" in out

    def test_lookup_error_exit_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        code, out = self._run(capsys, "codes", "Unknown Bank")
        assert code == 1
        assert "[ifsc_lookup] ERROR" in out

    def test_missing_data_dir_reports_error(self, capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
        """A dataset directory that cannot be loaded is reported, not raised."""
        module = _load_script()
        code = module.main(["--data-dir", str(tmp_path), "validate", "HDFC0000001"])
        out = capsys.readouterr().out
        assert code == 1
        assert "[ifsc_lookup] ERROR" in out
        assert "IFSC.json" in out
