"""Tests for the ``life-calc doctor`` command (cli/doctor.py).

Coverage:
* Doctor runs and returns SUCCESS when everything is present.
* Doctor returns GENERAL_ERROR when the store location is not writable.
* Individual check functions return correct tuples.
* CLI routing dispatches to ``run_doctor``.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from life_calc.cli import exit_codes


# ---------------------------------------------------------------------------
# Individual check functions
# ---------------------------------------------------------------------------

class TestPythonVersionCheck:
    def test_returns_tuple(self) -> None:
        from life_calc.cli.doctor import _python_version_check

        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status or "FAIL" in status


class TestPackageChecks:
    def test_rich_installed(self) -> None:
        from life_calc.cli.doctor import _rich_check

        label, _value, status = _rich_check()
        assert label == "rich"
        assert "OK" in status

    @patch.dict("sys.modules", {"questionary": None})
    def test_questionary_missing_is_warning(self) -> None:
        from life_calc.cli.doctor import _questionary_check

        label, value, status = _questionary_check()
        assert label == "questionary"
        assert value == "NOT INSTALLED"
        assert "WARN" in status


class TestStoreCheck:
    def test_writable_location(self, tmp_path: Path) -> None:
        from life_calc.cli.doctor import _store_check

        label, value, status = _store_check(tmp_path / "not" / "yet" / "dates.json")
        assert label == "Store"
        assert value.endswith("dates.json")
        assert "OK" in status

    @patch("life_calc.cli.doctor.os.access", return_value=False)
    def test_unwritable_location(self, _mock_access: MagicMock, tmp_path: Path) -> None:
        from life_calc.cli.doctor import _store_check

        _label, _value, status = _store_check(tmp_path / "dates.json")
        assert "FAIL" in status


class TestLifecalcVersionCheck:
    def test_returns_current_version(self) -> None:
        from life_calc.cli.doctor import _lifecalc_version_check
        from life_calc.version import __version__

        label, value, status = _lifecalc_version_check()
        assert label == "life-calc"
        assert value == __version__
        assert "OK" in status


# ---------------------------------------------------------------------------
# run_doctor integration
# ---------------------------------------------------------------------------

class TestRunDoctor:
    def test_all_pass_returns_success(self, tmp_path: Path) -> None:
        from life_calc.cli.doctor import run_doctor

        assert run_doctor(tmp_path / "dates.json") == exit_codes.SUCCESS

    @patch("life_calc.cli.doctor.os.access", return_value=False)
    def test_unwritable_store_fails(self, _mock_access: MagicMock, tmp_path: Path) -> None:
        from life_calc.cli.doctor import run_doctor

        assert run_doctor(tmp_path / "dates.json") == exit_codes.GENERAL_ERROR

    def test_defaults_to_configured_store(self, store_path: Path) -> None:
        from life_calc.cli.doctor import run_doctor

        with patch("life_calc.cli.doctor._store_check") as mock_check:
            mock_check.return_value = ("Store", str(store_path), "[green]OK[/green]")
            run_doctor()
        mock_check.assert_called_once_with(store_path)

    @patch.dict("sys.modules", {"rich": None, "rich.table": None, "rich.console": None})
    def test_plain_output(
        self,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from life_calc.cli.doctor import run_doctor

        code = run_doctor(tmp_path / "dates.json")
        captured = capsys.readouterr()
        assert code == exit_codes.SUCCESS
        assert "life-calc doctor" in captured.err
        assert "All checks passed." in captured.err


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestDoctorRouting:
    @patch("life_calc.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_dispatches_with_store_path(
        self, mock_run: MagicMock, store_path: Path,
    ) -> None:
        from life_calc.cli.app import main

        code = main(["doctor"])
        assert code == exit_codes.SUCCESS
        mock_run.assert_called_once_with(store_path)

    @patch("life_calc.cli.doctor.run_doctor", return_value=exit_codes.GENERAL_ERROR)
    def test_doctor_failure_propagates(self, mock_run: MagicMock) -> None:
        from life_calc.cli.app import main

        code = main(["doctor"])
        assert code == exit_codes.GENERAL_ERROR
