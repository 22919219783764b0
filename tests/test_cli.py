"""Tests for the command-line entry point."""

import sys
from unittest.mock import patch

import pytest

from cantina_finder.cli.main import main
from cantina_finder.errors import ListingHTTPError


class TestCli:
    """Tests for main."""

    @patch("cantina_finder.pipeline.run_report")
    def test_prints_report(self, mock_run, capsys: pytest.CaptureFixture[str]) -> None:
        mock_run.return_value = "=== BOUNTIES (0)\n\n=== COMPETITIONS (0)\n"
        with patch.object(sys, "argv", ["cantina-finder"]):
            main()
        out, err = capsys.readouterr()
        assert out == "=== BOUNTIES (0)\n\n=== COMPETITIONS (0)\n"
        assert err == ""

    @patch("cantina_finder.pipeline.run_report")
    def test_fatal_error_exits_non_zero(self, mock_run, capsys: pytest.CaptureFixture[str]) -> None:
        mock_run.side_effect = ListingHTTPError("GET https://cantina.xyz returned HTTP 500", status_code=500)
        with patch.object(sys, "argv", ["cantina-finder"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 1
        out, err = capsys.readouterr()
        assert out == ""
        assert "Error: GET https://cantina.xyz returned HTTP 500" in err

    def test_rejects_arguments(self) -> None:
        """The command takes no options."""
        with patch.object(sys, "argv", ["cantina-finder", "--since", "2026-01-01"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 2
