"""
Unit tests for the hexindex command-line script.
"""
import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "hexindex_cli.py"


@pytest.fixture(scope="module")
def cli():
    """Load the script as a module."""
    spec = importlib.util.spec_from_file_location("hexindex_cli", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.unit
class TestCli:
    """Test suite for hexindex_cli.py."""

    def test_encode(self, cli, capsys):
        """Test encode prints the cell id."""
        assert cli.main(["encode", "58.673873878380526", "2.389386851097959", "--resolution", "1"]) == 0
        assert capsys.readouterr().out.strip() == "8109bffffffffff"

    def test_encode_default_resolution(self, cli, capsys):
        """Test encode uses the default resolution."""
        assert cli.main(["encode", "37.7749", "-122.4194"]) == 0
        out = capsys.readouterr().out.strip()
        assert len(out) == 15
        assert out[1] == "9"

    def test_decode(self, cli, capsys):
        """Test decode prints two coordinates."""
        assert cli.main(["decode", "8403949ffffffff"]) == 0
        lat, lon = (float(v) for v in capsys.readouterr().out.split())
        assert lat == pytest.approx(78.2041270329, abs=1e-4)
        assert lon == pytest.approx(-163.0317541712, abs=1e-4)

    def test_bounds(self, cli, capsys):
        """Test bounds prints a box."""
        assert cli.main(["bounds", "8928308280fffff"]) == 0
        assert capsys.readouterr().out.startswith("lat [")

    def test_invalid_input_exits_non_zero(self, cli, capsys):
        """Test that errors are reported on stderr with exit status 1."""
        assert cli.main(["encode", "95", "0"]) == 1
        assert "Latitude" in capsys.readouterr().err

    def test_malformed_cell(self, cli, capsys):
        """Test that malformed cell ids are reported."""
        assert cli.main(["decode", "xyz"]) == 1
        assert "error:" in capsys.readouterr().err
