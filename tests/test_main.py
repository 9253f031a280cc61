"""Tests for the command-line entry point."""

from unittest.mock import AsyncMock, patch

import pytest

import main
from zilkit.exceptions import ProviderConnectionError
from zilkit.models import BalanceResponse

PRIVATE_KEY = "d96e9eb5b782a80ea153c937fa83e5948485fbfc8b7e7c069d7b914dbc350aba"
PUBLIC_KEY = "03bfad0f0b53cff5213b5947f3ddd66acee8906aba3610c111915aecc84092e052"
ADDRESS = "0x381f4008505e940AD7681EC3468a719060caF796"


class TestMain:
    """Tests for main()."""

    def test_derive(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test derive prints the public key and address."""
        assert main.main(["derive", PRIVATE_KEY]) == 0

        out = capsys.readouterr().out
        assert PUBLIC_KEY in out
        assert ADDRESS in out

    def test_generate(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test generate prints a full key set."""
        assert main.main(["generate"]) == 0

        out = capsys.readouterr().out
        assert "private_key:" in out
        assert "address:" in out

    def test_checksum(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test checksum prints the checksummed address."""
        assert main.main(["checksum", "11223344556677889900aabbccddeeff11223344"]) == 0
        assert capsys.readouterr().out.strip() == "0x11223344556677889900AabbccdDeefF11223344"

    def test_validate(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test validate exit codes follow the checksum result."""
        assert main.main(["validate", ADDRESS]) == 0
        assert main.main(["validate", ADDRESS.lower()]) == 1

    def test_invalid_input_exit_code(self) -> None:
        """Test crypto errors map to exit code 1."""
        assert main.main(["checksum", "0x1234"]) == 1
        assert main.main(["derive", "not-a-key"]) == 1

    def test_balance(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test balance prints the node's answer."""
        with patch.object(
            main.HTTPProvider,
            "get_balance",
            AsyncMock(return_value=BalanceResponse(balance="42", nonce=9)),
        ):
            assert main.main(["balance", ADDRESS, "--rpc-url", "http://localhost:5555"]) == 0

        out = capsys.readouterr().out
        assert "balance: 42" in out
        assert "nonce:   9" in out

    def test_balance_transport_error(self) -> None:
        """Test transport errors map to exit code 1."""
        with patch.object(
            main.HTTPProvider,
            "get_balance",
            AsyncMock(side_effect=ProviderConnectionError("refused")),
        ):
            assert main.main(["balance", ADDRESS]) == 1
