"""Tests for table configuration."""

import pytest

from cellgrid.config import TableConfig, resolve_style
from cellgrid.exceptions import InvalidArgumentError
from cellgrid.styles import TableStyle


class TestTableConfig:
    """Tests for TableConfig."""

    def test_defaults(self) -> None:
        """Defaults match the classic ASCII look."""
        config = TableConfig()
        assert config.grid_fill == "-"
        assert config.grid_boundary == "|"
        assert config.grid_separator == "|"
        assert config.head_fill == "="
        assert config.head_boundary == "|"
        assert config.head_separator == "|"
        assert config.connector == "+"
        assert config.padding == 1

    def test_multi_character_field_rejected(self) -> None:
        """Border fields must be single characters."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            TableConfig(connector="++")
        assert exc_info.value.field == "connector"

    def test_negative_padding_rejected(self) -> None:
        """Padding must not be negative."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            TableConfig(padding=-1)
        assert exc_info.value.field == "padding"

    def test_validate_after_mutation(self) -> None:
        """Fields mutated later are checked by validate()."""
        config = TableConfig()
        config.grid_fill = ""
        with pytest.raises(InvalidArgumentError):
            config.validate()

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Padding and connector are read from the environment."""
        monkeypatch.setenv("CELLGRID_PADDING", "0")
        monkeypatch.setenv("CELLGRID_CONNECTOR", "*")
        config = TableConfig.from_env()
        assert config.padding == 0
        assert config.connector == "*"

    def test_from_env_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without environment overrides the defaults apply."""
        monkeypatch.delenv("CELLGRID_PADDING", raising=False)
        monkeypatch.delenv("CELLGRID_CONNECTOR", raising=False)
        assert TableConfig.from_env() == TableConfig()

    def test_from_env_bad_padding(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Non-integer padding raises InvalidArgumentError."""
        monkeypatch.setenv("CELLGRID_PADDING", "wide")
        with pytest.raises(InvalidArgumentError) as exc_info:
            TableConfig.from_env()
        assert exc_info.value.field == "CELLGRID_PADDING"


class TestResolveStyle:
    """Tests for resolve_style."""

    def test_explicit_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Explicit argument takes precedence over the environment."""
        monkeypatch.setenv("CELLGRID_STYLE", "compact")
        assert resolve_style("separated-head-on") is TableStyle.SEPARATED_HEAD_ON

    def test_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variable is used when no style is given."""
        monkeypatch.setenv("CELLGRID_STYLE", "compact")
        assert resolve_style(None) is TableStyle.COMPACT

    def test_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Falls back to regular-head-on."""
        monkeypatch.delenv("CELLGRID_STYLE", raising=False)
        assert resolve_style(None) is TableStyle.REGULAR_HEAD_ON

    def test_unknown(self) -> None:
        """Unknown style names raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            resolve_style("fancy")
