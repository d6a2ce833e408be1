"""Tests for style roles and style sheets."""

import pytest

from tinta import Style, StyleError, StyleRole, StyleSheet, headline_role


class TestStyleRole:
    """Role coercion."""

    @pytest.mark.parametrize("key", ["bold", "BOLD", "Bold", StyleRole.BOLD])
    def test_coerce(self, key: StyleRole | str) -> None:
        assert StyleRole.coerce(key) is StyleRole.BOLD

    @pytest.mark.parametrize("key", ["sparkly", 42, None])
    def test_coerce_rejects(self, key: object) -> None:
        with pytest.raises(StyleError) as exc_info:
            StyleRole.coerce(key)  # type: ignore[arg-type]
        assert exc_info.value.role == key

    @pytest.mark.parametrize(
        ("level", "role"),
        [
            (0, StyleRole.HEADLINE),
            (1, StyleRole.HEADLINE),
            (4, StyleRole.SUBSUBSUBHEADLINE),
            (9, StyleRole.SUBSUBSUBHEADLINE),
        ],
    )
    def test_headline_role_clamps(self, level: int, role: StyleRole) -> None:
        assert headline_role(level) is role


class TestStyleSheet:
    """Immutable role -> attribute bag mapping."""

    def test_every_role_present(self) -> None:
        sheet = StyleSheet.default()
        assert set(sheet) == set(StyleRole)
        assert len(sheet) == len(StyleRole)

    def test_default_is_shared(self) -> None:
        assert StyleSheet.default() is StyleSheet.default()

    def test_bags_read_only(self) -> None:
        with pytest.raises(TypeError):
            StyleSheet.default()[StyleRole.BOLD]["weight"] = 1  # type: ignore[index]

    def test_override_replaces_whole_bag(self) -> None:
        sheet = StyleSheet.default().with_overrides({"normal": {"color": "red"}})
        assert dict(sheet[StyleRole.NORMAL]) == {"color": "red"}

    def test_override_leaves_original(self) -> None:
        default = StyleSheet.default()
        default.with_overrides({"bold": {"weight": 1}})
        assert default[StyleRole.BOLD] == {"weight": "bold"}

    def test_override_copies_bag(self) -> None:
        bag = {"size": 10}
        sheet = StyleSheet.default().with_overrides({"normal": bag})
        bag["size"] = 99
        assert sheet[StyleRole.NORMAL]["size"] == 10

    @pytest.mark.parametrize("overrides", [None, {}])
    def test_no_overrides_returns_self(self, overrides: dict | None) -> None:
        sheet = StyleSheet.default()
        assert sheet.with_overrides(overrides) is sheet

    def test_bag_must_be_mapping(self) -> None:
        with pytest.raises(StyleError, match="expected a mapping"):
            StyleSheet.default().with_overrides({"bold": ["weight"]})  # type: ignore[dict-item]

    def test_equality_and_hash(self) -> None:
        first = StyleSheet.default().with_overrides({"quote": {"color": "blue"}})
        second = StyleSheet.default().with_overrides({StyleRole.QUOTE: {"color": "blue"}})
        assert first == second
        assert hash(first) == hash(second)
        assert first != StyleSheet.default()


class TestResolve:
    """Layering of bags for a run."""

    def test_plain_run_gets_base(self) -> None:
        sheet = StyleSheet.default()
        assert dict(sheet.resolve(StyleRole.QUOTE, Style())) == dict(sheet[StyleRole.QUOTE])

    def test_flags_layer_in_order(self) -> None:
        sheet = StyleSheet.default().with_overrides(
            {
                "normal": {"size": 13, "weight": "regular"},
                "bold": {"weight": "bold"},
                "italic": {"slant": "italic", "weight": "light"},
            }
        )
        resolved = sheet.resolve(StyleRole.NORMAL, Style(bold=True, italic=True))
        assert dict(resolved) == {"size": 13, "weight": "light", "slant": "italic"}

    def test_monospace_in_code_block_not_layered_twice(self) -> None:
        sheet = StyleSheet.default()
        resolved = sheet.resolve(StyleRole.MONOSPACE, Style(monospace=True))
        assert dict(resolved) == dict(sheet[StyleRole.MONOSPACE])

    def test_link_flag_has_no_bag(self) -> None:
        sheet = StyleSheet.default()
        resolved = sheet.resolve(StyleRole.NORMAL, Style(link="http://x.com"))
        assert dict(resolved) == dict(sheet[StyleRole.NORMAL])
