"""Tests for mod list and token file parsing."""

import pytest

from modcheck.core.domain.models import ReferenceKind
from modcheck.core.errors import ModListError, TokenFileError
from modcheck.core.mod_list import load_mod_list, load_token, parse_mod_list, parse_reference


class TestParseReference:

    def test_plain_url(self):
        ref = parse_reference("https://mod.io/g/drg/m/better-mining", 1)
        assert ref.kind is ReferenceKind.URL
        assert ref.name_id == "better-mining"
        assert ref.mod_id is None
        assert ref.modfile_id is None

    def test_url_with_mod_id(self):
        ref = parse_reference("https://mod.io/g/drg/m/better-mining#123", 2)
        assert ref.name_id == "better-mining"
        assert ref.mod_id == 123
        assert ref.position == 2

    def test_url_with_modfile_id(self):
        ref = parse_reference("https://mod.io/g/drg/m/better-mining#123/4567", 1)
        assert ref.mod_id == 123
        assert ref.modfile_id == 4567

    def test_numeric_id(self):
        ref = parse_reference("456", 1)
        assert ref.kind is ReferenceKind.ID
        assert ref.mod_id == 456
        assert ref.name_id is None

    def test_bare_name_id(self):
        ref = parse_reference("better_mining-2", 1)
        assert ref.kind is ReferenceKind.NAME_ID
        assert ref.name_id == "better_mining-2"

    def test_other_game_rejected(self):
        assert parse_reference("https://mod.io/g/other/m/better-mining", 1) is None

    def test_custom_game_slug(self):
        ref = parse_reference("https://mod.io/g/other/m/thing#9", 1, game_slug="other")
        assert ref.mod_id == 9

    def test_zero_id_rejected(self):
        assert parse_reference("0", 1) is None

    def test_foreign_url_rejected(self):
        assert parse_reference("https://example.com/mods/1", 1) is None

    def test_zero_mod_id_in_url_rejected(self):
        assert parse_reference("https://mod.io/g/drg/m/foo#0", 1) is None

    def test_zero_modfile_id_in_url_rejected(self):
        assert parse_reference("https://mod.io/g/drg/m/foo#5/0", 1) is None


class TestParseModList:

    def test_arbitrary_whitespace(self):
        refs = parse_mod_list("123\t456\n\n  https://mod.io/g/drg/m/x#7  \r\n")
        assert [r.raw for r in refs] == ["123", "456", "https://mod.io/g/drg/m/x#7"]
        assert [r.position for r in refs] == [1, 2, 3]

    def test_duplicates_kept(self):
        refs = parse_mod_list("123 123 123")
        assert len(refs) == 3

    def test_empty(self):
        assert parse_mod_list("   \n\t") == []

    def test_malformed_entries_reported(self):
        with pytest.raises(ModListError) as excinfo:
            parse_mod_list("123 https://example.com/x 456 ???")
        message = str(excinfo.value)
        assert "#2 'https://example.com/x'" in message
        assert "#4 '???'" in message

    def test_zero_ids_in_urls_are_malformed(self):
        with pytest.raises(ModListError) as excinfo:
            parse_mod_list("123 https://mod.io/g/drg/m/foo#0 https://mod.io/g/drg/m/bar#5/0")
        message = str(excinfo.value)
        assert "#2 " in message
        assert "#3 " in message

    def test_many_malformed_entries_truncated(self):
        with pytest.raises(ModListError, match=r"and 2 more"):
            parse_mod_list(" ".join(["!"] * 7))


class TestLoadFiles:

    def test_load_mod_list(self, tmp_path):
        p = tmp_path / "mods.txt"
        p.write_text("123\nhttps://mod.io/g/drg/m/abc#5\n", encoding="utf-8")
        refs = load_mod_list(p)
        assert [r.mod_id for r in refs] == [123, 5]

    def test_missing_mod_list(self, tmp_path):
        with pytest.raises(ModListError, match="does not exist"):
            load_mod_list(tmp_path / "missing.txt")

    def test_mod_list_not_utf8(self, tmp_path):
        p = tmp_path / "mods.txt"
        p.write_bytes(b"123 \xff\xfe")
        with pytest.raises(ModListError, match="UTF-8"):
            load_mod_list(p)

    def test_mod_list_is_directory(self, tmp_path):
        with pytest.raises(ModListError):
            load_mod_list(tmp_path)

    def test_token_stripped(self, tmp_path):
        p = tmp_path / "token"
        p.write_text("  abc.def.ghi\n", encoding="utf-8")
        assert load_token(p) == "abc.def.ghi"

    def test_missing_token(self, tmp_path):
        with pytest.raises(TokenFileError, match="does not exist"):
            load_token(tmp_path / "token")

    def test_empty_token(self, tmp_path):
        p = tmp_path / "token"
        p.write_text("\n", encoding="utf-8")
        with pytest.raises(TokenFileError, match="empty"):
            load_token(p)

    @pytest.mark.parametrize("text", ["s\u00e9cret", "abc def", "abc\x00def"])
    def test_token_with_invalid_characters(self, tmp_path, text):
        p = tmp_path / "token"
        p.write_text(text, encoding="utf-8")
        with pytest.raises(TokenFileError, match="invalid characters"):
            load_token(p)

    def test_token_not_utf8(self, tmp_path):
        p = tmp_path / "token"
        p.write_bytes(b"abc\xff\xfe")
        with pytest.raises(TokenFileError, match="UTF-8"):
            load_token(p)
