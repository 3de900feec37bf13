"""Unit tests for the file and key helpers."""

import pytest

from filecipher.utils import evp_bytes_to_key, read_text, strip_padding, write_text


class TestEvpBytesToKey:
    def test_matches_openssl(self):
        """Values from `openssl enc -aes-256-cbc -md md5 -S 0102030405060708 -P`."""
        key, iv = evp_bytes_to_key(b"mySecretKey", bytes.fromhex("0102030405060708"), 32, 16)

        assert key.hex().upper() == "EBA6960829A6C15C26BF972CCF6BE4995BE5985ED448244DFEBCF787C3259D6E"
        assert iv.hex().upper() == "4819698C34C1A685C54BC19B517B7C09"


class TestStripPadding:
    def test_removes_pkcs7_padding(self):
        assert strip_padding(b"abc" + b"\x05" * 5) == b"abc"

    def test_oversized_pad_length_yields_empty(self):
        assert strip_padding(b"ab\xff") == b""

    def test_empty_input(self):
        assert strip_padding(b"") == b""


class TestTextIO:
    def test_write_then_read(self, tmp_path):
        path = tmp_path / "out.txt"
        write_text(path, "héllo")

        assert read_text(path) == "héllo"
        assert path.read_bytes() == "héllo".encode("utf-8")

    def test_newlines_are_preserved(self, tmp_path):
        path = tmp_path / "crlf.txt"
        path.write_bytes(b"a\r\nb\rc\n")

        assert read_text(path) == "a\r\nb\rc\n"

    def test_write_overwrites(self, tmp_path):
        path = tmp_path / "out.txt"
        path.write_text("old content that is longer")
        write_text(path, "new")

        assert read_text(path) == "new"

    def test_read_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_text(tmp_path / "nope.txt")

    def test_write_into_missing_directory(self, tmp_path):
        with pytest.raises(OSError):
            write_text(tmp_path / "missing" / "out.txt", "data")

    def test_undecodable_bytes_are_replaced(self, tmp_path):
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"caf\xe9\n")

        assert read_text(path) == "caf\ufffd\n"
