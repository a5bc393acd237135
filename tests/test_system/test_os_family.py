"""Tests for OS family detection."""

from unittest.mock import patch

import pytest

from benchsys.system.os_family import OsFamily, detect_os_family, os_type_tag


class TestDetectOsFamily:
    @pytest.mark.parametrize(
        "tag,expected",
        [
            ("darwin", OsFamily.MACOS),
            ("nt", OsFamily.WINDOWS),
            ("freebsd", OsFamily.FREEBSD),
            ("linux", OsFamily.LINUX),
        ],
    )
    def test_known_tags(self, tag, expected):
        assert detect_os_family(tag) is expected

    @pytest.mark.parametrize(
        "tag", ["sunos", "openbsd", "netbsd", "aix", "win32", "Darwin", "", "java"]
    )
    def test_unrecognized_tags_are_linux(self, tag):
        assert detect_os_family(tag) is OsFamily.LINUX

    def test_detects_running_system(self):
        assert isinstance(detect_os_family(), OsFamily)

    def test_family_values(self):
        assert [f.value for f in OsFamily] == ["macOS", "Windows", "FreeBSD", "Linux"]


class TestOsTypeTag:
    @patch("benchsys.system.os_family.os")
    def test_windows_is_nt(self, mock_os):
        mock_os.name = "nt"
        assert os_type_tag() == "nt"

    @patch("benchsys.system.os_family.platform.system", return_value="Darwin")
    @patch("benchsys.system.os_family.os")
    def test_posix_uses_lowercased_system(self, mock_os, mock_system):
        mock_os.name = "posix"
        assert os_type_tag() == "darwin"
        assert detect_os_family() is OsFamily.MACOS

    @patch("benchsys.system.os_family.platform.system", return_value="FreeBSD")
    @patch("benchsys.system.os_family.os")
    def test_freebsd(self, mock_os, mock_system):
        mock_os.name = "posix"
        assert detect_os_family() is OsFamily.FREEBSD
