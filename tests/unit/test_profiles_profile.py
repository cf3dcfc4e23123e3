"""Contains unit tests for the profiles module."""

from pathlib import Path

import pytest

from release_tag_manager.profiles.exceptions import ProfileFormatError, ProfileUnavailableError
from release_tag_manager.profiles.profile import EmptyProfile, YamlProfile


def test_lookup_nested_scalar() -> None:
    """Test that a dotted path walks nested mappings."""
    profile = YamlProfile.from_text("a: test\nd:\n  f: e\n")
    assert profile.lookup("a") == "test"
    assert profile.lookup("d.f") == "e"


def test_lookup_missing_path_returns_none() -> None:
    """Test that absent keys yield None."""
    profile = YamlProfile.from_text("release:\n  script: make\n")
    assert profile.lookup("release.pre") is None
    assert profile.lookup("deploy.pre") is None


def test_lookup_through_scalar_returns_none() -> None:
    """Test that walking below a scalar yields None."""
    profile = YamlProfile.from_text("release: yes-please\n")
    assert profile.lookup("release.pre") is None


def test_lookup_non_scalar_returns_none() -> None:
    """Test that sequences and mappings are not returned as text."""
    profile = YamlProfile.from_text("c:\n  - one\nd:\n  f: e\n")
    assert profile.lookup("c") is None
    assert profile.lookup("d") is None


@pytest.mark.parametrize(
    "text,expected",
    [
        pytest.param("release:\n  pre: true\n", "true", id="boolean true"),
        pytest.param("release:\n  pre: false\n", "false", id="boolean false"),
        pytest.param("release:\n  pre:\n", "", id="null"),
        pytest.param("release:\n  pre: 'TRUE'\n", "TRUE", id="quoted string"),
        pytest.param("release:\n  pre: 3\n", "3", id="integer"),
    ],
)
def test_lookup_renders_scalars_as_text(text: str, expected: str) -> None:
    """Test that scalars come back as they are written in the document."""
    assert YamlProfile.from_text(text).lookup("release.pre") == expected


def test_multiline_block_scalar() -> None:
    """Test that block scalars keep their content."""
    profile = YamlProfile.from_text('a: alpha\nb: |-\n  echo "<>some(text);"\n')
    assert profile.lookup("b") == 'echo "<>some(text);"'


def test_profile_file_is_read_lazily(tmp_path: Path) -> None:
    """Test that the file is only read on the first lookup."""
    path = tmp_path / ".rultor.yml"
    profile = YamlProfile(path=path)
    path.write_text("release:\n  pre: false\n", encoding="utf-8")
    assert profile.lookup("release.pre") == "false"


def test_missing_profile_file_is_unavailable(tmp_path: Path) -> None:
    """Test that a file that cannot be read raises ProfileUnavailableError."""
    profile = YamlProfile(path=tmp_path / "missing.yml")
    with pytest.raises(ProfileUnavailableError) as exc_info:
        profile.lookup("release.pre")
    assert "missing.yml" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, OSError)


@pytest.mark.parametrize(
    "text",
    [
        pytest.param("thre\n\t\\/\u0000", id="control characters"),
        pytest.param("a: [unclosed\n", id="unclosed flow sequence"),
    ],
)
def test_broken_profile_raises_format_error(text: str) -> None:
    """Test that invalid YAML raises ProfileFormatError."""
    with pytest.raises(ProfileFormatError):
        YamlProfile.from_text(text).lookup("release.pre")


def test_non_mapping_root_raises_format_error() -> None:
    """Test that a document whose root is a list is rejected."""
    with pytest.raises(ProfileFormatError, match="root must be a mapping"):
        YamlProfile.from_text("- one\n- two\n").lookup("release.pre")


def test_path_and_text_are_exclusive(tmp_path: Path) -> None:
    """Test that a profile takes exactly one source."""
    with pytest.raises(ValueError):
        YamlProfile()
    with pytest.raises(ValueError):
        YamlProfile(path=tmp_path / "a.yml", text="a: b")


def test_empty_profile_has_no_entries() -> None:
    """Test that the empty profile returns None for every path."""
    assert EmptyProfile().lookup("release.pre") is None


def test_profile_file_with_invalid_encoding_raises_format_error(tmp_path: Path) -> None:
    """Test that a profile file that is not UTF-8 is reported as malformed."""
    path = tmp_path / ".rultor.yml"
    path.write_bytes(b"release:\n  pre: \xff\xfe\n")
    with pytest.raises(ProfileFormatError) as exc_info:
        YamlProfile(path=path).lookup("release.pre")
    assert ".rultor.yml" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


def test_empty_inline_profile_has_no_entries() -> None:
    """Test that empty YAML text behaves as a profile without entries."""
    assert YamlProfile.from_text("").lookup("release.pre") is None
