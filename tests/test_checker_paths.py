import os
from pathlib import Path

import pytest

import checker_paths
from checker_version import JreVersion, LauncherError


def test_first_existing_directory_wins(tmp_path):
    first = tmp_path / "binary"
    second = tmp_path / "other"
    first.mkdir()
    second.mkdir()
    (first / "javac.jar").write_bytes(b"")
    (second / "javac.jar").write_bytes(b"")
    got = checker_paths.find_file_in_directories("javac.jar", [tmp_path / "missing", first, second])
    assert got == checker_paths.ResolvedFile(first / "javac.jar", True)


def test_missing_file_reports_last_directory(tmp_path):
    got = checker_paths.find_file_in_directories("jdk7.jar", [tmp_path / "a", tmp_path / "b"])
    assert got.exists is False
    assert got.path == tmp_path / "b" / "jdk7.jar"
    assert got.name == "jdk7.jar"


def test_no_directories_is_a_contract_violation():
    with pytest.raises(ValueError):
        checker_paths.find_file_in_directories("javac.jar", [])


def test_search_directories_are_relative_to_parent(tmp_path):
    assert checker_paths.search_directories(tmp_path) == [tmp_path / "binary", tmp_path / "."]


@pytest.mark.parametrize("minor", [4, 5, 6])
def test_old_jres_use_jdk6(minor):
    assert checker_paths.jdk_jar_name(JreVersion(1, minor)) == "jdk6.jar"


def test_jre7_uses_jdk7():
    assert checker_paths.jdk_jar_name(JreVersion(1, 7)) == "jdk7.jar"


def test_unsupported_jre_is_fatal():
    with pytest.raises(LauncherError, match=r"Unsupported JRE version: 1\.9"):
        checker_paths.jdk_jar_name(JreVersion(1, 9))


def test_all_missing_files_are_reported_in_order(tmp_path):
    files = [
        checker_paths.ResolvedFile(tmp_path / "javac.jar", False),
        checker_paths.ResolvedFile(tmp_path / "ok.jar", True),
        checker_paths.ResolvedFile(tmp_path / "jdk6.jar", False),
    ]
    with pytest.raises(LauncherError) as ei:
        checker_paths.assert_files_exist(files)
    assert str(ei.value) == "The following files could not be located: javac.jar, jdk6.jar"


def test_existing_files_pass(tmp_path):
    checker_paths.assert_files_exist([checker_paths.ResolvedFile(tmp_path, True)])


def test_prep_file_path_joins_and_appends_previous(tmp_path):
    a = tmp_path / "a.jar"
    b = tmp_path / "b.jar"
    assert checker_paths.prep_file_path(None, a, b) == f"{a}{os.pathsep}{b}"
    assert checker_paths.prep_file_path("user.jar", a) == f"{a}{os.pathsep}user.jar"


def test_prep_file_path_without_files_is_a_contract_violation():
    with pytest.raises(ValueError, match="Empty"):
        checker_paths.prep_file_path(None)


def test_java_command_prefers_java_home(tmp_path, monkeypatch):
    monkeypatch.setattr(checker_paths.sys, "platform", "linux")
    assert checker_paths.java_command(str(tmp_path)) == str(tmp_path / "bin" / "java")
    monkeypatch.setattr(checker_paths.sys, "platform", "win32")
    assert checker_paths.java_command(str(tmp_path)) == str(tmp_path / "bin" / "java.exe")


def test_java_command_falls_back_to_path(monkeypatch):
    monkeypatch.setattr(checker_paths.shutil, "which", lambda name: None)
    assert checker_paths.java_command(None) == "java"
    monkeypatch.setattr(checker_paths.shutil, "which", lambda name: "/usr/bin/java")
    assert checker_paths.java_command(None) == "/usr/bin/java"


def test_jar_url_is_decoded_and_absolute(tmp_path):
    jar = tmp_path / "my checkers" / "checkers.jar"
    url = "jar:file:" + str(jar).replace(" ", "%20") + "!/checkers/util/CheckerMain.class"
    assert checker_paths.find_path_jar(url) == Path(os.path.normpath(str(jar)))


def test_plain_path_is_taken_as_is(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert checker_paths.find_path_jar("dist/../checkers.jar") == Path.cwd() / "checkers.jar"


def test_directory_location_is_refused():
    with pytest.raises(LauncherError, match="loaded from a directory"):
        checker_paths.find_path_jar("file:/opt/checker/build/classes/")


def test_remote_location_names_the_protocol():
    with pytest.raises(LauncherError, match="remotely via the http protocol"):
        checker_paths.find_path_jar("http://example.org/checkers.jar")


def test_unparseable_jar_location_is_refused():
    with pytest.raises(LauncherError, match="can't be parsed"):
        checker_paths.find_path_jar("jar:file:/opt/checkers.jar")


def test_code_location_from_directory_is_a_file_uri():
    loc = checker_paths.code_location()
    assert loc.startswith("file:")
    with pytest.raises(LauncherError):
        checker_paths.find_path_jar(loc)


def test_code_location_inside_archive_round_trips(tmp_path, monkeypatch):
    jar = tmp_path / "dist dir" / "checkers.jar"

    class FakeZipLoader:
        archive = str(jar)

    monkeypatch.setattr(checker_paths, "__loader__", FakeZipLoader())
    loc = checker_paths.code_location()
    assert loc.startswith("jar:file:")
    assert loc.endswith("!/checker_paths.py")
    assert checker_paths.find_path_jar(loc) == jar


def test_relative_path_with_colon_is_not_a_url(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert checker_paths.find_path_jar("lib:x/checkers.jar") == Path.cwd() / "lib:x" / "checkers.jar"


def test_existing_path_wins_over_url_reading(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "file:dist").mkdir()
    (tmp_path / "file:dist" / "checkers.jar").write_bytes(b"")
    assert checker_paths.find_path_jar("file:dist/checkers.jar") == Path.cwd() / "file:dist" / "checkers.jar"


def test_remote_jar_url_names_the_outer_protocol():
    with pytest.raises(LauncherError, match="remotely via the jar protocol"):
        checker_paths.find_path_jar("jar:http://example.org/checkers.jar!/x.py")
