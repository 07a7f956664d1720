from __future__ import annotations

import os
import re
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote, unquote

from checker_version import JreVersion, LauncherError

# Directories searched for javac.jar / jdk*.jar, relative to the checker jar's parent.
SEARCH_PATHS: tuple[str, ...] = ("binary", ".")

JAVAC_JAR = "javac.jar"

JDK_JAR_BY_VERSION: dict[JreVersion, str] = {
    JreVersion(1, 4): "jdk6.jar",
    JreVersion(1, 5): "jdk6.jar",
    JreVersion(1, 6): "jdk6.jar",
    JreVersion(1, 7): "jdk7.jar",
}

_JAR_FILE_PREFIX = "jar:file:"
# Two or more chars so that `C:\...` is read as a path, not a scheme.
_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.-]+):")


@dataclass(frozen=True)
class ResolvedFile:
    path: Path
    exists: bool

    @property
    def name(self) -> str:
        return self.path.name


def find_file_in_directories(file_name: str, directories: list[Path]) -> ResolvedFile:
    """
    First `directories[i] / file_name` that exists.

    When nothing matches, the candidate under the LAST directory is returned with
    exists=False, so callers can still report the name.
    """
    if not directories:
        raise ValueError(f"no directories to search for {file_name}")
    candidate = directories[-1] / file_name
    for directory in directories:
        p = directory / file_name
        if p.exists():
            return ResolvedFile(p, True)
    return ResolvedFile(candidate, False)


def search_directories(parent: Path, search_paths: tuple[str, ...] | list[str] = SEARCH_PATHS) -> list[Path]:
    return [parent / p for p in search_paths]


def jdk_jar_name(version: JreVersion) -> str:
    name = JDK_JAR_BY_VERSION.get(version)
    if name is None:
        raise LauncherError(f"Unsupported JRE version: {version}")
    return name


def assert_files_exist(files: list[ResolvedFile]) -> None:
    missing = [f.name for f in files if not f.exists]
    if missing:
        raise LauncherError("The following files could not be located: " + ", ".join(missing))


def prep_file_path(previous: str | None, *files: Path) -> str:
    """Absolute paths of `files` joined with os.pathsep, followed by `previous` if given."""
    if not files:
        raise ValueError("Prepending empty or null array to file path! files == Empty")
    path = os.pathsep.join(os.path.abspath(f) for f in files)
    if previous is None:
        return path
    return path + os.pathsep + previous


def java_command(java_home: str | None) -> str:
    if java_home:
        exe = "java.exe" if sys.platform.startswith("win") else "java"
        return str(Path(java_home) / "bin" / exe)
    return shutil.which("java") or "java"


def code_location() -> str:
    """Location of the launcher's own code, shaped like a class-loader resource URL."""
    module_file = Path(__file__).name
    archive = getattr(__loader__, "archive", None)
    if archive:
        # zipimport: we run from inside checkers.jar (python checkers.jar ...)
        return f"{_JAR_FILE_PREFIX}{quote(Path(archive).as_posix())}!/{module_file}"
    return Path(__file__).resolve().as_uri()


def _is_location_url(loc: str, scheme: str) -> bool:
    # `lib:x/checkers.jar` is a relative path; real locations are jar:/file: or have an authority
    if scheme.lower() in ("jar", "file"):
        return True
    return loc[len(scheme) + 1 :].startswith("//")


def find_path_jar(location: str) -> Path:
    """
    Path of the checker jar from a location identifier.

    Accepts a plain filesystem path, or `jar:file:<path>!/<entry>`. Directory and
    remote locations are refused with a message saying which case it was.
    """
    loc = (location or "").strip()
    m = _SCHEME_RE.match(loc)
    if not m or os.path.exists(loc) or not _is_location_url(loc, m.group(1)):
        return Path(os.path.normpath(os.path.abspath(os.path.expanduser(loc))))

    if loc.startswith("file:"):
        raise LauncherError("The checker has been loaded from a directory and not from a jar file.")
    if not loc.startswith(_JAR_FILE_PREFIX):
        raise LauncherError(
            f"The checker has been loaded remotely via the {m.group(1)} protocol. "
            "Only loading from a jar on the local file system is supported."
        )

    idx = loc.find("!")
    if idx == -1:
        raise LauncherError(
            "You appear to have loaded the checker from a local jar file, but the location can't be parsed: " + loc
        )
    file_name = unquote(loc[len(_JAR_FILE_PREFIX) : idx])
    return Path(os.path.normpath(os.path.abspath(file_name)))
