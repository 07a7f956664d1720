from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from checker_exec import EXEC_MODES
from checker_paths import SEARCH_PATHS, code_location, find_path_jar, java_command
from checker_version import LauncherError, java_version_property

_TRUE = {"1", "true", "yes", "y", "on"}
_FALSE = {"0", "false", "no", "n", "off"}


def _env_flag(env: Mapping[str, str], name: str) -> bool:
    v = env.get(name, "").strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE or not v:
        return False
    raise LauncherError(f"{name} must be one of {sorted(_TRUE | _FALSE)}, got: {v!r}")


def _search_paths(env: Mapping[str, str]) -> tuple[str, ...]:
    override = env.get("CHECKER_SEARCH_PATHS", "").strip()
    if not override:
        return SEARCH_PATHS
    parts = tuple(p.strip() for p in override.split(os.pathsep) if p.strip())
    return parts or SEARCH_PATHS


@dataclass(frozen=True)
class LauncherConfig:
    """
    Everything the launcher reads from its surroundings, captured once at startup.

    Environment:
    - CHECKER_JAR: checker jar (path or jar:file: URL); default: where this code was loaded from
    - CHECKER_SEARCH_PATHS: os.pathsep-separated dirs next to the jar holding javac.jar/jdk*.jar
    - CHECKER_JAVA_VERSION: java.version to assume instead of asking `java -version`
    - JAVA_HOME: runtime that runs javac.jar
    - CLASSPATH: used only when no -cp/-classpath is given
    - CHECKER_EXEC: spawn (default) or system
    - CHECKER_ECHO / CHECKER_DRY_RUN: print the command / print it and don't run
    """

    this_jar: Path
    java: str
    java_version: str
    search_paths: tuple[str, ...] = SEARCH_PATHS
    classpath_env: str | None = None
    exec_mode: str = "spawn"
    echo: bool = False
    dry_run: bool = False

    @property
    def parent_dir(self) -> Path:
        return self.this_jar.parent

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LauncherConfig:
        env = os.environ if environ is None else environ

        location = env.get("CHECKER_JAR", "").strip() or code_location()
        this_jar = find_path_jar(location)

        java = java_command(env.get("JAVA_HOME", "").strip() or None)
        java_version = env.get("CHECKER_JAVA_VERSION", "").strip() or java_version_property(java)

        exec_mode = env.get("CHECKER_EXEC", "").strip().lower() or "spawn"
        if exec_mode not in EXEC_MODES:
            raise LauncherError(f"CHECKER_EXEC must be one of: {', '.join(EXEC_MODES)}, got: {exec_mode!r}")

        return cls(
            this_jar=this_jar,
            java=java,
            java_version=java_version,
            search_paths=_search_paths(env),
            classpath_env=env.get("CLASSPATH"),
            exec_mode=exec_mode,
            echo=_env_flag(env, "CHECKER_ECHO"),
            dry_run=_env_flag(env, "CHECKER_DRY_RUN"),
        )
