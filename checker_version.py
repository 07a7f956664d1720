from __future__ import annotations

import re
import subprocess
from dataclasses import dataclass


class LauncherError(RuntimeError):
    """Fatal launcher condition; the CLI reports it and refuses to run."""


# java.version looks like 1.6.0_45 / 1.7.0-ea; only the first two numbers matter.
_VERSION_RE = re.compile(r"^(\d)\.(\d+)\..*$")
_VERSION_OUTPUT_RE = re.compile(r'version\s+"([^"]+)"')


@dataclass(frozen=True, order=True)
class JreVersion:
    major: int
    minor: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


def parse_jre_version(text: str) -> JreVersion:
    m = _VERSION_RE.match(text or "")
    if not m:
        raise LauncherError(f"Could not determine version from property java.version={text}")
    return JreVersion(int(m.group(1)), int(m.group(2)))


def java_version_property(java: str) -> str:
    """
    Return the `java.version` property of the runtime behind `java`.

    `java -version` prints e.g. `java version "1.7.0_80"` on stderr; the quoted
    part is exactly the property value. If the output has no quoted version the
    raw first line is returned, so the caller's parse error shows what was seen.
    """
    try:
        proc = subprocess.run([java, "-version"], capture_output=True, text=True, errors="replace")
    except OSError as ex:
        raise LauncherError(f"Could not run {java} to determine the JRE version: {ex}") from ex
    output = proc.stderr or proc.stdout or ""
    m = _VERSION_OUTPUT_RE.search(output)
    if m:
        return m.group(1)
    lines = output.strip().splitlines()
    return lines[0] if lines else ""
