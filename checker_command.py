from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from checker_args import extract_boot_class_path, extract_cp_opts, extract_jvm_opts
from checker_config import LauncherConfig
from checker_paths import (
    JAVAC_JAR,
    assert_files_exist,
    find_file_in_directories,
    jdk_jar_name,
    prep_file_path,
    search_directories,
)
from checker_version import parse_jre_version

# Keep assertions on inside the compiler classes, like the jsr308 javac script.
ENABLE_COMPILER_ASSERTIONS = "-ea:com.sun.tools..."


@dataclass(frozen=True)
class CheckerInvocation:
    java: str
    boot_classpath: str
    jvm_opts: tuple[str, ...]
    javac_jar: Path
    classpath: str
    tool_opts: tuple[str, ...]

    def to_args(self) -> list[str]:
        return [
            self.java,
            "-Xbootclasspath/p:" + self.boot_classpath,
            ENABLE_COMPILER_ASSERTIONS,
            *self.jvm_opts,
            "-jar",
            os.path.abspath(self.javac_jar),
            "-classpath",
            self.classpath,
            *self.tool_opts,
        ]


def prepare(config: LauncherConfig, args: list[str]) -> CheckerInvocation:
    """
    Resolve jars and split `args` into the pieces of the javac.jar invocation.

    Our jdk jar and javac.jar go first on the boot class path and the checker jar
    first on the classpath; user entries follow. Unrecognized args keep their order.
    """
    version = parse_jre_version(config.java_version)
    jdk_name = jdk_jar_name(version)

    directories = search_directories(config.parent_dir, config.search_paths)
    javac_jar = find_file_in_directories(JAVAC_JAR, directories)
    jdk_jar = find_file_in_directories(jdk_name, directories)
    assert_files_exist([javac_jar, jdk_jar])

    boot_entries, rest = extract_boot_class_path(list(args))
    jvm_opts, rest = extract_jvm_opts(rest)
    cp_entries, rest = extract_cp_opts(rest, config.classpath_env)

    user_boot = os.pathsep.join(boot_entries) if boot_entries else None
    classpath = os.pathsep.join([os.path.abspath(config.this_jar), *cp_entries])

    return CheckerInvocation(
        java=config.java,
        boot_classpath=prep_file_path(user_boot, jdk_jar.path, javac_jar.path),
        jvm_opts=tuple(jvm_opts),
        javac_jar=javac_jar.path,
        classpath=classpath,
        tool_opts=tuple(rest),
    )
