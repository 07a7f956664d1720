from __future__ import annotations

import re

BOOT_CLASS_PATH_RE = re.compile(r"^(?:-J)?-Xbootclasspath/p:(.*)$")
JVM_OPTS_RE = re.compile(r"^-J(.*)$")
CLASSPATH_FLAGS = {"-cp", "-classpath"}


def extract_opt_w_pattern(pattern: re.Pattern[str], allow_empties: bool, args: list[str]) -> tuple[list[str], list[str]]:
    """
    Split args into (group(1) of every full match, everything else).

    Captures are stripped; empty ones are dropped unless allow_empties. The
    matching arg itself is always removed. `args` is not modified.
    """
    matched: list[str] = []
    rest: list[str] = []
    for arg in args:
        m = pattern.fullmatch(arg)
        if not m:
            rest.append(arg)
            continue
        value = m.group(1).strip()
        if value or allow_empties:
            matched.append(value)
    return matched, rest


def extract_boot_class_path(args: list[str]) -> tuple[list[str], list[str]]:
    """-Xbootclasspath/p:X and -J-Xbootclasspath/p:X entries, folded into one boot path later."""
    return extract_opt_w_pattern(BOOT_CLASS_PATH_RE, False, args)


def extract_jvm_opts(args: list[str]) -> tuple[list[str], list[str]]:
    """-J<opt> entries, returned without the -J prefix."""
    return extract_opt_w_pattern(JVM_OPTS_RE, False, args)


def extract_cp_opts(args: list[str], classpath_env: str | None) -> tuple[list[str], list[str]]:
    """
    Remove every `-cp X` / `-classpath X` pair; the last X wins.

    Without any classpath flag the result is what the javac script does:
    the CLASSPATH variable followed by the current directory.
    """
    path: str | None = None
    rest: list[str] = []
    i = 0
    while i < len(args):
        tok = args[i]
        # a trailing flag without value is left for javac to complain about
        if tok in CLASSPATH_FLAGS and (i + 1) < len(args):
            path = args[i + 1]
            i += 2
            continue
        rest.append(tok)
        i += 1

    if path is not None:
        return [path], rest
    entries = [classpath_env] if classpath_env is not None else []
    entries.append(".")
    return entries, rest
