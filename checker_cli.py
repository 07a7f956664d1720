"""
javac replacement for the Checker Framework.

Works like the jsr308 `javac` script, except that it puts the annotated JDK
(jdk6.jar/jdk7.jar, picked by JRE version) and javac.jar on the boot class path
and the checker jar on the classpath. Every argument is handed to javac.jar
unchanged except:
- -Xbootclasspath/p:X and -J-Xbootclasspath/p:X (appended after our boot entries)
- -J<opt> (passed to the JVM as <opt>)
- -cp X / -classpath X (last one wins; default is $CLASSPATH and .)

The launcher has no options of its own; see checker_config for the environment it reads.
"""

from __future__ import annotations

import sys

from checker_command import prepare
from checker_config import LauncherConfig
from checker_exec import construct_command, exit_code, run
from checker_version import LauncherError


def main(argv: list[str] | None = None) -> int:
    eff_argv = list(sys.argv[1:] if argv is None else argv)
    try:
        config = LauncherConfig.from_env()
        cmd = prepare(config, eff_argv).to_args()
        if config.echo or config.dry_run:
            print(f"+ {construct_command(cmd)}", file=sys.stderr)
        if config.dry_run:
            return 0
        status = run(cmd, config.exec_mode)
    except LauncherError as ex:
        print(f"ERROR: {ex}", file=sys.stderr)
        return 2
    return exit_code(status, config.exec_mode)


if __name__ == "__main__":
    raise SystemExit(main())
