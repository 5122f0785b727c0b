import os
import re
import subprocess
import tempfile
import types
import unittest.mock
from collections.abc import Iterator
from contextlib import ExitStack, contextmanager
from pathlib import Path

LOG_LINE_RE = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} \[(INFO|ERROR)\] .+$")


def read_log_lines(path: Path) -> list[str]:
    if not path.exists():
        return []
    return path.read_text(encoding="utf-8").splitlines()


@contextmanager
def bioctl_env(
    *,
    root: bool = True,
    tools: tuple[str, ...] = ("mdadm", "cryptsetup"),
    returncode: int = 0,
    extra_env: dict[str, str] | None = None,
) -> Iterator[types.SimpleNamespace]:
    """Run bioctl against a temp log file with privilege, PATH and subprocess mocked.

    *tools* lists the executable names ``shutil.which`` resolves. Yields a
    namespace with: log_file, run (the ``subprocess.run`` mock), which.
    """
    with tempfile.TemporaryDirectory() as td:
        log_file = Path(td) / "bioctl.log"
        env_vars = {"BIOCTL_LOG_FILE": str(log_file)}
        if extra_env:
            env_vars.update(extra_env)

        def which_side_effect(name: str):
            return f"/usr/sbin/{name}" if name in tools else None

        with ExitStack() as stack:
            stack.enter_context(unittest.mock.patch.dict(os.environ, env_vars))
            for var in ("BIOCTL_RAID_TOOL", "BIOCTL_CRYPT_TOOL", "FORCE_COLOR", "NO_COLOR"):
                if var not in env_vars:
                    os.environ.pop(var, None)
            stack.enter_context(
                unittest.mock.patch(
                    "bioctl.lib.core.privilege.os.geteuid", return_value=0 if root else 1000
                )
            )
            which = stack.enter_context(
                unittest.mock.patch(
                    "bioctl.lib.core.tools.shutil.which", side_effect=which_side_effect
                )
            )
            run = stack.enter_context(
                unittest.mock.patch("bioctl.lib.core.tools.subprocess.run")
            )
            run.side_effect = lambda argv, **kwargs: subprocess.CompletedProcess(
                args=argv, returncode=returncode
            )
            yield types.SimpleNamespace(log_file=log_file, run=run, which=which)
