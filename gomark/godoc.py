"""Invocation of ``go doc -all`` for a package path."""

import logging
import subprocess

from .utils.config import GoDocConfig
from .utils.errors import GoDocError

logger = logging.getLogger(__name__)


def get_go_doc(package_path: str = ".", config: GoDocConfig | None = None) -> str:
    """Run ``go doc -all`` and return its output.

    Args:
        package_path: Package directory or import path
        config: Optional go binary and timeout settings

    Returns:
        The combined stdout/stderr text of the command

    Raises:
        GoDocError: If go is missing, times out or exits non-zero
    """
    config = config or GoDocConfig()
    command = [config.go_binary, "doc", "-all", package_path]
    logger.debug("Running %s", " ".join(command))

    try:
        completed = subprocess.run(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            timeout=config.timeout,
            check=False,
        )
    except FileNotFoundError as exc:
        raise GoDocError(
            f"Cannot run {config.go_binary!r}: {exc}",
            recovery_hint="Install Go or set godoc.go_binary in the config file",
        ) from exc
    except subprocess.TimeoutExpired as exc:
        raise GoDocError(
            f"go doc exceeded {config.timeout}s for {package_path}"
        ) from exc

    output = completed.stdout or ""
    if completed.returncode != 0:
        raise GoDocError('error while running "go doc":\n' + output, output=output)
    return output
