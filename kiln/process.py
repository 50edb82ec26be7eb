"""External command execution (git, npm)."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

logger = logging.getLogger(__name__)


class ProcessRunner:
    """Runs a command to completion inside a working directory."""

    def run(self, command: Sequence[str], cwd: Path) -> bool:
        """
        Run ``command`` in ``cwd``.

        Returns:
            True when the command exited with status 0
        """
        logger.debug("Running %s in %s", " ".join(command), cwd)
        try:
            completed = subprocess.run(
                list(command),
                cwd=cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            logger.error("Could not start %s: %s", command[0], e)
            return False

        if completed.returncode != 0:
            logger.error(
                "%s exited with status %d: %s",
                " ".join(command),
                completed.returncode,
                completed.stderr.strip(),
            )
            return False
        return True
