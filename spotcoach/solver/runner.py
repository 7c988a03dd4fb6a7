"""Invocation of the external console solver."""

import logging
import subprocess
from pathlib import Path

from .job import SolverConfig, build_job_content

logger = logging.getLogger(__name__)


class SolverError(RuntimeError):
    """The console solver could not produce a strategy dump."""


class SolverRunner:
    """
    Runs one solve job and leaves the dump at ``config.output_path``.

    The solver binary is opaque to us: we write its command script, run
    it to completion and check that a dump appeared.
    """

    def __init__(self, config: SolverConfig):
        self.config = config

    def write_job_file(self, board: str, hero_hand: str) -> Path:
        """Write the command script, creating parent directories."""
        job_path = Path(self.config.job_path)
        job_path.parent.mkdir(parents=True, exist_ok=True)
        job_path.write_text(
            build_job_content(board, hero_hand, self.config),
            encoding="utf-8",
        )
        logger.debug("Job file written to %s", job_path)
        return job_path

    def command(self, job_path: Path) -> list[str]:
        return [
            str(self.config.solver_path),
            "--input_file", str(job_path),
            "-r", str(self.config.resource_dir),
            "-m", "holdem",
        ]

    def run(self, board: str, hero_hand: str) -> Path:
        """
        Solve a board for a hero hand.

        Args:
            board: Comma-separated board like 'Qs,Jh,2h'
            hero_hand: Hero hand key like 'AhKd'

        Returns:
            Path of the JSON strategy dump

        Raises:
            SolverError: If the solver cannot be started, exits with a
                non-zero status or writes no dump
        """
        output_path = Path(self.config.output_path)
        if output_path.exists():
            output_path.unlink()

        job_path = self.write_job_file(board, hero_hand)
        cmd = self.command(job_path)
        logger.info("Running console solver for board %s", board)
        logger.debug("Command: %s", " ".join(cmd))

        try:
            result = subprocess.run(cmd, check=False)
        except OSError as e:
            raise SolverError(f"could not start {cmd[0]}: {e}") from e

        if result.returncode != 0:
            raise SolverError(
                f"console_solver exited with non-zero status: {result.returncode}"
            )

        if not output_path.exists():
            raise SolverError(f"expected output JSON not found at {output_path}")

        return output_path
