"""Produce the textual public interface of a source tree.

Runs the configured build command in a directory, then reads the single
interface file it leaves behind. The command is a black box: anything that
writes a line-oriented API dump (``.swiftinterface``, ``.api``, ``.pyi``
stubs concatenated by a script, ...) works.
"""

from __future__ import annotations

import os
import shutil
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path

import structlog

from apibump.config.models import BuildConfig
from apibump.core.errors import BuildError

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Interface dump produced by one build."""

    workdir: Path
    interface_path: Path
    text: str
    duration_seconds: float = 0.0
    command: tuple[str, ...] = ()


class InterfaceBuilder:
    """Builds one directory and returns its interface dump."""

    def __init__(self, config: BuildConfig) -> None:
        self._config = config

    def build(self, workdir: Path) -> BuildResult:
        """Clean, build and read the interface under ``workdir``.

        Raises:
            BuildError: build failure, timeout, missing executable, or not
                exactly one interface file after the build.
        """
        workdir = workdir.resolve()
        start = time.perf_counter()

        self._clean(workdir)
        if self._config.command:
            self._run(workdir)
        else:
            logger.debug("build_skipped", workdir=str(workdir), reason="no command configured")

        interface_path = self.find_interface(workdir)
        text = interface_path.read_text(encoding="utf-8", errors="surrogateescape")
        elapsed = time.perf_counter() - start
        logger.info(
            "interface_built",
            workdir=str(workdir),
            interface=str(interface_path.relative_to(workdir)),
            elapsed_s=round(elapsed, 3),
        )
        return BuildResult(
            workdir=workdir,
            interface_path=interface_path,
            text=text,
            duration_seconds=elapsed,
            command=tuple(self._config.command),
        )

    def find_interface(self, workdir: Path) -> Path:
        """Return the single file matching ``interface_glob`` under ``workdir``."""
        pattern = self._config.interface_glob
        matches = sorted(p for p in workdir.glob(pattern) if p.is_file())
        if not matches:
            raise BuildError.interface_not_found(str(workdir), pattern)
        if len(matches) > 1:
            raise BuildError.ambiguous_interface(
                pattern, [str(p.relative_to(workdir)) for p in matches]
            )
        return matches[0]

    def _clean(self, workdir: Path) -> None:
        # Cached build products must not survive into the next dump
        for entry in self._config.clean_paths:
            target = workdir / entry
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            elif target.exists() or target.is_symlink():
                target.unlink()
            else:
                continue
            logger.debug("build_path_cleaned", path=str(target))

    def _run(self, workdir: Path) -> None:
        command = list(self._config.command)
        timeout = self._config.timeout_sec
        logger.debug("build_start", command=command, workdir=str(workdir), timeout_sec=timeout)
        try:
            result = subprocess.run(
                command,
                cwd=workdir,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
                timeout=timeout,
                env={**os.environ, **self._config.env},
            )
        except subprocess.TimeoutExpired as e:
            raise BuildError.timed_out(command, timeout) from e
        except (FileNotFoundError, PermissionError) as e:
            raise BuildError.command_not_found(command, e.strerror or str(e)) from e

        if result.returncode != 0:
            logger.error("build_failed", command=command, exit_code=result.returncode)
            raise BuildError.failed(command, result.returncode, result.stdout or "")
        logger.debug("build_done", command=command, output_chars=len(result.stdout or ""))
