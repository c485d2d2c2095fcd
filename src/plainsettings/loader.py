"""
Load orchestrator: settings source → parser → binder → registry.

Flow
----
1. Open the source. If it cannot be opened, a ``SOURCE_NOT_FOUND``
   diagnostic is produced and nothing else happens.
2. Stream lines through :func:`iter_entries` and :func:`bind` in file order,
   so a later line for the same key overwrites an earlier one.
3. Route every diagnostic through the policy:
   ``FATAL`` raises :class:`SettingsError` at once, ``ADVISORY`` logs a
   warning and moves on to the next line.

There is no rollback. Fields bound before a fatal abort keep their new values.
The source handle is closed on every exit path.

Example
-------
>>> loader = SettingsLoader(registry, "settings.txt", policy=MissingSettingPolicy.ADVISORY)
>>> report = loader.load()
>>> report.bound
['Width', 'Height']
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from plainsettings.core.binder import bind
from plainsettings.core.contracts.diagnostic import Diagnostic, DiagnosticKind
from plainsettings.core.contracts.report import LoadReport
from plainsettings.core.errors import MissingSettingPolicy, SettingsError
from plainsettings.core.parser import iter_entries
from plainsettings.core.registry import Registry
from plainsettings.core.settings import get_logger

SOURCE_ENCODING = "utf-8-sig"
SOURCE_ERRORS = "replace"


class SettingsLoader:
    """
    Bind a settings file into a registry with a fixed failure policy.

    Parameters
    ----------
    registry : Registry
        Declared fields; the only thing the loader writes to.
    path : str | os.PathLike[str]
        Settings source. Relative paths resolve against the working directory
        at the time :meth:`load` runs.
    policy : MissingSettingPolicy
        What to do with diagnostics (raise or log).
    trace : bool
        Log the source being read and every bound key with its value at INFO
        level. Comments and skipped lines are not logged.
    logger : logging.Logger | None
        Destination for warnings and trace lines; defaults to
        ``get_logger("plainsettings.loader")``.
    """

    def __init__(
        self,
        registry: Registry,
        path: str | os.PathLike[str],
        *,
        policy: MissingSettingPolicy = MissingSettingPolicy.FATAL,
        trace: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self.registry = registry
        self.path = Path(path)
        self.policy = policy
        self.trace = trace
        self.logger = logger or get_logger("plainsettings.loader")

    def load(self) -> LoadReport:
        """Read the source once and bind every recognized line."""
        report = LoadReport(source=str(self.path))
        if self.trace:
            self.logger.info("Reading settings from %s", self.path)

        try:
            handle = self.path.open(encoding=SOURCE_ENCODING, errors=SOURCE_ERRORS)
        except OSError:
            self._emit(
                report,
                Diagnostic(
                    kind=DiagnosticKind.SOURCE_NOT_FOUND,
                    detail=f"No settings file found: {self.path}",
                ),
            )
            return report

        report.found = True
        with handle:
            for parsed in iter_entries(handle):
                outcome = parsed.flat_map(lambda entry: bind(entry, self.registry))
                if outcome.is_err():
                    self._emit(report, outcome.unwrap_err())
                    continue
                binding = outcome.unwrap()
                report.bound.append(binding.key)
                if self.trace:
                    self.logger.info(
                        "%s argument: Key %s Value %r",
                        binding.kind.value,
                        binding.key,
                        binding.value,
                    )
        return report

    def _emit(self, report: LoadReport, diagnostic: Diagnostic) -> None:
        report.diagnostics.append(diagnostic)
        if self.policy is MissingSettingPolicy.FATAL:
            raise SettingsError(diagnostic)
        self.logger.warning("%s", diagnostic.render())


__all__ = ["SOURCE_ENCODING", "SOURCE_ERRORS", "SettingsLoader"]
