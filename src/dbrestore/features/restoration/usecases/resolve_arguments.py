"""Resolve missing restore arguments by questioning the operator."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from logging import Logger, getLogger

from ..domain.errors import UnresolvedParameterError
from ..domain.models import Parameter, ParameterSet
from .ports import DatabaseCatalog, OperatorIO, StorageCatalog
from .prompts import PROMPT_STRATEGIES, PromptContext, PromptStrategy


class ArgumentResolver:
    """Fill unset parameters through prompts and have the operator confirm them.

    The set of missing parameters is captured once. When the operator rejects
    the summary, every parameter from that original set is asked again, even
    though each one now holds a provisional answer.
    """

    _context: PromptContext
    _strategies: Mapping[Parameter, PromptStrategy]
    _logger: Logger

    def __init__(
        self,
        *,
        storages: StorageCatalog,
        databases: DatabaseCatalog,
        io: OperatorIO,
        strategies: Mapping[Parameter, PromptStrategy] | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._context = PromptContext(storages=storages, databases=databases, io=io)
        self._strategies = strategies or PROMPT_STRATEGIES
        self._logger = logger or getLogger(__name__)

    @property
    def io(self) -> OperatorIO:
        return self._context.io

    def resolve(self, parameters: ParameterSet) -> ParameterSet:
        """Return ``parameters`` once every value is set and confirmed.

        Raises:
            UnresolvedParameterError: If a prompting pass leaves a parameter unset.
        """
        missing = parameters.missing()
        if not missing:
            self._logger.debug("All restore arguments supplied; skipping prompts")
            return parameters

        self._display_missing(missing)
        attempt = 1
        while True:
            self._logger.debug("Prompting for %s (attempt %d)", _names(missing), attempt)
            self._prompt(missing, parameters)

            unresolved = parameters.missing()
            if unresolved:
                raise UnresolvedParameterError(unresolved)

            if self._confirm(parameters):
                return parameters

            self.io.line()
            self.io.info("Asking the questions again.")
            self.io.line()
            attempt += 1

    def _display_missing(self, missing: Sequence[Parameter]) -> None:
        self.io.info("These arguments haven't been filled yet:")
        self.io.line(_names(missing))
        self.io.info("The following questions will fill these in for you.")
        self.io.line()

    def _prompt(self, missing: Sequence[Parameter], parameters: ParameterSet) -> None:
        for parameter in missing:
            self._strategies[parameter](self._context, parameters)
            self.io.line()

    def _confirm(self, parameters: ParameterSet) -> bool:
        self.io.info("You've filled in the following answers:")
        self.io.line(f"Source: {parameters.source}")
        self.io.line(f"Backup path: {parameters.source_path}")
        self.io.line(f"Database: {parameters.database}")
        self.io.line(f"Compression: {parameters.compression}")
        self.io.line()
        return self.io.confirm("Are these correct?")


def _names(parameters: Sequence[Parameter]) -> str:
    return ", ".join(parameter.value for parameter in parameters)


__all__ = ["ArgumentResolver"]
