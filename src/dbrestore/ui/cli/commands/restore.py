"""Restore command implementation for the CLI."""

from __future__ import annotations

from collections.abc import Callable
from typing import final

from dbrestore.application.services.restore_service import RestoreDatabaseService
from dbrestore.features.restoration import RestoreResult
from dbrestore.features.restoration.usecases.ports import OperatorIO
from dbrestore.ui.cli.args.options import RestoreArgs
from dbrestore.ui.cli.display.operator_io import RichOperatorIO
from dbrestore.ui.cli.display.restore_result import RestoreResultDisplay


@final
class RestoreCommand:
    """Command that resolves restore arguments and runs the restore."""

    def __init__(
        self,
        args: RestoreArgs,
        *,
        io: OperatorIO | None = None,
        service_factory: Callable[[OperatorIO], RestoreDatabaseService] | None = None,
        display: RestoreResultDisplay | None = None,
    ) -> None:
        self.args = args
        self.io = io or RichOperatorIO()
        self.service = (service_factory or RestoreDatabaseService)(self.io)
        self.display = display or RestoreResultDisplay()

    def execute(self) -> RestoreResult:
        """Execute the restore command."""

        request = self.service.resolve(self.args.to_parameters())
        result = self.service.run(request)
        self.display.show_success(result, quiet=self.args.quiet)
        return result
