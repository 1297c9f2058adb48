"""Display management for CLI interface."""

from dbrestore.ui.cli.display.operator_io import RichOperatorIO
from dbrestore.ui.cli.display.providers import ProvidersDisplay
from dbrestore.ui.cli.display.restore_result import RestoreResultDisplay

__all__ = ["ProvidersDisplay", "RestoreResultDisplay", "RichOperatorIO"]
