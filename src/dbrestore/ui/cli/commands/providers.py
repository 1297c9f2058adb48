"""List configured storage services and database connections."""

from __future__ import annotations

from collections.abc import Callable
from typing import final

from dbrestore.config.config import Config
from dbrestore.ui.cli.args.options import ProvidersArgs
from dbrestore.ui.cli.display.providers import ProvidersDisplay


@final
class ProvidersCommand:
    """Render the provider catalog in a Rich table."""

    def __init__(
        self,
        args: ProvidersArgs,
        *,
        config_factory: Callable[[], Config] | None = None,
        display: ProvidersDisplay | None = None,
    ) -> None:
        self._args = args
        self._config_factory = config_factory or Config.load
        self._display = display or ProvidersDisplay()

    def execute(self) -> None:
        self._display.show(self._config_factory())
