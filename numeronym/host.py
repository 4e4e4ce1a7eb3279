"""Host-side wiring that feeds input changes into the generator.

The generator never reads input or writes output itself. A host supplies the
current text on every change event and receives a `Conversion` through an
injected display callback.
"""

from __future__ import annotations

from typing import Callable, Iterable

from .generator import generate, split_words
from .models.datatypes import Conversion, NumeronymOptions
from .telemetry.logger import RunLogger

DisplayCallback = Callable[[Conversion], None]


class LiveConverter:
    """Convert text on each input-change event and forward results to a display."""

    def __init__(
        self,
        display: DisplayCallback,
        options: NumeronymOptions | None = None,
        run_logger: RunLogger | None = None,
        stage: str = "generate",
    ) -> None:
        """Store injected collaborators; no per-input state is retained.

        Args:
            stage: Command stage name attached to per-event log lines.
        """

        self._display = display
        self._options = options or NumeronymOptions()
        self._run_logger = run_logger
        self._stage = stage

    @property
    def options(self) -> NumeronymOptions:
        """Return the rule options applied to every event."""

        return self._options

    def on_change(self, text: str) -> Conversion:
        """Handle one input-change event synchronously."""

        conversion = Conversion(
            source=text,
            result=generate(text, self._options),
            word_count=len(split_words(text, self._options)),
        )
        if self._run_logger is not None:
            self._run_logger.log_conversion(
                self._stage, conversion.word_count, len(conversion.result)
            )
        self._display(conversion)
        return conversion

    def feed(self, values: Iterable[str]) -> int:
        """Handle each value as a separate change event, in order."""

        handled = 0
        for value in values:
            self.on_change(value)
            handled += 1
        return handled
