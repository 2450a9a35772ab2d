#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dompath/recording.py
"""Timestamped recording of user actions.

An ``ActionRecorder`` collects lines of the form ``"<epoch ms> <text>"``,
typically an action name followed by the locator of the node acted on.
Whether anything is recorded is decided by ``RecorderOptions.enabled`` on
each recorder, not by process-wide state.
"""

from __future__ import annotations

import logging
import time
from typing import IO, Any, Optional

from dompath.locator import get_xpath
from dompath.options import LocatorOptions, RecorderOptions

logger = logging.getLogger(__name__)


def get_time() -> int:
    """Return the current time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


class ActionRecorder:
    """Collect timestamped action lines.

    Parameters
    ----------
    options : RecorderOptions, optional
        Recorder settings. Recording is disabled unless ``enabled`` is set.
    stream : text stream, optional
        Stream each recorded line is also written to
    locator_options : LocatorOptions, optional
        Options used when recording nodes

    Examples
    --------
        >>> recorder = ActionRecorder(RecorderOptions(enabled=True))
        >>> line = recorder.record_line("page loaded")
        >>> line.endswith(" page loaded\\n")
        True

    """

    def __init__(
        self,
        options: Optional[RecorderOptions] = None,
        stream: Optional[IO[str]] = None,
        locator_options: Optional[LocatorOptions] = None,
    ) -> None:
        self.options = options or RecorderOptions()
        self.stream = stream
        self.locator_options = locator_options
        self.lines: list[str] = []

    @property
    def enabled(self) -> bool:
        return self.options.enabled

    def record_line(self, line: str) -> Optional[str]:
        """Record ``line`` with the current timestamp.

        Returns the formatted line, or None when recording is disabled.
        """
        if not self.enabled:
            return None

        entry = f"{get_time()} {line}\n"
        self.lines.append(entry)
        if self.stream is not None:
            self.stream.write(entry)
        logger.debug("Recorded: %s", line)
        return entry

    def record_node(self, action: str, node: Any) -> Optional[str]:
        """Record ``action`` together with the locator of ``node``."""
        if not self.enabled:
            return None
        return self.record_line(f"{action} {get_xpath(node, self.locator_options)}")

    def getvalue(self) -> str:
        """Return everything recorded so far."""
        return "".join(self.lines)

    def clear(self) -> None:
        self.lines.clear()


__all__ = ["ActionRecorder", "get_time"]
