# src/taskdesk/ui/toast.py

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from typing import TextIO

from ..core.ports import ToastVariant

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ToastVariant.SUCCESS: logging.INFO,
    ToastVariant.INFO: logging.INFO,
    ToastVariant.WARNING: logging.WARNING,
    ToastVariant.ERROR: logging.ERROR,
}


@dataclass(frozen=True, slots=True)
class Toast:
    title: str
    message: str
    variant: ToastVariant

    def render(self) -> str:
        return f"[{self.variant.value.upper()}] {self.title}: {self.message}"


class LoggingToastNotifier:
    """Headless notifier: toasts become log records."""

    def notify(self, title: str, message: str, variant: ToastVariant) -> None:
        toast = Toast(title, message, ToastVariant(variant))
        logger.log(_LOG_LEVELS[toast.variant], "%s", toast.render())


class ConsoleToastNotifier:
    """Prints toasts as timestamped lines (console front end)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def notify(self, title: str, message: str, variant: ToastVariant) -> None:
        toast = Toast(title, message, ToastVariant(variant))
        ts = datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")
        print(f"[{ts}] {toast.render()}", file=self._stream or sys.stdout, flush=True)
        logger.debug("Toast shown: %s", toast.render())
