"""Where: src/mbsearch/platform/logging/handlers.py
What: Rich console handler that renders structured search events.
Why: Keep presentation of request/response telemetry out of the client code.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class SearchEventRichHandler(RichHandler):
    """Rich handler with dedicated styling for ``search.*`` log events."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "search.request": ("🔎", "cyan"),
        "search.response": ("✅", "green"),
        "search.error": ("⛔", "red"),
    }
    _URL_LIMIT: ClassVar[int] = 96

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    @classmethod
    def _shorten_url(cls, url: str) -> str:
        """Trim long request URLs, keeping the head where host and endpoint live."""

        if len(url) <= cls._URL_LIMIT:
            return url
        return url[: cls._URL_LIMIT - 1] + "…"

    def _render_search_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured search events, or ``None`` for ordinary records."""

        event = getattr(record, "search_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        endpoint = getattr(record, "endpoint", None)

        if event == "search.request":
            _ = body.append("GET ")
            url = getattr(record, "url", None)
            _ = body.append(self._shorten_url(str(url)) if url else str(endpoint or "?"))
        elif event == "search.response":
            _ = body.append(f"{endpoint or '?'}")
            metrics: list[str] = []
            status = getattr(record, "status", None)
            if isinstance(status, int):
                metrics.append(f"status={status}")
            entries = getattr(record, "entries", None)
            if isinstance(entries, int):
                metrics.append(f"entries={entries}")
            duration_ms = getattr(record, "duration_ms", None)
            if isinstance(duration_ms, (int, float)):
                metrics.append(f"{duration_ms:.2f} ms")
            if metrics:
                _ = body.append(" [" + ", ".join(metrics) + "]")
        else:
            _ = body.append(f"{endpoint or '?'} failed")
            error_message = getattr(record, "error_message", None)
            if error_message:
                _ = body.append(f" ({error_message})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        search_text = self._render_search_message(record)
        if search_text is not None:
            return search_text
        return super().render_message(record, message)


__all__ = ["SearchEventRichHandler"]
