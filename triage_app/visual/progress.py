"""Streamlit progress banner driven by TriageService progress callbacks."""

from __future__ import annotations

import streamlit as st


class ProgressReporter:
    """Info banner + progress bar; ``callback`` matches ``ProgressCallback``."""

    def __init__(self, title: str):
        self._container = st.container()
        self._container.info(title)
        self._message = self._container.empty()
        self._bar = self._container.progress(0.0)
        self._done = False

    def callback(self, message: str, current: int | None = None, total: int | None = None) -> None:
        if self._done:
            return
        if total:
            done = min(max(current or 0, 0), total)
            self._message.write(f"{message} ({done}/{total})")
            self._bar.progress(done / total)
        else:
            self._message.write(message)

    def complete(self, message: str) -> None:
        if self._done:
            return
        self._bar.progress(1.0)
        self._container.success(message)
        self._done = True

    def error(self, message: str) -> None:
        if self._done:
            return
        self._container.error(message)
        self._done = True
