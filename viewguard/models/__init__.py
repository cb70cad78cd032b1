"""Viewguard data models — Pydantic v2, frozen."""

from viewguard.models.reports import DemoReport

__all__ = ["DemoReport"]
