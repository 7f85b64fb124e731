"""Demo Textual application."""

from .demo_app import TypeaheadDemoApp

__all__ = ["TypeaheadDemoApp"]
