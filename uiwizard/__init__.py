"""UI Wizards: interactive frontend scaffolder and UI/UX design-prompt generator."""

__version__ = "1.0.0"
