"""
utils/errors.py

Exception types raised by the template engine.
"""


class TemplateError(Exception):
    """Base class for template engine failures."""


class TemplateLoadError(TemplateError):
    """The template bundle could not be compiled at startup. Fatal."""


class RenderError(TemplateError):
    """A template could not be found or failed while executing."""
