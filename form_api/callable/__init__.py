"""Callable protocol for form-api."""

from form_api.callable.execute import execute
from form_api.callable.result import CallableResult

__all__ = ["CallableResult", "execute"]
