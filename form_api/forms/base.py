"""Base form abstraction.

A form owns a ``data`` container that is serialized and sent to the client,
and an optional completion callback invoked once the client's response has
been processed.
"""

import copy
from collections.abc import Callable
from typing import Any


class FormValidationError(Exception):
    """Raised when a client response does not match the form."""

    pass


FormCallback = Callable[[Any, Any], None]


class Form:
    """Base class for forms sent to a client.

    Subclasses populate ``self.data`` and implement ``process_data`` to turn
    the raw client response into the value handed to the callback.
    """

    def __init__(self, callback: FormCallback | None = None) -> None:
        """Initialize the form.

        Args:
            callback: Called as ``callback(player, data)`` with the processed
                response. May be None for forms nobody waits on.
        """
        self.data: dict[str, Any] = {}
        self._callback = callback

    def get_callable(self) -> FormCallback | None:
        return self._callback

    def set_callable(self, callback: FormCallback | None) -> None:
        self._callback = callback

    def json_serialize(self) -> dict[str, Any]:
        """Return the JSON-compatible payload sent to the client."""
        return copy.deepcopy(self.data)

    def process_data(self, data: Any) -> Any:
        """Validate and transform the raw client response.

        Raises:
            FormValidationError: If the response does not match the form.
        """
        raise NotImplementedError

    def handle_response(self, player: Any, data: Any) -> None:
        """Process a client response and pass the result to the callback.

        Args:
            player: Opaque handle of whoever submitted the response.
            data: Raw response as received from the client.

        Raises:
            FormValidationError: If the response is invalid. The callback is
                not invoked in that case.
        """
        processed = self.process_data(data)
        if self._callback is not None:
            self._callback(player, processed)
