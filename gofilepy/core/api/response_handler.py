"""Response handler for gofile API envelopes."""
import json
from typing import Any, Optional, Type

from ..exceptions import GofileError

STATUS_OK = 'ok'


class ResponseHandler:
    """Handles `{status, data}` envelopes returned by the broker and workers."""

    @staticmethod
    def parse_response(response_text: str) -> Any:
        """Parses a JSON response, falling back to the raw text."""
        try:
            return json.loads(response_text)
        except json.JSONDecodeError:
            return response_text

    @staticmethod
    def is_ok(envelope: Any) -> bool:
        """Checks the status field of an envelope."""
        return isinstance(envelope, dict) and envelope.get('status') == STATUS_OK

    @staticmethod
    def handle_error(
        envelope: Any,
        error_cls: Type[GofileError],
        message: str
    ) -> Optional[GofileError]:
        """Builds the error for a non-success envelope, None on success."""
        if ResponseHandler.is_ok(envelope):
            return None
        return error_cls(f"{message}: {ResponseHandler.describe(envelope)}", detail=envelope)

    @staticmethod
    def process_response(
        envelope: Any,
        error_cls: Type[GofileError],
        message: str
    ) -> Any:
        """Returns the envelope's data or raises error_cls."""
        error = ResponseHandler.handle_error(envelope, error_cls, message)
        if error:
            raise error
        return envelope.get('data')

    @staticmethod
    def describe(envelope: Any) -> str:
        """Compact text form of a response for error messages."""
        if isinstance(envelope, str):
            return envelope[:300]
        try:
            return json.dumps(envelope)[:300]
        except (TypeError, ValueError):
            return repr(envelope)[:300]
