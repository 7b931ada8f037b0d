"""Helper utilities for request handlers.

Functions:
    json_response(status_code, body, headers=None) -> HttpResponse
        Build a JSON response dictionary
    guarantee_500_response(func) -> Callable
        Decorator: Turn unexpected handler exceptions into a 500 response

Example:
    >>> from linkshortener.utils.helpers import json_response
    >>> json_response(200, {'abc123': 'https://example.com'})
    {'statusCode': 200, 'headers': {'Content-Type': 'application/json'}, 'body': '{"abc123": "https://example.com"}'}
"""

import json
import logging
import functools
from typing import Any
from collections.abc import Callable

from linkshortener.types import HttpHeaders, HttpResponse
from linkshortener.constants import UNKNOWN_INTERNAL_SERVER_ERROR
from linkshortener.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def json_response(status_code: int, body: Any, headers: HttpHeaders | None = None) -> HttpResponse:
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json', **(headers or {})},
        'body': json.dumps(body),
    }


def guarantee_500_response(func: Callable) -> Callable:
    """Decorator ensuring a request handler always produces a response.

    Any exception escaping the handler is logged and converted into a
    500 JSON response carrying an `error_code`. When running locally the
    exception is re-raised instead, so tracebacks reach the developer.

    Example:
        >>> @guarantee_500_response
        ... def handler(event):
        ...     raise RuntimeError('boom')
        >>> handler({})['statusCode']
        500
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> HttpResponse:
        try:
            return func(*args, **kwargs)
        except Exception:
            if running_locally():
                raise
            logger.exception('Unhandled error in request handler. Responding with 500.')
            return json_response(
                500,
                {
                    'success': False,
                    'message': 'Internal Server Error',
                    'error_code': UNKNOWN_INTERNAL_SERVER_ERROR,
                },
            )

    return wrapper
