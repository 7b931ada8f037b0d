"""Translate decoded HTTP intents into LinkStore calls and response payloads

The router holds no mapping logic of its own: it decodes the event,
invokes exactly one LinkStore operation and maps the tagged Result onto a
status code and JSON body.

HTTP responses:
    POST /shorten   {url, shortCode?}
        201: {success: true, shortCode}
        400: {success: false, message, error_code}  missing url / bad code / code conflict
        500: {success: false, message, error_code}  store errors
    GET /links
        200: {code: url, ...}
        500: {success: false, message, error_code}  store errors
    GET /<code>
        301: Location: <stored url>
        None: unknown code, left to the caller's generic 404 handling

Example:
    >>> router = RequestRouter(LinkStore(LinkTableFileDAO(path='data/links.json')))
    >>> response = router.dispatch({'httpMethod': 'POST', 'path': '/shorten', 'body': '{"url": "https://example.com"}'})
    >>> response['statusCode']
    201
"""

import json
import logging

from linkshortener.types import HttpEvent, HttpResponse
from linkshortener.models import Result
from linkshortener.store import LinkStore
from linkshortener.dao.exceptions import InvalidInputError, CodeConflictError
from linkshortener.utils.helpers import json_response, guarantee_500_response
from linkshortener.constants import (
    REQUEST_RECEIVED,
    LINK_CREATED,
    LINK_REJECTED,
    STORE_FAILURE,
    REDIRECT_SUCCESS,
    SHORT_URL_NOT_FOUND,
)


logger = logging.getLogger(__name__)


def response_201(shortcode: str) -> HttpResponse:
    return json_response(201, {'success': True, 'shortCode': shortcode})


def response_400(message: str, error_code: str | None = None) -> HttpResponse:
    body = {'success': False, 'message': message}
    if error_code:
        body['error_code'] = error_code
    return json_response(400, body)


def response_500(message: str = 'Server error.', error_code: str | None = None) -> HttpResponse:
    body = {'success': False, 'message': message}
    if error_code:
        body['error_code'] = error_code
    return json_response(500, body)


def response_301(*, location: str) -> HttpResponse:
    return {
        'statusCode': 301,
        'headers': {'Location': location},
        'body': '',
    }


class RequestRouter:
    """Stateless front of a LinkStore

    Attributes:
        store (LinkStore):
            The link store every intent is delegated to.

    Methods:
        create(event) -> HttpResponse:
            Handle POST /shorten.
        list_links(event) -> HttpResponse:
            Handle GET /links.
        resolve(event) -> HttpResponse | None:
            Handle GET /<code>. None when the code is unknown.
        dispatch(event) -> HttpResponse | None:
            Pick one of the above from the event's method and path.
    """

    def __init__(self, store: LinkStore):
        self.store = store

    @guarantee_500_response
    def create(self, event: HttpEvent) -> HttpResponse:
        try:
            request_body = json.loads(event.get('body') or '{}')
        except json.JSONDecodeError:
            logger.info('Invalid JSON body. Responding with 400.', extra={'event': LINK_REJECTED})
            return response_400('Bad Request (invalid JSON body)', error_code=InvalidInputError.error_code)
        if not isinstance(request_body, dict):
            return response_400('Bad Request (JSON body must be an object)', error_code=InvalidInputError.error_code)

        target_url = request_body.get('url')
        shortcode = request_body.get('shortCode')
        if target_url is not None and not isinstance(target_url, str):
            return response_400("Bad Request ('url' must be a string)", error_code=InvalidInputError.error_code)
        if shortcode is not None and not isinstance(shortcode, str):
            return response_400("Bad Request ('shortCode' must be a string)", error_code=InvalidInputError.error_code)

        match self.store.create_link(target_url or '', shortcode or None):
            case Result(ok=True, value=assigned):
                logger.info(
                    'Created short link. Responding with 201.',
                    extra={'shortcode': assigned, 'target_url': target_url, 'event': LINK_CREATED},
                )
                return response_201(assigned)
            case Result(error=InvalidInputError() | CodeConflictError() as error):
                logger.info(
                    'Rejected short link. Responding with 400.',
                    extra={'shortcode': shortcode, 'reason': str(error), 'event': LINK_REJECTED},
                )
                return response_400(str(error), error_code=error.error_code)
            case Result(error=error):
                logger.error(
                    'Link store failure while creating short link. Responding with 500.',
                    extra={'reason': str(error), 'error_code': error.error_code, 'event': STORE_FAILURE},
                )
                return response_500(error_code=error.error_code)

    @guarantee_500_response
    def list_links(self, event: HttpEvent) -> HttpResponse:
        match self.store.list_links():
            case Result(ok=True, value=links):
                return json_response(200, dict(links))
            case Result(error=error):
                logger.error(
                    'Link store failure while listing links. Responding with 500.',
                    extra={'reason': str(error), 'error_code': error.error_code, 'event': STORE_FAILURE},
                )
                return response_500(error_code=error.error_code)

    @guarantee_500_response
    def resolve(self, event: HttpEvent) -> HttpResponse | None:
        shortcode = (event.get('pathParameters') or {}).get('shortcode')
        if not shortcode:
            return None

        match self.store.resolve(shortcode):
            case Result(ok=True, value=None):
                logger.info('Short code not found.', extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND})
                return None
            case Result(ok=True, value=target_url):
                logger.info(
                    'Redirecting client to target URL. Responding with 301.',
                    extra={'shortcode': shortcode, 'target_url': target_url, 'event': REDIRECT_SUCCESS},
                )
                return response_301(location=target_url)
            case Result(error=error):
                logger.error(
                    'Link store failure while resolving short code. Responding with 500.',
                    extra={'shortcode': shortcode, 'reason': str(error), 'error_code': error.error_code, 'event': STORE_FAILURE},
                )
                return response_500(error_code=error.error_code)

    def dispatch(self, event: HttpEvent) -> HttpResponse | None:
        """Route an event to its intent handler

        Args:
            event (dict):
                Decoded request with 'httpMethod', 'path' and optionally 'body'.

        Returns:
            HttpResponse | None:
                The handler's response, or None when no intent matches (the
                caller answers with its own 404).
        """
        method = (event.get('httpMethod') or '').upper()
        path = event.get('path') or '/'
        logger.info('Request: %s %s', method, path, extra={'event': REQUEST_RECEIVED})

        if method == 'POST' and path == '/shorten':
            return self.create(event)
        if method == 'GET' and path == '/links':
            return self.list_links(event)
        if method == 'GET' and path.count('/') == 1 and len(path) > 1:
            return self.resolve({**event, 'pathParameters': {'shortcode': path[1:]}})
        return None
