"""Flask transport adapter around RequestRouter

Every request, whatever its path, is decoded into an event dictionary and
handed to RequestRouter.dispatch(). The router's response dictionary is
written back as-is; a None result becomes the generic 404 response.

Example:
    >>> app = create_app(router)
    >>> app.run(port=3002, threaded=True)
"""

import flask

from linkshortener.types import HttpEvent, HttpResponse
from linkshortener.router import RequestRouter


def to_event(request: flask.Request) -> HttpEvent:
    return {
        'httpMethod': request.method,
        'path': request.path,
        'headers': dict(request.headers),
        'body': request.get_data(as_text=True),
    }


def to_flask_response(response: HttpResponse | None) -> flask.Response:
    if response is None:
        return flask.Response('404 Not Found', status=404, content_type='text/plain')

    return flask.Response(
        response.get('body') or '',
        status=response['statusCode'],
        headers=response.get('headers') or {},
    )


def create_app(router: RequestRouter) -> flask.Flask:
    site = flask.Flask('linkshortener')

    @site.route('/', defaults={'path': ''}, methods=['GET', 'POST'])
    @site.route('/<path:path>', methods=['GET', 'POST'])
    def handle(path: str) -> flask.Response:
        return to_flask_response(router.dispatch(to_event(flask.request)))

    return site
