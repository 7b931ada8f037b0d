from dataclasses import FrozenInstanceError

import pytest

from linkshortener.models import Result, ShortURLModel
from linkshortener.dao.exceptions import CodeConflictError, InvalidInputError


def test_short_url_model_is_frozen():
    short_url = ShortURLModel(target='https://example.com', shortcode='abc123')

    with pytest.raises(FrozenInstanceError):
        short_url.target = 'https://evil.example.com'


def test_result_ok():
    assert Result(value='abc123').ok
    assert Result(value=None).ok
    assert not Result(error=CodeConflictError('taken')).ok


@pytest.mark.parametrize(
    'result, expected',
    [
        (Result(value='abc123'), 'created abc123'),
        (Result(value=None), 'created None'),
        (Result(error=InvalidInputError('URL is required.')), 'client error'),
        (Result(error=CodeConflictError('taken')), 'client error'),
    ],
)
def test_result_pattern_matching(result, expected):
    match result:
        case Result(ok=True, value=shortcode):
            outcome = f'created {shortcode}'
        case Result(error=InvalidInputError() | CodeConflictError()):
            outcome = 'client error'
        case _:
            outcome = 'server error'

    assert outcome == expected
