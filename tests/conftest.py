import logging

import pytest

from uri_template_matcher.log import LOGGER_NAME

BASE_WITH_SLASH = "http://www.base.address.com/app/"
BASE_WITHOUT_SLASH = "http://www.base.address.com/app"


@pytest.fixture(params=[BASE_WITHOUT_SLASH, BASE_WITH_SLASH])
def base_address(request):
    """Base address with and without trailing slash."""
    return request.param


@pytest.fixture
def package_logger():
    """Package logger, restored after the test."""
    log = logging.getLogger(LOGGER_NAME)
    handlers = list(log.handlers)
    level = log.level
    propagate = log.propagate
    yield log
    for handler in list(log.handlers):
        if handler not in handlers:
            log.removeHandler(handler)
    log.setLevel(level)
    log.propagate = propagate
