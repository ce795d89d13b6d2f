import logging
import os
import sys
from typing import Any, Dict

import pytest

# Add the helpers to the PYTHONPATH.
# Note: mark the "helpers" directory as a source directory to tell PyCharm
# about this trick and avoid IDE errors.
sys.path.append(os.path.join(os.path.dirname(__file__), "helpers"))


@pytest.fixture
def balance_response_dict() -> Dict[str, Any]:
    return {"amount": {"denom": "uatom", "amount": "12345"}}


@pytest.fixture
def all_balance_response_dict() -> Dict[str, Any]:
    return {
        "amount": [
            {"denom": "uatom", "amount": "12345"},
            {"denom": "ibc/27394FB092D2ECCD56123C74F36E4C1F926001CEADA9CA97EA622B25F41E5EB2", "amount": "1"},
        ]
    }


@pytest.fixture(autouse=True)
def restore_root_logger():
    """
    Some tests configure logging globally, put the root logger back in its
    original state afterwards.
    """
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level

    yield

    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)
