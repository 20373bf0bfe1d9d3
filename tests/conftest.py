from __future__ import annotations

import pytest

from tests.helpers import build_issue_item, build_issue_payload


@pytest.fixture
def issue_payload():
    return build_issue_payload


@pytest.fixture
def issue_item():
    return build_issue_item
