from __future__ import annotations

from typing import Dict

import pytest

from sleepscreen.core.answers import Question


@pytest.fixture
def all_no() -> Dict[str, str]:
    return {question.value: "no" for question in Question}


@pytest.fixture
def contact() -> Dict[str, str]:
    return {"full_name": "Jane Doe", "email": "jane@example.com", "phone": "5551234567"}
