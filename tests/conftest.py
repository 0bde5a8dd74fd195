"""
Pytest fixtures for nap schedule tests.
"""

import pytest
from datetime import date

from fastapi.testclient import TestClient

from nap_planner.main import app
from nap_planner.services.schedule_generator import ScheduleParameters

from helpers import SCHEDULE_DATE, make_params


@pytest.fixture
def schedule_date() -> date:
    return SCHEDULE_DATE


@pytest.fixture
def default_params() -> ScheduleParameters:
    """The planner's out-of-the-box parameters."""
    return make_params()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
