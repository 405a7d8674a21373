"""
Shared test fixtures for formatbridge tests.

Sample inputs are defined here once and handed out as fixtures so
unit and integration tests exercise the same documents.
"""

import pytest

# ---------------------------------------------------------------------------
# Sample inputs
# ---------------------------------------------------------------------------

MULTI_DOC_YAML = """\
---
company: spacelift
domain:
  - devops
  - devsecops
tutorial:
  - name: yaml
  - type: awesome
author: omkarbirade
published: true
---
doe: "a deer, a female deer"
pi: 3.14159
xmas: true
french-hens: 3
calling-birds:
  - huey
  - dewey
xmas-fifth-day:
  calling-birds: four
  french-hens: 3
  partridges:
    count: 1
    location: "a pear tree"
  turtle-doves: two
"""

ALBUMS_CSV = """\
album, year, US_peak_chart_post
The White Stripes, 1999, -
White Blood Cells, 2001, 61
Elephant, 2003, 6
"""

APP_INI = """\
# Sample INI file for configuration

[general]
app_name = MyApp
version = 1.2.3
is_active = true

[database]
host = localhost
port = 5432
"""


@pytest.fixture()
def multi_doc_yaml() -> str:
    return MULTI_DOC_YAML


@pytest.fixture()
def albums_csv() -> str:
    return ALBUMS_CSV


@pytest.fixture()
def app_ini() -> str:
    return APP_INI


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs end-to-end conversions)",
    )
