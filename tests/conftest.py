"""Shared pytest setup.

Property tests pin their own max_examples, so the Hypothesis profiles here
only decide reproducibility: "ci" derandomizes runs and prints failure blobs,
"dev" keeps random exploration. Pick one with HYPOTHESIS_PROFILE;
otherwise CI=true selects "ci".

Tests marked ``fuzz`` (long random walks) only run under ``pytest -m fuzz``.
"""

import os

import pytest
from hypothesis import settings

settings.register_profile("dev", derandomize=False)
settings.register_profile("ci", derandomize=True, print_blob=True)

_profile = os.environ.get("HYPOTHESIS_PROFILE")
if _profile not in ("dev", "ci"):
    _profile = "ci" if os.environ.get("CI") == "true" else "dev"
settings.load_profile(_profile)


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "fuzz: long-running random-walk property test")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
