import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--run-api", action="store_true", default=False, help="run tests that hit the YouTube API"
    )


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--run-api"):
        skip_api = pytest.mark.skip(reason="need --run-api option to run")
        for item in items:
            if item.get_closest_marker("api"):
                item.add_marker(skip_api)
