import pytest

from winefeed.settings import FeedConfig


@pytest.fixture
def config(tmp_path):
    return FeedConfig(
        access_token="test-token",
        location_id="LOC1",
        output_file=tmp_path / "winesearcher-feed.txt",
    )
