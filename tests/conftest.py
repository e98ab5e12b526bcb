import json

import pytest


@pytest.fixture
def video_item():
    def _make(views="100", likes="5", comments="1", title="Sample video"):
        return {
            "kind": "youtube#video",
            "id": "dQw4w9WgXcQ",
            "snippet": {"title": title},
            "statistics": {
                "viewCount": views,
                "likeCount": likes,
                "commentCount": comments,
            },
        }
    return _make


@pytest.fixture
def env(monkeypatch, tmp_path):
    data_file = tmp_path / "data" / "views.json"
    monkeypatch.setenv("YT_API_KEY", "test-key")
    monkeypatch.setenv("VIDEO_ID", "dQw4w9WgXcQ")
    monkeypatch.setenv("DATA_FILE", str(data_file))
    return data_file


def read_json(path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)
