from datetime import datetime, timezone

import pytest
from pydantic import BaseModel

from chronopage import (
    NotTimestamped,
    PaginationRequest,
    get_by_timestamp_pagination,
    timestamp_of,
)
from chronopage.utils.settings import SettingsResolver
from conftest import Mew


class Post(BaseModel):
    title: str
    published_at: datetime

    class Settings:
        timestamp_field = "published_at"


class Reading:
    def __init__(self, value: float, taken: int) -> None:
        self.value = value
        self.taken = taken

    class Settings:
        timestamp_field = "taken"


class TestSettingsResolver:
    def test_timestamp_field_from_settings(self):
        assert SettingsResolver.get_timestamp_field(Post) == "published_at"

    def test_no_settings(self):
        assert SettingsResolver.get_timestamp_field(Mew) is None


class TestTimestampOf:
    def test_uses_accessor(self):
        assert timestamp_of(Mew("a", 12)) == 12

    def test_uses_configured_field(self):
        assert timestamp_of(Reading(1.5, 300)) == 300

    def test_converts_datetime_field(self):
        post = Post(title="hi", published_at=datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc))
        assert timestamp_of(post) == 1_000_000

    def test_missing_timestamp_raises(self):
        with pytest.raises(NotTimestamped):
            timestamp_of(object())

    def test_not_timestamped_is_type_error(self):
        with pytest.raises(TypeError):
            timestamp_of("plain string")


class TestConfiguredItems:
    def test_paginates_by_configured_field(self):
        posts = [
            Post(title="later", published_at=datetime(2024, 5, 2, tzinfo=timezone.utc)),
            Post(title="earlier", published_at=datetime(2024, 5, 1, tzinfo=timezone.utc)),
        ]
        result = get_by_timestamp_pagination(posts, PaginationRequest(limit=1))
        assert [p.title for p in result] == ["earlier"]

    def test_cursor_from_datetime(self):
        first = datetime(2024, 5, 1, tzinfo=timezone.utc)
        posts = [
            Post(title="later", published_at=datetime(2024, 5, 2, tzinfo=timezone.utc)),
            Post(title="earlier", published_at=first),
        ]
        result = get_by_timestamp_pagination(posts, PaginationRequest(after_timestamp=first, limit=5))
        assert [p.title for p in result] == ["later"]
