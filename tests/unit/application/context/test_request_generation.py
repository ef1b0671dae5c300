"""Tests for request generation tokens."""

from fintrend.application.context.request_generation import (
    RequestGenerationCounter,
    RequestToken,
)


class TestRequestGenerationCounter:
    def test_starts_at_zero(self):
        assert RequestGenerationCounter().generation == 0

    def test_begin_bumps_generation(self):
        counter = RequestGenerationCounter()

        first = counter.begin()
        second = counter.begin()

        assert first == RequestToken(generation=1)
        assert second.generation == 2
        assert counter.generation == 2

    def test_only_latest_token_is_current(self):
        counter = RequestGenerationCounter()
        old = counter.begin()
        new = counter.begin()

        assert not counter.is_current(old)
        assert counter.is_current(new)

    def test_token_str(self):
        assert str(RequestToken(generation=3)) == "RequestToken(#3)"
