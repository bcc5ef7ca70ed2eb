"""Unit tests for DirectoryListing view state."""

import httpx
import pytest

from schooldir.domain.services.directory_listing import PLACEHOLDER_COUNT, DirectoryListing


def test_placeholder_count_is_fixed():
    assert PLACEHOLDER_COUNT == 6


class TestLoad:

    @pytest.mark.asyncio
    async def test_load_populates_schools(self, directory_client):
        listing = DirectoryListing()
        await listing.load(directory_client)

        assert [s.id for s in listing.schools] == [1, 2, 3]
        assert listing.error == ""
        assert listing.loading is False

    @pytest.mark.asyncio
    async def test_load_failure_sets_error(self, directory, directory_client):
        directory.list_response = httpx.Response(500, json={"error": "Database unavailable"})
        listing = DirectoryListing()

        await listing.load(directory_client)

        assert listing.error == "Database unavailable"
        assert listing.schools == []
        assert listing.loading is False

    @pytest.mark.asyncio
    async def test_load_network_error(self, directory, directory_client):
        directory.network_down = True
        listing = DirectoryListing()

        await listing.load(directory_client)

        assert listing.error == "Network error: could not reach the school directory"

    @pytest.mark.asyncio
    async def test_retry_clears_previous_error(self, directory, directory_client):
        directory.list_response = httpx.Response(503)
        listing = DirectoryListing()
        await listing.load(directory_client)
        assert listing.error == "Failed to fetch schools"

        directory.list_response = None
        await listing.load(directory_client)
        assert listing.error == ""
        assert len(listing.schools) == 3
        assert directory.calls_to("GET", "/api/schools") == 2


class TestDerivedState:

    @pytest.mark.asyncio
    async def test_state_filter_and_summary(self, directory_client):
        listing = DirectoryListing(state="Illinois")
        await listing.load(directory_client)

        assert [s.id for s in listing.filtered] == [1, 3]
        assert listing.summary == "Showing 2 of 3 schools"
        assert listing.state_options == ["Illinois", "Oregon"]

    @pytest.mark.asyncio
    async def test_filter_recomputes_on_change(self, directory_client):
        listing = DirectoryListing()
        await listing.load(directory_client)
        assert len(listing.filtered) == 3

        listing.search = "spring"
        assert [s.id for s in listing.filtered] == [1, 2]

        listing.state = "Oregon"
        assert [s.id for s in listing.filtered] == [2]
        assert len(listing.schools) == 3

    @pytest.mark.asyncio
    async def test_empty_reason_no_matches(self, directory_client):
        listing = DirectoryListing(search="nowhere")
        await listing.load(directory_client)

        assert listing.filtered == []
        assert listing.empty_reason == "no_matches"

    @pytest.mark.asyncio
    async def test_empty_reason_no_schools(self, directory, directory_client):
        directory.schools = []
        listing = DirectoryListing()
        await listing.load(directory_client)

        assert listing.empty_reason == "no_schools"
        assert listing.summary == "Showing 0 of 0 schools"

    def test_empty_reason_none_with_results(self):
        from schooldir.domain.entities.school import School

        school = School(1, "Oakwood", "42 Oakwood Avenue", "Springfield", "Oregon", "5550002222", "a@b.com")
        listing = DirectoryListing(schools=[school])
        assert listing.empty_reason is None
        assert listing.summary == "Showing 1 of 1 school"

    def test_has_filters_ignores_blank_search(self):
        assert DirectoryListing(search="  ").has_filters is False
        assert DirectoryListing(state="Oregon").has_filters is True
