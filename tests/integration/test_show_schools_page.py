"""Integration tests for the school directory page and its results panel."""

import httpx
import pytest


def card_tags(html: str) -> list[str]:
    return [chunk.split(">", 1)[0] for chunk in html.split('<article class="school-card"')[1:]]


def card_id(tag: str) -> str:
    return tag.split('data-school-id="', 1)[1].split('"', 1)[0]


def card_ids(html: str) -> list[str]:
    return [card_id(tag) for tag in card_tags(html)]


def visible_card_ids(html: str) -> list[str]:
    return [card_id(tag) for tag in card_tags(html) if not tag.rstrip().endswith("hidden")]


def no_matches_hidden(html: str) -> bool:
    tag = html.split('data-empty-reason="no_matches"', 1)[1].split(">", 1)[0]
    return "hidden" in tag


class TestDirectoryPage:

    @pytest.mark.asyncio
    async def test_renders_placeholders_without_fetching(self, client, directory):
        response = await client.get("/showSchools")

        assert response.status_code == 200
        assert directory.calls == []

        page, _, _ = response.text.partition('<template id="directory-loading">')
        assert page.count("school-card is-placeholder") == 6
        assert 'data-testid="loading"' in page
        assert 'data-panel-url="/showSchools/panel"' in page
        assert 'class="nav-link is-active accent-purple"' in page

    @pytest.mark.asyncio
    async def test_panel_url_keeps_filters(self, client):
        response = await client.get("/showSchools", params={"q": "river", "state": "Illinois"})

        assert 'data-panel-url="/showSchools/panel?q=river&amp;state=Illinois"' in response.text

    @pytest.mark.asyncio
    async def test_ships_error_state_with_retry(self, client):
        html = (await client.get("/showSchools")).text

        _, _, error_template = html.partition('<template id="directory-error">')
        assert "Error Loading Schools" in error_template
        assert "Failed to fetch schools" in error_template
        assert "Try Again" in error_template
        assert "data-panel-link" in error_template


class TestDirectoryPanel:

    @pytest.mark.asyncio
    async def test_lists_all_schools(self, client, directory):
        response = await client.get("/showSchools/panel")

        assert response.status_code == 200
        assert directory.calls == [("GET", "/api/schools")]
        html = response.text
        assert visible_card_ids(html) == ["1", "2", "3"]
        assert "Showing 3 of 3 schools" in html
        assert 'data-total="3"' in html
        assert "is-placeholder" not in html
        assert no_matches_hidden(html)
        assert '<option value="Illinois">Illinois</option>' in html
        assert '<option value="Oregon">Oregon</option>' in html

    @pytest.mark.asyncio
    async def test_renders_logo_or_monogram(self, client):
        html = (await client.get("/showSchools/panel")).text

        assert 'src="http://directory.test/schoolImages/oakwood.png"' in html
        assert 'src="http://directory.test/uploads/riverdale.png"' in html
        assert '<span class="school-monogram">S</span>' in html
        assert 'href="mailto:office@springfield.edu"' in html

    @pytest.mark.asyncio
    async def test_cards_carry_filterable_fields(self, client):
        html = (await client.get("/showSchools/panel")).text

        [oakwood] = [tag for tag in card_tags(html) if card_id(tag) == "2"]
        assert 'data-name="Oakwood"' in oakwood
        assert 'data-city="Springfield"' in oakwood
        assert 'data-state="Oregon"' in oakwood
        assert 'data-address="42 Oakwood Avenue"' in oakwood

    @pytest.mark.asyncio
    async def test_search_hides_non_matching_cards(self, client):
        html = (await client.get("/showSchools/panel", params={"q": "SPRING"})).text

        assert card_ids(html) == ["1", "2", "3"]
        assert visible_card_ids(html) == ["1", "2"]
        assert "Showing 2 of 3 schools" in html
        assert 'value="SPRING"' in html

    @pytest.mark.asyncio
    async def test_whitespace_search_is_no_filter(self, client):
        html = (await client.get("/showSchools/panel", params={"q": "   "})).text

        assert visible_card_ids(html) == ["1", "2", "3"]
        assert no_matches_hidden(html)
        assert "Showing 3 of 3 schools" in html

    @pytest.mark.asyncio
    async def test_state_filter(self, client):
        html = (await client.get("/showSchools/panel", params={"state": "Illinois"})).text

        assert visible_card_ids(html) == ["1", "3"]
        assert '<option value="Illinois" selected>Illinois</option>' in html

    @pytest.mark.asyncio
    async def test_filters_work_on_loaded_cards_without_refetching(self, client, directory):
        html = (await client.get("/showSchools/panel", params={"q": "oak"})).text

        assert directory.calls_to("GET", "/api/schools") == 1
        # Every loaded school is in the fragment, so narrowing or widening the
        # filters in the page needs no further request.
        assert card_ids(html) == ["1", "2", "3"]
        assert "data-filter-form" in html
        assert "data-panel-form" not in html
        # Refresh is the only control that asks for the panel again.
        assert html.count("data-panel-link") == 1

    @pytest.mark.asyncio
    async def test_no_matches_offers_clear_filters(self, client):
        html = (await client.get("/showSchools/panel", params={"q": "river", "state": "Oregon"})).text

        assert visible_card_ids(html) == []
        assert not no_matches_hidden(html)
        assert "No schools found" in html
        assert "Clear filters" in html
        assert "data-clear-filters" in html

    @pytest.mark.asyncio
    async def test_empty_directory(self, client, directory):
        directory.schools = []

        html = (await client.get("/showSchools/panel")).text

        assert 'data-empty-reason="no_schools"' in html
        assert "No schools available" in html
        assert "Clear filters" not in html
        assert 'href="/addSchool"' in html

    @pytest.mark.asyncio
    async def test_fetch_error_offers_retry(self, client, directory):
        directory.list_response = httpx.Response(500, json={"error": "Database unavailable"})

        response = await client.get("/showSchools/panel", params={"state": "Oregon"})

        assert response.status_code == 200
        html = response.text
        assert "Error Loading Schools" in html
        assert "Database unavailable" in html
        assert 'href="/showSchools?state=Oregon"' in html
        assert "Try Again" in html
        assert "data-school-id" not in html
