"""Tests for HTMX web views."""

import pytest

from fakes import FakeGeneration
from loreexplorer.api.dependencies import get_generation_service
from loreexplorer.main import app


class TestIndex:
    @pytest.mark.asyncio
    async def test_renders_saved_locations(self, client, store):
        await store.add_location("Kyoto", "Temples and gardens.")

        response = await client.get("/")

        assert response.status_code == 200
        assert "Lore Explorer" in response.text
        assert "Temples and gardens." in response.text

    @pytest.mark.asyncio
    async def test_renders_empty_state(self, client):
        response = await client.get("/")

        assert "No saved locations yet." in response.text

    @pytest.mark.asyncio
    async def test_detected_flag_resets_after_each_request(self, client):
        response = await client.get("/")

        assert (
            "hx-on::after-request=\"document.getElementById('detected-input').value = 'false'\""
            in response.text
        )


class TestStoryPartial:
    @pytest.mark.asyncio
    async def test_renders_story_with_save_form(self, client):
        response = await client.post("/story", data={"location": "Eiffel Tower, Paris"})

        assert response.status_code == 200
        assert "The Iron Lady&#39;s Secret" in response.text
        assert response.text.count("<p>") >= 2
        assert 'value="Eiffel Tower, Paris"' in response.text

    @pytest.mark.asyncio
    async def test_empty_location_renders_toast(self, client, generation):
        response = await client.post("/story", data={"location": ""})

        assert "No Location" in response.text
        assert "story-card" not in response.text
        assert generation.invoke.call_count == 0

    @pytest.mark.asyncio
    async def test_generation_failure_renders_toast(self, client):
        app.dependency_overrides[get_generation_service] = lambda: FakeGeneration({})

        response = await client.post("/story", data={"location": "Atlantis"})

        assert "Failed to generate story. Please try again." in response.text

    @pytest.mark.asyncio
    async def test_detected_location_toast(self, client):
        response = await client.post(
            "/story", data={"location": "48.8584, 2.2945", "detected": "true"}
        )

        assert "Location Detected" in response.text


class TestSavePartial:
    @pytest.mark.asyncio
    async def test_save_renders_list_and_toast(self, client):
        response = await client.post("/locations", data={"location": "Eiffel Tower, Paris"})

        assert response.status_code == 200
        assert "Location Saved!" in response.text
        assert "Eiffel Tower, Paris" in response.text

    @pytest.mark.asyncio
    async def test_already_saved_toast(self, client, store):
        await store.add_location("Kyoto", "Temples.")

        response = await client.post("/locations", data={"location": "Kyoto"})

        assert "Already Saved" in response.text

    @pytest.mark.asyncio
    async def test_list_partial(self, client, store):
        await store.add_location("Kyoto", "Temples.")

        response = await client.get("/locations")

        assert "Kyoto" in response.text
