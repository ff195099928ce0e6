"""Integration tests for Skills API."""

import pytest
from httpx import AsyncClient


class TestSkillsAPI:
    """Integration tests for the skill list."""

    @pytest.mark.asyncio
    async def test_requires_profile(self, api_client: AsyncClient):
        assert (await api_client.get("/skills")).status_code == 404

    @pytest.mark.asyncio
    async def test_add_skill(self, profile_client: AsyncClient):
        response = await profile_client.post("/skills", json={"skill": "  Go  "})

        assert response.status_code == 201
        body = response.json()
        assert body["skill"] == "Go"
        assert body["skills"] == ["Go"]

    @pytest.mark.asyncio
    async def test_duplicate_ignoring_case(self, profile_client: AsyncClient):
        await profile_client.post("/skills", json={"skill": "go"})

        response = await profile_client.post("/skills", json={"skill": "GO"})

        assert response.status_code == 400
        assert response.json()["error_code"] == "DUPLICATE_SKILL"
        assert (await profile_client.get("/skills")).json() == ["go"]

    @pytest.mark.asyncio
    async def test_too_short(self, profile_client: AsyncClient):
        response = await profile_client.post("/skills", json={"skill": " a "})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_long_skill_name_accepted(self, profile_client: AsyncClient):
        skill = "Distributed Systems " * 8

        response = await profile_client.post("/skills", json={"skill": skill})

        assert response.status_code == 201
        assert response.json()["skill"] == skill.strip()

    @pytest.mark.asyncio
    async def test_list_sorted_and_top_alias(self, profile_client: AsyncClient):
        for skill in ["TypeScript", "CSS", "Python"]:
            await profile_client.post("/skills", json={"skill": skill})

        listed = await profile_client.get("/skills")
        top = await profile_client.get("/skills/top")

        assert listed.json() == ["CSS", "Python", "TypeScript"]
        assert top.json() == listed.json()

    @pytest.mark.asyncio
    async def test_delete_ignoring_case(self, profile_client: AsyncClient):
        await profile_client.post("/skills", json={"skill": "React"})

        response = await profile_client.delete("/skills/react")

        assert response.status_code == 200
        assert response.json()["deletedSkill"] == "React"
        assert response.json()["skills"] == []

    @pytest.mark.asyncio
    async def test_delete_url_encoded_name(self, profile_client: AsyncClient):
        await profile_client.post("/skills", json={"skill": "CI/CD"})
        await profile_client.post("/skills", json={"skill": "Node.js"})

        response = await profile_client.delete("/skills/CI%2FCD")

        assert response.status_code == 200
        assert response.json()["skills"] == ["Node.js"]

    @pytest.mark.asyncio
    async def test_delete_missing(self, profile_client: AsyncClient):
        response = await profile_client.delete("/skills/Rust")

        assert response.status_code == 404
        assert response.json()["error_code"] == "SKILL_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_replace_skills(self, profile_client: AsyncClient):
        response = await profile_client.put(
            "/skills", json={"skills": ["Vue", "x", " vue ", "Svelte", ""]}
        )

        assert response.status_code == 200
        assert response.json()["skills"] == ["Svelte", "Vue"]

    @pytest.mark.asyncio
    async def test_replace_requires_array(self, profile_client: AsyncClient):
        response = await profile_client.put("/skills", json={"skills": "Vue"})

        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"
