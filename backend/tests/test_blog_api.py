"""
Portfolio API — Blog Endpoint Tests
====================================
"""

import asyncio
from datetime import datetime

import pytest
from bson import ObjectId
from pydantic import TypeAdapter

parse_datetime = TypeAdapter(datetime).validate_python


@pytest.mark.asyncio
async def test_patch_title_refreshes_created_at(test_client, sample_blog):
    blog_id = (await test_client.post("/api/blog", json=sample_blog)).json()["id"]
    original = (await test_client.get("/api/blog")).json()["data"][0]

    await asyncio.sleep(0.01)
    response = await test_client.patch(f"/api/blog/{blog_id}", json={"title": "New"})

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Blog post updated successfully"}
    updated = (await test_client.get("/api/blog")).json()["data"][0]
    assert updated["title"] == "New"
    assert updated["content"] == sample_blog["content"]
    assert updated["image"] == sample_blog["image"]
    assert updated["category"] == sample_blog["category"]
    assert parse_datetime(updated["createdAt"]) > parse_datetime(original["createdAt"])


@pytest.mark.asyncio
async def test_list_envelope(test_client, sample_blog):
    await test_client.post("/api/blog", json=sample_blog)

    response = await test_client.get("/api/blog")

    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Blog posts retrieved successfully"
    assert len(body["data"]) == 1


@pytest.mark.asyncio
async def test_list_keeps_off_enum_category(test_client, memory_store):
    post_id = str(ObjectId())
    memory_store.collections["blogs"] = {
        post_id: {"_id": post_id, "title": "Old post", "category": "Travel", "views": 12}
    }

    data = (await test_client.get("/api/blog")).json()["data"]

    assert len(data) == 1
    assert data[0]["_id"] == post_id
    assert data[0]["category"] == "Travel"
    assert data[0]["views"] == 12


@pytest.mark.asyncio
async def test_create_rejects_unknown_category(test_client):
    response = await test_client.post("/api/blog", json={"category": "Gaming"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_delete_blog_post(test_client, sample_blog):
    blog_id = (await test_client.post("/api/blog", json=sample_blog)).json()["id"]

    assert (await test_client.delete(f"/api/blog/{blog_id}")).status_code == 200
    assert (await test_client.delete(f"/api/blog/{blog_id}")).status_code == 404
    assert (await test_client.get("/api/blog")).json()["data"] == []


@pytest.mark.asyncio
async def test_update_unknown_blog_post(test_client):
    response = await test_client.patch(f"/api/blog/{ObjectId()}", json={"title": "New"})

    assert response.status_code == 404
    assert response.json()["message"] == "Blog post not found or no changes made"


@pytest.mark.asyncio
async def test_blog_and_projects_are_separate_collections(test_client, sample_blog, sample_project):
    await test_client.post("/api/blog", json=sample_blog)
    await test_client.post("/api/projects", json=sample_project)

    blog_posts = (await test_client.get("/api/blog")).json()["data"]
    projects = (await test_client.get("/api/projects")).json()["data"]

    assert [post["title"] for post in blog_posts] == [sample_blog["title"]]
    assert [project["title"] for project in projects] == [sample_project["title"]]
