"""Integration tests for the Reviews API endpoints.

Tests cover:
- Listing reviews with joined username and movie title
- Listing reviews of one movie
- Creating reviews, including the 1..10 rating boundaries
"""

from __future__ import annotations

import pytest
from httpx import AsyncClient


class TestReviewsListEndpoints:
    """GET /api/reviews and /api/reviews/movie/{movie_id}."""

    @staticmethod
    async def test_list_reviews_joins_user_and_movie(client: AsyncClient) -> None:
        resp = await client.get("/api/reviews")
        assert resp.status_code == 200

        reviews = resp.json()["data"]
        assert len(reviews) == 3
        first = reviews[0]
        assert first["review_id"] == 1
        assert first["username"] == "alice"
        assert first["movie_title"] == "The Shawshank Redemption"
        assert first["rating"] == 10
        assert first["review_text"] == "A masterpiece."

    @staticmethod
    async def test_movie_reviews_include_username(client: AsyncClient) -> None:
        resp = await client.get("/api/reviews/movie/1")
        assert resp.status_code == 200

        reviews = resp.json()["data"]
        assert [(r["username"], r["rating"]) for r in reviews] == [("alice", 10), ("bob", 8)]
        assert "movie_title" not in reviews[0]

    @staticmethod
    async def test_movie_without_reviews_is_empty(client: AsyncClient) -> None:
        resp = await client.get("/api/reviews/movie/12")
        assert resp.status_code == 200
        assert resp.json()["data"] == []


class TestCreateReviewEndpoint:
    """POST /api/reviews."""

    @staticmethod
    @pytest.mark.parametrize("rating", [1, 10])
    async def test_boundary_ratings_are_accepted(client: AsyncClient, rating: int) -> None:
        resp = await client.post(
            "/api/reviews",
            json={"movie_id": 3, "user_id": 2, "rating": rating, "review_text": "ok"},
        )
        assert resp.status_code == 201
        assert resp.json() == {
            "status": "success",
            "message": "Review created successfully",
            "id": 4,
        }

    @staticmethod
    @pytest.mark.parametrize("rating", [11, -3])
    async def test_out_of_range_ratings_are_rejected(client: AsyncClient, rating: int) -> None:
        resp = await client.post(
            "/api/reviews",
            json={"movie_id": 3, "user_id": 2, "rating": rating},
        )
        assert resp.status_code == 400
        assert resp.json() == {
            "status": "error",
            "message": "Rating must be between 1 and 10",
        }

        listed = await client.get("/api/reviews")
        assert len(listed.json()["data"]) == 3

    @staticmethod
    @pytest.mark.parametrize(
        "payload",
        [
            {"user_id": 1, "rating": 5},
            {"movie_id": 1, "rating": 5},
            {"movie_id": 1, "user_id": 1},
            {"movie_id": 0, "user_id": 1, "rating": 5},
            {"movie_id": 1, "user_id": 0, "rating": 5},
            {"movie_id": 1, "user_id": 1, "rating": 0},
            {},
        ],
    )
    async def test_missing_required_fields_return_400(
        client: AsyncClient,
        payload: dict,
    ) -> None:
        resp = await client.post("/api/reviews", json=payload)
        assert resp.status_code == 400
        assert resp.json()["message"] == "Movie ID, user ID, and rating are required"

    @staticmethod
    async def test_non_numeric_rating_returns_400(client: AsyncClient) -> None:
        resp = await client.post(
            "/api/reviews",
            json={"movie_id": 1, "user_id": 1, "rating": "great"},
        )
        assert resp.status_code == 400
        assert "rating" in resp.json()["message"]

    @staticmethod
    async def test_created_review_is_listed_for_movie(client: AsyncClient) -> None:
        resp = await client.post(
            "/api/reviews",
            data={"movie_id": "12", "user_id": "1", "rating": "7"},
        )
        assert resp.status_code == 201

        listed = await client.get("/api/reviews/movie/12")
        reviews = listed.json()["data"]
        assert len(reviews) == 1
        assert reviews[0]["username"] == "alice"
        assert reviews[0]["rating"] == 7
        assert reviews[0]["review_text"] is None
