"""Tests for the vote service."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from voting.core.errors import StorageError, ValidationError
from voting.models.vote import Vote
from voting.services.vote import cast_vote, validate_option

OPTIONS = ("cats", "dogs")


class TestValidateOption:
    """Tests for option validation."""

    @pytest.mark.parametrize("option", ["cats", "dogs"])
    def test_accepts_configured_options(self, option: str):
        assert validate_option(option, OPTIONS) == option

    @pytest.mark.parametrize("option", [None, "", "birds", "Cats", "DOGS", " cats", "cats "])
    def test_rejects_anything_else(self, option):
        with pytest.raises(ValidationError) as exc_info:
            validate_option(option, OPTIONS)
        assert exc_info.value.option == option


class TestCastVote:
    """Tests for cast_vote."""

    def test_inserts_one_row(self, db: Session):
        vote = cast_vote(db, "cats", OPTIONS)
        assert vote.id is not None
        assert vote.option == "cats"
        assert vote.voted_at is not None
        assert db.query(Vote).count() == 1

    def test_no_deduplication(self, db: Session):
        cast_vote(db, "cats", OPTIONS)
        cast_vote(db, "cats", OPTIONS)
        cast_vote(db, "dogs", OPTIONS)
        assert db.query(Vote).filter(Vote.option == "cats").count() == 2
        assert db.query(Vote).count() == 3

    def test_ids_increase(self, db: Session):
        first = cast_vote(db, "cats", OPTIONS)
        second = cast_vote(db, "dogs", OPTIONS)
        assert second.id > first.id
        assert second.voted_at >= first.voted_at

    def test_invalid_option_writes_nothing(self, db: Session):
        with pytest.raises(ValidationError):
            cast_vote(db, "birds", OPTIONS)
        assert db.query(Vote).count() == 0

    def test_storage_failure_raises_storage_error(self, broken_db: MagicMock):
        with pytest.raises(StorageError):
            cast_vote(broken_db, "cats", OPTIONS)
        broken_db.rollback.assert_called_once()

    def test_options_follow_current_configuration(self, db: Session):
        """Stored rows from an earlier configuration do not restrict new votes."""
        db.add(Vote(option="tea"))
        db.commit()
        cast_vote(db, "coffee", ("coffee", "juice"))
        assert db.query(Vote).count() == 2


class TestVoteEndpoints:
    """Tests for the vote service HTTP surface."""

    def test_form_lists_both_options(self, vote_client: TestClient):
        response = vote_client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        body = response.text
        assert 'value="cats"' in body
        assert 'value="dogs"' in body
        assert ">Cats</label>" in body
        assert ">Dogs</label>" in body
        assert "Vote registered successfully" not in body

    def test_form_shows_success_banner(self, vote_client: TestClient):
        response = vote_client.get("/?success=1")
        assert "Vote registered successfully" in response.text

    def test_vote_success_redirects(self, vote_client: TestClient, db: Session):
        response = vote_client.post("/vote", data={"option": "cats"}, follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/?success=1"
        assert db.query(Vote).filter(Vote.option == "cats").count() == 1

    def test_vote_follows_redirect_to_form(self, vote_client: TestClient):
        response = vote_client.post("/vote", data={"option": "dogs"})
        assert response.status_code == 200
        assert "Vote registered successfully" in response.text

    @pytest.mark.parametrize("data", [{"option": "birds"}, {"option": "CATS"}, {"option": ""}, {}])
    def test_invalid_vote_rejected(self, vote_client: TestClient, db: Session, data: dict):
        response = vote_client.post("/vote", data=data, follow_redirects=False)
        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid option"}
        assert db.query(Vote).count() == 0

    def test_storage_error_returns_500(self, broken_client_factory):
        client = broken_client_factory("vote")
        response = client.post("/vote", data={"option": "cats"}, follow_redirects=False)
        assert response.status_code == 500
        assert response.json() == {"detail": "Error saving vote"}

    def test_security_headers(self, vote_client: TestClient):
        response = vote_client.get("/")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "SAMEORIGIN"
        assert response.headers["Cache-Control"] == "no-store, max-age=0"
