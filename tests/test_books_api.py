"""HTTP contract of /api/books."""

from urllib.parse import quote

import pytest

from tests.utils import make_book, make_categories

BASE = "/api/books"


def _payload(category_id: int, **overrides) -> dict:
    payload = {
        "category_id": category_id,
        "name": "Dune",
        "author": "Frank Herbert",
        "description": "Desert planet",
        "value": "20.00",
        "publish_date": "1965-08-01",
    }
    payload.update(overrides)
    return payload


class TestListAndPagination:
    def test_get_all_sorted_by_name(self, client, session):
        (category,) = make_categories(session, 1)
        make_book(session, category, "Zorba")
        make_book(session, category, "Anna Karenina")

        response = client.get(f"{BASE}/")

        assert response.status_code == 200
        body = response.json()
        assert [b["name"] for b in body] == ["Anna Karenina", "Zorba"]
        assert body[0]["category_id"] == category.id
        assert "category" not in body[0]

    def test_pagination(self, client, session):
        (category,) = make_categories(session, 1)
        for i in range(1, 16):
            make_book(session, category, f"Book {i:02d}")

        response = client.get(
            f"{BASE}/GetAllWithPagination", params={"pageNumber": 2, "pageSize": 10}
        )

        assert response.status_code == 200
        body = response.json()
        assert [b["name"] for b in body["data"]] == [f"Book {i:02d}" for i in range(11, 16)]
        assert body["total_records"] == 15
        assert body["total_pages"] == 2

    @pytest.mark.parametrize("page_number, page_size", [(0, 10), (1, 0), (-2, 5)])
    def test_pagination_rejects_invalid_params(self, client, page_number, page_size):
        response = client.get(
            f"{BASE}/GetAllWithPagination",
            params={"pageNumber": page_number, "pageSize": page_size},
        )
        assert response.status_code == 400


class TestGetById:
    def test_found(self, client, session):
        (category,) = make_categories(session, 1)
        book = make_book(session, category, "Ulysses", author="James Joyce")

        response = client.get(f"{BASE}/{book.id}")

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Ulysses"
        assert body["author"] == "James Joyce"
        assert body["category_id"] == category.id

    def test_not_found(self, client):
        assert client.get(f"{BASE}/999").status_code == 404


class TestByCategory:
    def test_found(self, client, session):
        first, second = make_categories(session, 2)
        make_book(session, first, "One")
        make_book(session, second, "Two")

        response = client.get(f"{BASE}/GetBooksByCategory/{first.id}")

        assert response.status_code == 200
        assert [b["name"] for b in response.json()] == ["One"]

    def test_empty(self, client, session):
        (category,) = make_categories(session, 1)
        assert client.get(f"{BASE}/GetBooksByCategory/{category.id}").status_code == 404


class TestAdd:
    def test_add(self, client, session):
        (category,) = make_categories(session, 1)

        response = client.post(f"{BASE}/", json=_payload(category.id))

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["payload"]["name"] == "Dune"
        assert body["payload"]["publish_date"] == "1965-08-01"

    def test_duplicate_name(self, client, session):
        (category,) = make_categories(session, 1)
        make_book(session, category, "Dune")

        response = client.post(f"{BASE}/", json=_payload(category.id))

        assert response.status_code == 400
        assert response.json()["detail"]["message"] == "This book name is already being used"

    def test_unknown_category(self, client):
        response = client.post(f"{BASE}/", json=_payload(404))

        assert response.status_code == 400
        assert response.json()["detail"]["message"] == "Category not found"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"name": ""},
            {"author": "a" * 151},
            {"value": "-1"},
            {"publish_date": "not a date"},
            {"category_id": 0},
        ],
    )
    def test_invalid_body(self, client, session, overrides):
        (category,) = make_categories(session, 1)
        body = _payload(category.id)
        body.update(overrides)

        response = client.post(f"{BASE}/", json=body)
        assert response.status_code == 400


class TestUpdate:
    def test_update(self, client, session):
        (category,) = make_categories(session, 1)
        book = make_book(session, category, "Dune")

        response = client.put(
            f"{BASE}/{book.id}",
            json=_payload(category.id, id=book.id, author="F. Herbert"),
        )

        assert response.status_code == 200
        assert response.json()["payload"]["author"] == "F. Herbert"

    def test_id_mismatch(self, client, session):
        (category,) = make_categories(session, 1)
        book = make_book(session, category, "Dune")

        response = client.put(f"{BASE}/{book.id}", json=_payload(category.id, id=book.id + 1))

        assert response.status_code == 400

    def test_duplicate_name(self, client, session):
        (category,) = make_categories(session, 1)
        make_book(session, category, "Dune")
        other = make_book(session, category, "Emma")

        response = client.put(f"{BASE}/{other.id}", json=_payload(category.id, id=other.id))

        assert response.status_code == 400


class TestRemove:
    def test_remove(self, client, session):
        (category,) = make_categories(session, 1)
        book = make_book(session, category, "Dune")

        assert client.delete(f"{BASE}/{book.id}").status_code == 200
        assert client.get(f"{BASE}/{book.id}").status_code == 404

    def test_not_found(self, client):
        assert client.delete(f"{BASE}/999").status_code == 404


class TestSearch:
    def test_search_by_name(self, client, session):
        (category,) = make_categories(session, 1)
        make_book(session, category, "Dune")
        make_book(session, category, "Emma")

        response = client.get(f"{BASE}/search/Dun")

        assert response.status_code == 200
        assert [b["name"] for b in response.json()] == ["Dune"]

    def test_search_by_name_none(self, client):
        response = client.get(f"{BASE}/search/Nothing")
        assert response.status_code == 404

    def test_search_with_category(self, client, session):
        (category,) = make_categories(session, 1, prefix="Classics")
        make_book(session, category, "Emma")

        response = client.get(f"{BASE}/SearchBookWithCategory/Classics")

        assert response.status_code == 200
        assert [b["name"] for b in response.json()] == ["Emma"]

    def test_search_with_category_none(self, client, session):
        (category,) = make_categories(session, 1)
        make_book(session, category, "Emma")

        response = client.get(f"{BASE}/SearchBookWithCategory/zzz")

        assert response.status_code == 404
        assert response.json()["detail"] == "None book was found"

    @pytest.mark.parametrize("term", ["_", "%"])
    def test_wildcard_characters_match_literally(self, client, session, term):
        (category,) = make_categories(session, 1)
        make_book(session, category, "Dune")

        assert client.get(f"{BASE}/search/{quote(term)}").status_code == 404
        assert client.get(f"{BASE}/SearchBookWithCategory/{quote(term)}").status_code == 404
