from __future__ import annotations

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from quiz_catalog.db.repo.categories_repo import CategoriesRepo


def _create(client: TestClient, title: str) -> dict:
    response = client.post("/categories", json={"title": title})
    assert response.status_code == 201
    return response.json()


def test_create_and_get_category(client: TestClient) -> None:
    created = _create(client, "Computer Science")

    assert created["slug"] == "computer-science"
    assert created["title"] == "Computer Science"

    response = client.get("/categories/computer-science")
    assert response.status_code == 200
    assert response.json() == created


def test_create_category_sanitizes_title(client: TestClient) -> None:
    created = _create(client, "<b>Markup</b> & More")

    assert created["title"] == "&lt;b&gt;Markup&lt;/b&gt; &amp; More"


def test_create_category_rejects_invalid_json(client: TestClient) -> None:
    response = client.post(
        "/categories",
        content="{not json",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"detail": {"code": "E_INVALID_JSON"}}


def test_create_category_reports_validation_errors(client: TestClient) -> None:
    response = client.post("/categories", json={"title": "ab"})

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["code"] == "E_VALIDATION"
    assert [error["field"] for error in detail["errors"]] == ["title"]


def test_create_category_conflict(client: TestClient) -> None:
    _create(client, "HTML")

    response = client.post("/categories", json={"title": "HTML"})

    assert response.status_code == 409
    assert response.json() == {"detail": {"code": "E_CONFLICT"}}


def test_get_unknown_category_is_404(client: TestClient) -> None:
    response = client.get("/categories/missing")

    assert response.status_code == 404
    assert response.json() == {"detail": {"code": "E_NOT_FOUND"}}


def test_list_categories_paginates(client: TestClient) -> None:
    for title in ["HTML", "CSS", "JavaScript", "Python", "SQL"]:
        _create(client, title)

    response = client.get("/categories", params={"limit": "2", "page": "2"})

    assert response.status_code == 200
    payload = response.json()
    assert [category["title"] for category in payload["categories"]] == ["JavaScript", "Python"]
    assert payload["total"] == 5
    assert payload["page"] == 2
    assert payload["limit"] == 2


def test_list_categories_falls_back_on_bad_page_params(client: TestClient) -> None:
    _create(client, "HTML")

    response = client.get("/categories", params={"limit": "lots", "page": "-4"})

    assert response.status_code == 200
    payload = response.json()
    assert (payload["page"], payload["limit"]) == (1, 10)
    assert payload["total"] == 1


def test_update_category_moves_slug(client: TestClient) -> None:
    _create(client, "Java Script")

    response = client.patch("/categories/java-script", json={"title": "JavaScript"})

    assert response.status_code == 200
    assert response.json()["slug"] == "javascript"
    assert client.get("/categories/java-script").status_code == 404
    assert client.patch("/categories/java-script", json={"title": "Again"}).status_code == 404


def test_delete_category_removes_its_questions(client: TestClient) -> None:
    category = _create(client, "Doomed")
    question = client.post(
        "/questions",
        json={
            "text": "Will this survive?",
            "categoryId": category["id"],
            "options": [{"text": "no", "isCorrect": True}],
        },
    ).json()

    response = client.delete("/categories/doomed")

    assert response.status_code == 200
    assert response.json() == category
    assert client.get("/categories/doomed").status_code == 404
    assert client.get(f"/questions/{question['id']}").status_code == 404
    assert client.delete("/categories/doomed").status_code == 404


def test_list_category_questions(client: TestClient) -> None:
    category = _create(client, "Arithmetic")
    other = _create(client, "Algebra")
    for category_id, text in [
        (category["id"], "What is 1+1?"),
        (other["id"], "Solve x+1=2"),
        (category["id"], "What is 2+2?"),
    ]:
        client.post(
            "/questions",
            json={"text": text, "categoryId": category_id, "options": [{"text": "2", "isCorrect": True}]},
        )

    response = client.get("/categories/arithmetic/questions", params={"limit": "1", "page": "2"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["total"] == 2
    assert [question["text"] for question in payload["questions"]] == ["What is 2+2?"]
    assert client.get("/categories/missing/questions").status_code == 404


def test_storage_failure_is_opaque(client: TestClient, monkeypatch) -> None:
    async def _failing_list_page(session, *, limit: int, offset: int):
        raise OperationalError("SELECT", {}, Exception("password=secret"))

    monkeypatch.setattr(CategoriesRepo, "list_page", _failing_list_page)

    response = client.get("/categories")

    assert response.status_code == 500
    assert response.json() == {"detail": {"code": "E_INTERNAL"}}


def test_list_categories_with_huge_page_is_empty(client: TestClient) -> None:
    _create(client, "HTML")

    response = client.get("/categories", params={"page": str(10**20)})

    assert response.status_code == 200
    body = response.json()
    assert body["categories"] == []
    assert body["total"] == 1
