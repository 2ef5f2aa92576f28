"""Integration tests for the /blog-posts endpoints."""


def test_list_posts_on_get(client):
    resp = client.get("/blog-posts")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")

    body = resp.json()
    assert isinstance(body, list)
    assert len(body) >= 1
    for item in body:
        assert isinstance(item, dict)
        assert {"title", "content", "author"} <= item.keys()


def test_add_post_on_post(client):
    new_post = {
        "title": "blogpost 1",
        "content": "my first blog post",
        "author": "steve romm",
        "publishdate": 1522972800000,
    }
    resp = client.post("/blog-posts", json=new_post)
    assert resp.status_code == 201
    assert resp.headers["content-type"].startswith("application/json")

    body = resp.json()
    assert body["id"] is not None
    assert body == {**new_post, "id": body["id"]}


def test_post_without_publishdate_omits_it(client):
    new_post = {"title": "blogpost 1", "content": "my first blog post", "author": "steve romm"}
    resp = client.post("/blog-posts", json=new_post)
    assert resp.status_code == 201
    assert resp.json() == {**new_post, "id": resp.json()["id"]}


def test_post_missing_field_is_400(client):
    resp = client.post("/blog-posts", json={"title": "no author", "content": "..."})
    assert resp.status_code == 400

    body = resp.json()
    assert body["success"] is False
    assert body["error_code"] == "VALIDATION_ERROR"
    assert [d["field"] for d in body["error_details"]] == ["author"]


def test_created_post_is_listed(client):
    created = client.post(
        "/blog-posts", json={"title": "a", "content": "b", "author": "c"}
    ).json()
    listed = client.get("/blog-posts").json()
    assert listed[-1] == created


def test_update_post_on_put(client):
    update_data = {
        "title": "Blog post EDIT",
        "content": "This is a revised blogpost",
        "author": "Steve Romm",
        "publishdate": "april 7, 2018",
    }
    update_data["id"] = client.get("/blog-posts").json()[0]["id"]

    resp = client.put(f"/blog-posts/{update_data['id']}", json=update_data)
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == update_data


def test_update_drops_omitted_fields(client):
    original = client.get("/blog-posts").json()[0]
    assert "publishdate" in original

    replacement = {"title": "x", "content": "y", "author": "z"}
    resp = client.put(f"/blog-posts/{original['id']}", json=replacement)
    assert resp.status_code == 200

    [stored] = [p for p in client.get("/blog-posts").json() if p["id"] == original["id"]]
    assert stored == {**replacement, "id": original["id"]}


def test_update_unknown_id_is_404(client):
    resp = client.put(
        "/blog-posts/9999", json={"title": "x", "content": "y", "author": "z"}
    )
    assert resp.status_code == 404
    assert resp.json()["error_code"] == "NOT_FOUND"


def test_update_id_mismatch_is_400(client):
    resp = client.put(
        "/blog-posts/1", json={"id": 2, "title": "x", "content": "y", "author": "z"}
    )
    assert resp.status_code == 400
    assert resp.json()["error_details"][0]["code"] == "ID_MISMATCH"


def test_update_missing_field_is_400(client):
    resp = client.put("/blog-posts/1", json={"title": "x"})
    assert resp.status_code == 400


def test_delete_post_on_delete(client):
    post_id = client.get("/blog-posts").json()[0]["id"]

    resp = client.delete(f"/blog-posts/{post_id}")
    assert resp.status_code == 204
    assert resp.content == b""

    ids = [p["id"] for p in client.get("/blog-posts").json()]
    assert post_id not in ids

    resp = client.delete(f"/blog-posts/{post_id}")
    assert resp.status_code == 404


def test_get_single_post(client):
    resp = client.get("/blog-posts/2")
    assert resp.status_code == 200
    assert resp.json()["id"] == 2

    assert client.get("/blog-posts/404").status_code == 404


def test_non_integer_id_is_400(client):
    resp = client.delete("/blog-posts/not-a-number")
    assert resp.status_code == 400
    assert resp.json()["error_details"][0]["field"] == "item_id"


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy", "posts": 2}


def test_apps_do_not_share_state(settings, empty_store):
    from fastapi.testclient import TestClient

    from blogapi.main import create_app

    first = TestClient(create_app(settings=settings))
    second = TestClient(create_app(settings=settings, store=empty_store))

    first.post("/blog-posts", json={"title": "a", "content": "b", "author": "c"})
    assert len(first.get("/blog-posts").json()) == 1
    assert second.get("/blog-posts").json() == []


def test_importing_main_builds_no_app():
    import blogapi.main

    assert not hasattr(blogapi.main, "app")
