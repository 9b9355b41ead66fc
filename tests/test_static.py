import pytest

from status_api.services.static import BadStaticPath, content_type_for, resolve_static_path


@pytest.mark.parametrize(
    "name, expected",
    [
        ("index.html", "text/html"),
        ("services.json", "application/json"),
        ("logo.png", "image/png"),
        ("photo.jpg", "image/jpeg"),
        ("photo.JPEG", "image/jpeg"),
        ("notes.txt", "text/plain"),
        ("Makefile", "text/plain"),
    ],
)
def test_content_type_for(name, expected):
    assert content_type_for(name) == expected


def test_resolve_inside_root(static_root):
    assert resolve_static_path(static_root, "/index.html") == static_root.resolve() / "index.html"


@pytest.mark.parametrize("requested", ["../secret.txt", "/../etc/passwd", "a/../../secret.txt", "", "/", "x" * 150, "a\x00b"])
def test_resolve_rejects_bad_paths(static_root, requested):
    with pytest.raises(BadStaticPath):
        resolve_static_path(static_root, requested)


def test_root_serves_index(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "<h1>home</h1>"
    assert response.headers["content-type"].startswith("text/html")
    assert response.headers["cache-control"] == "public, max-age=86400"


def test_services_json(client):
    response = client.get("/services.json")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == [{"name": "nas", "url": "nas.local"}]


def test_static_file(client):
    response = client.get("/logo.png")
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content == b"\x89PNG\r\n\x1a\n"


def test_missing_static_file(client):
    response = client.get("/nope.html")
    assert response.status_code == 404
    assert response.text == "Not found"


def test_long_static_path_is_bad_request(client):
    assert client.get("/" + "x" * 120).status_code == 400


def test_traversal_does_not_escape_root(client):
    for path in ("/%2e%2e/secret.txt", "/..%2fsecret.txt", "/../secret.txt"):
        response = client.get(path)
        assert response.status_code in (400, 404)
        assert "outside" not in response.text
