from pathlib import Path

import pytest

import generic_stack
from generic_stack import app as web
from generic_stack.models import Point


def test_dashboard_renders(client):
    resp = client.get("/")

    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert "Stack Playground" in body
    assert 'id="stack-int"' in body
    assert 'id="stack-point"' in body


def test_push_redirects_and_updates(client):
    resp = client.post("/stack/int/push", data={"value": "7"})

    assert resp.status_code == 302
    assert web.playground.int_stack.peek() == 7


def test_push_point_and_show_dump(client):
    client.post("/stack/point/push", data={"value": "10,20"})

    resp = client.get("/")

    assert web.playground.point_stack.peek() == Point(x=10, y=20)
    assert "Point(x=10, y=20)" in resp.get_data(as_text=True)


def test_invalid_push_flashes_error(client):
    resp = client.post("/stack/int/push", data={"value": "abc"}, follow_redirects=True)

    assert resp.status_code == 200
    assert 'class="flash error"' in resp.get_data(as_text=True)
    assert web.playground.int_stack.is_empty()


def test_pop_and_peek(client):
    client.post("/stack/string/push", data={"value": "Hello"})
    client.post("/stack/string/push", data={"value": "World"})

    resp = client.post("/stack/string/peek", follow_redirects=True)
    assert 'class="flash success"' in resp.get_data(as_text=True)
    assert web.playground.string_stack.size() == 2

    client.post("/stack/string/pop")
    assert web.playground.string_stack.size() == 1
    assert web.playground.string_stack.peek() == "Hello"


def test_pop_empty_flashes_error(client):
    resp = client.post("/stack/int/pop", follow_redirects=True)

    assert 'class="flash error"' in resp.get_data(as_text=True)


def test_unknown_kind_is_404(client):
    assert client.post("/stack/float/push", data={"value": "1"}).status_code == 404
    assert client.post("/stack/float/pop").status_code == 404


def test_undo_and_reset(client):
    client.post("/stack/int/push", data={"value": "1"})
    client.post("/stack/int/push", data={"value": "2"})

    client.post("/undo")
    assert web.playground.int_stack.size() == 1

    client.post("/reset")
    assert web.playground.int_stack.is_empty()
    assert web.playground.get_undo_size() == 0


def test_templates_live_inside_the_package():
    package_dir = Path(generic_stack.__file__).parent

    assert Path(web.app.root_path) == package_dir
    template = package_dir / web.app.template_folder / "dashboard.html"
    assert template.is_file()
    assert web.app.jinja_env.get_template("dashboard.html") is not None


def test_dashboard_renders_from_package_app():
    with web.app.test_client() as client:
        resp = client.get("/")

    assert resp.status_code == 200
    assert "Stack Playground" in resp.get_data(as_text=True)


def test_templates_declared_as_package_data():
    tomllib = pytest.importorskip("tomllib")
    pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"

    with pyproject.open("rb") as f:
        config = tomllib.load(f)["tool"]["setuptools"]

    assert config["packages"] == ["generic_stack"]
    assert "templates/*.html" in config["package-data"]["generic_stack"]
