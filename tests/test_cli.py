import json

from typer.testing import CliRunner

from blogapi import cli

runner = CliRunner()


def test_routes_lists_blog_post_endpoints():
    result = runner.invoke(cli.app, ["routes", "--json"])
    assert result.exit_code == 0

    table = {(row["path"], row["method"]) for row in json.loads(result.output)}
    assert {
        ("/blog-posts", "GET"),
        ("/blog-posts", "POST"),
        ("/blog-posts/{item_id}", "GET"),
        ("/blog-posts/{item_id}", "PUT"),
        ("/blog-posts/{item_id}", "DELETE"),
        ("/health", "GET"),
    } <= table


def test_routes_plain_output():
    result = runner.invoke(cli.app, ["routes"])
    assert result.exit_code == 0
    assert "DELETE  /blog-posts/{item_id}" in result.output


def test_serve_builds_app_through_factory(monkeypatch):
    calls = {}
    monkeypatch.setattr(cli.uvicorn, "run", lambda target, **kw: calls.update(target=target, **kw))

    result = runner.invoke(cli.app, ["serve", "--port", "5001"])

    assert result.exit_code == 0
    assert calls["target"] == "blogapi.main:create_app"
    assert calls["factory"] is True
    assert calls["port"] == 5001
    assert calls["reload"] is False
