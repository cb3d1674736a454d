"""Shared fixtures: a fake transport serving canned API payloads."""

import json
from urllib.parse import urlsplit, parse_qs

import pytest
import requests

from wikicells import Config


def params(url):
    """Returns the query string of url as a {name: value} dict."""
    return {k: v[0] for k, v in parse_qs(urlsplit(url).query, keep_blank_values=True).items()}


class FakeFetch:
    """Stands in for the HTTP transport. Routes are matched in the order they were added."""

    def __init__(self):
        self.routes = []
        self.urls = []

    def add(self, body, host=None, path=None, **query):
        if isinstance(body, (dict, list)):
            body = json.dumps(body)
        self.routes.append((host, path, query, body))

    def __call__(self, url, config):
        self.urls.append(url)
        parts = urlsplit(url)
        got = params(url)
        for host, path, query, body in self.routes:
            if host is not None and parts.netloc != host:
                continue
            if path is not None and path not in parts.path:
                continue
            if any(got.get(k) != v for k, v in query.items()):
                continue
            if isinstance(body, Exception):
                raise body
            return body
        raise requests.ConnectionError("no route for " + url)


@pytest.fixture
def fake():
    return FakeFetch()


@pytest.fixture
def config(fake):
    return Config(fetch=fake)


def api(inner):
    """Wraps inner XML the way the action API does."""
    return '<?xml version="1.0"?><api batchcomplete=""><query>' + inner + "</query></api>"


def page(inner, title="Berlin"):
    return '<pages><page _idx="3354" pageid="3354" ns="0" title="' + title + '">' + inner + "</page></pages>"
