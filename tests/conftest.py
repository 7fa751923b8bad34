"""Shared fixtures: a throwaway docs directory and a Flask app serving it"""

import pytest

from froq_site.app import create_app
from froq_site.config import Settings


@pytest.fixture
def docs_dir(tmp_path):
    """Docs directory with an index and two pages."""
    d = tmp_path / "docs"
    d.mkdir()
    (d / "_index.md").write_text("# Documentation\n\n## Installation\n\nRun it.\n")
    (d / "app_controller.md").write_text("# Controller\n\nControllers extend `Controller`.\n")
    (d / "app_routing.md").write_text("# Routing [draft]\n\n| a | b |\n| --- | --- |\n| 1 | 2 |\n")
    return d


@pytest.fixture
def settings(docs_dir):
    return Settings(docs_dir=docs_dir)


@pytest.fixture
def client(settings):
    app = create_app(settings)
    app.config["TESTING"] = True
    return app.test_client()
