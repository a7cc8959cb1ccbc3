# tests/conftest.py
from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from signdeck_web.config.settings import Environment, Settings, get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    """Keep the cached Settings singleton from leaking between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """A template directory holding one page and one fragment template."""
    (tmp_path / "layout.html").write_text(
        "<h1>{{ title }}</h1><nav>{% for item in navigation %}{{ item.title }}{% endfor %}</nav>"
        "<span class=\"clock\">{{ clock }}</span>",
        encoding="utf-8",
    )
    (tmp_path / "layout-form-edit.html").write_text(
        '{"html": {{ ("<form>" ~ name ~ "</form>") | tojson }},'
        ' "title": "  Edit {{ name }}  ",'
        ' "callBack": "layoutFormCallback",'
        ' "buttons": "Cancel,closeDialog()\\nSave,submitForm()",'
        ' "fieldActions": "[{\\"field\\": \\"name\\", \\"trigger\\": \\"change\\"}]"}',
        encoding="utf-8",
    )
    (tmp_path / "broken-form.html").write_text("<p>not json</p>", encoding="utf-8")
    return tmp_path


@pytest.fixture
def settings(templates_dir: Path) -> Settings:
    """Test settings pointing at the temporary template directory."""
    return Settings(
        ENVIRONMENT=Environment.TEST,
        TEMPLATES_DIR=str(templates_dir),
    )
