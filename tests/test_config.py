"""Unit tests for loading ``site.yaml`` into :class:`SiteConfig`.

Usage
-----
Run ``pytest tests/test_config.py -v``. Each test writes its own YAML file
under pytest's ``tmp_path``.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from folio_pages.config import SiteConfig, SiteConfigError, load_site_config


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(body.strip() + "\n", encoding="utf-8")
    return path


def test_load_full_config(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        """
site:
  articles_url: https://example.com/writing/
  base_href: /writing/
  href_template: "{{baseHref}}/page/{{id}}"
  per_page: 12
  anchor_before_heading: true
  output_dir: dist/writing
""",
    )
    config = load_site_config(path)
    assert config == SiteConfig(
        articles_url="https://example.com/writing",
        base_href="/writing",
        href_template="{{baseHref}}/page/{{id}}",
        per_page=12,
        anchor_before_heading=True,
        output_dir=Path("dist/writing"),
    )


def test_missing_keys_use_defaults(tmp_path: Path) -> None:
    path = _write_config(tmp_path, "site:\n  per_page: 6")
    config = load_site_config(path)
    assert config.per_page == 6
    assert config.articles_url == "https://nick.af/articles"
    assert config.href_template == "{{baseHref}}/browse/{{id}}"
    assert config.output_dir == Path("public")


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    path = tmp_path / "site.yaml"
    path.write_text("", encoding="utf-8")
    assert load_site_config(path) == SiteConfig()


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="not found"):
        load_site_config(tmp_path / "absent.yaml")


def test_non_mapping_document_raises(tmp_path: Path) -> None:
    path = _write_config(tmp_path, "- one\n- two")
    with pytest.raises(TypeError, match="mapping"):
        load_site_config(path)


def test_non_mapping_site_block_raises(tmp_path: Path) -> None:
    path = _write_config(tmp_path, "site:\n  - per_page")
    with pytest.raises(SiteConfigError, match="'site' block"):
        load_site_config(path)


@pytest.mark.parametrize("value", ["0", "-3", "ten", "2.5"])
def test_invalid_per_page_raises(tmp_path: Path, value: str) -> None:
    path = _write_config(tmp_path, f"site:\n  per_page: {value}")
    with pytest.raises(SiteConfigError, match="per_page"):
        load_site_config(path)


def test_yaml_12_keeps_yes_as_a_string(tmp_path: Path) -> None:
    """YAML 1.2 parsing leaves ``yes`` as text, which is not a valid flag."""
    path = _write_config(tmp_path, "site:\n  anchor_before_heading: yes")
    with pytest.raises(SiteConfigError, match="anchor_before_heading"):
        load_site_config(path)
