from pathlib import Path

from blogcorpus.core.config import BlogCorpusConfig


def test_defaults_resolve_against_site_root(tmp_path):
    config = BlogCorpusConfig.load(tmp_path)

    assert config.paths.site_root == tmp_path
    assert config.paths.abs_posts_dir == tmp_path / "posts"
    assert config.paths.abs_output_dir == tmp_path / "site" / "docs" / "posts"
    assert config.loader.pattern == "**/*.md"
    assert config.loader.strict is False
    assert config.logging.level == "INFO"


def test_toml_file_overrides_defaults(tmp_path):
    (tmp_path / ".blogcorpus.toml").write_text(
        '[paths]\nposts_dir = "content/blog"\n\n[loader]\nstrict = true\npattern = "*.markdown"\n',
        encoding="utf-8",
    )

    config = BlogCorpusConfig.load(tmp_path)

    assert config.paths.abs_posts_dir == tmp_path / "content" / "blog"
    assert config.loader.strict is True
    assert config.loader.pattern == "*.markdown"


def test_environment_overrides_toml(tmp_path, monkeypatch):
    (tmp_path / ".blogcorpus.toml").write_text('[paths]\nposts_dir = "content"\n', encoding="utf-8")
    monkeypatch.setenv("BLOGCORPUS_PATHS__POSTS_DIR", "from-env")
    monkeypatch.setenv("BLOGCORPUS_LOGGING__LEVEL", "DEBUG")

    config = BlogCorpusConfig.load(tmp_path)

    assert config.paths.posts_dir == Path("from-env")
    assert config.logging.level == "DEBUG"


def test_absolute_paths_are_kept(tmp_path):
    absolute = tmp_path / "elsewhere"
    (tmp_path / ".blogcorpus.toml").write_text(f'[paths]\nposts_dir = "{absolute.as_posix()}"\n', encoding="utf-8")

    assert BlogCorpusConfig.load(tmp_path).paths.abs_posts_dir == absolute


def test_environment_and_toml_merge_within_a_section(tmp_path, monkeypatch):
    (tmp_path / ".blogcorpus.toml").write_text(
        '[loader]\npattern = "*.markdown"\nencoding = "latin-1"\n', encoding="utf-8"
    )
    monkeypatch.setenv("BLOGCORPUS_LOADER__STRICT", "true")
    monkeypatch.setenv("BLOGCORPUS_LOADER__ENCODING", "utf-8")

    config = BlogCorpusConfig.load(tmp_path)

    assert config.loader.pattern == "*.markdown"
    assert config.loader.encoding == "utf-8"
    assert config.loader.strict is True
    assert config.paths.site_root == tmp_path
