"""Tests for template loading, escaping and page context."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from indexgen.errors import ConfigurationError, TemplateRenderError
from indexgen.models import FileItem, Generator, RenderContext
from indexgen.render import TemplateSet, available_theme_names, display_root, load_template_set

GENERATOR = Generator(name="indexgen", version="0.1.0", url="https://example.invalid/indexgen")


def _context(*files: FileItem, root: str = "/") -> RenderContext:
    return RenderContext(root=root, files=tuple(files), generator=GENERATOR)


def _item(name: str, is_dir: bool = False, size: str = "1") -> FileItem:
    return FileItem(
        path=f"./{name}",
        name=name,
        size=size,
        modified="2024-01-02 03:04:05",
        mime="" if is_dir else "text/plain",
        is_dir=is_dir,
        icon="",
    )


def _write_templates(directory: Path, index: str, layout: str = "{% block content %}{% endblock %}") -> None:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "layout.html").write_text(layout, encoding="utf-8")
    (directory / "index.html").write_text(index, encoding="utf-8")


class BundledThemeTests(unittest.TestCase):
    def test_bundled_themes_are_discoverable(self) -> None:
        self.assertEqual(available_theme_names(), ("default", "default-dark"))

    def test_each_bundled_theme_renders_names_and_sizes(self) -> None:
        for theme in available_theme_names():
            with self.subTest(theme=theme):
                html = TemplateSet.for_theme(theme).render(
                    _context(_item("a.txt", size="10"), _item("sub", is_dir=True), root="/docs")
                )
                self.assertIn("Index of /docs", html)
                self.assertIn(">a.txt</a>", html)
                self.assertIn('href="sub/"', html)
                self.assertIn("10", html)
                self.assertIn("indexgen", html)

    def test_unknown_theme_is_a_configuration_error(self) -> None:
        with self.assertRaises(ConfigurationError):
            TemplateSet.for_theme("no-such-theme")


class CustomTemplateTests(unittest.TestCase):
    def test_user_directory_overrides_bundled_theme(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            directory = Path(tmp)
            _write_templates(
                directory,
                '{% extends "layout.html" %}{% block content %}'
                "{% for f in ig.files %}[{{ f.name }}|{{ f.size }}]{% endfor %}{% endblock %}",
            )

            html = load_template_set("default", directory).render(_context(_item("x.txt", size="7")))

            self.assertEqual(html, "[x.txt|7]")

    def test_interpolated_names_are_html_escaped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            directory = Path(tmp)
            _write_templates(directory, "{% for f in ig.files %}{{ f.name }}{% endfor %}")

            html = TemplateSet.from_directory(directory).render(_context(_item("<b>&x.txt")))

            self.assertEqual(html, "&lt;b&gt;&amp;x.txt")

    def test_missing_required_template_fails_at_load_time(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            directory = Path(tmp)
            (directory / "index.html").write_text("x", encoding="utf-8")
            with self.assertRaises(ConfigurationError):
                TemplateSet.from_directory(directory)

    def test_missing_directory_fails_at_load_time(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ConfigurationError):
                TemplateSet.from_directory(Path(tmp) / "missing")

    def test_syntax_error_is_reported_as_template_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            directory = Path(tmp)
            _write_templates(directory, "{% for f in ig.files %}")
            with self.assertRaises(TemplateRenderError) as ctx:
                TemplateSet.from_directory(directory)
            self.assertEqual(ctx.exception.template_name, "index.html")

    def test_undefined_variable_is_reported_at_render_time(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            directory = Path(tmp)
            _write_templates(directory, "{{ ig.nothing_here }}")
            template_set = TemplateSet.from_directory(directory)
            with self.assertRaises(TemplateRenderError):
                template_set.render(_context())

    def test_undecodable_template_file_is_a_template_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            directory = Path(tmp)
            _write_templates(directory, "ok")
            (directory / "index.html").write_bytes(b"<p>\xff\xfe</p>")
            with self.assertRaises(TemplateRenderError) as ctx:
                TemplateSet.from_directory(directory)
            self.assertEqual(ctx.exception.template_name, "index.html")

    def test_unencodable_entry_name_is_a_template_error(self) -> None:
        template_set = TemplateSet.for_theme("default")
        with self.assertRaises(TemplateRenderError):
            template_set.render(_context(_item("bad\udcff.txt")))

    def test_footer_links_generator_only_when_url_is_set(self) -> None:
        template_set = TemplateSet.for_theme("default")
        plain = template_set.render(
            RenderContext(root="/", files=(), generator=Generator(name="indexgen", version="0.1.0", url=""))
        )
        self.assertIn("Generated by indexgen 0.1.0", " ".join(plain.split()))
        self.assertNotIn('href=""', plain)

        linked = template_set.render(_context())
        self.assertIn('<a href="https://example.invalid/indexgen">indexgen</a>', linked)


class DisplayRootTests(unittest.TestCase):
    def test_root_group_maps_to_base(self) -> None:
        self.assertEqual(display_root("/", "."), "/")
        self.assertEqual(display_root("/files/", "."), "/files/")

    def test_nested_group_strips_dot_and_separator(self) -> None:
        self.assertEqual(display_root("/", "./sub/dir"), "/sub/dir")
        self.assertEqual(display_root("https://host/", "./sub"), "https://host/sub")

    def test_keys_without_dot_prefix_contribute_nothing(self) -> None:
        self.assertEqual(display_root("/", "sub"), "/")
        self.assertEqual(display_root("/", ".sub"), "/")


if __name__ == "__main__":
    unittest.main()
