"""Tests for the Jinja2 template renderer (vulcangen.scaffolder.templates)."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import UndefinedError

from vulcangen.generators.module import DEFAULT_RESOLVERS, MODULE_PARTS, build_module_props
from vulcangen.scaffolder.templates import TemplateRenderer


pytestmark = pytest.mark.unit


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


def _module_props(**parts: bool) -> dict:
    selected = {part: parts.get(part, True) for part in MODULE_PARTS}
    return build_module_props(
        "blog", "blogComment", selected, {name: True for name in DEFAULT_RESOLVERS}
    )


class TestTemplateTrees:
    def test_app_tree(self, renderer: TemplateRenderer, tmp_path: Path):
        written = renderer.render_tree("app", tmp_path, {"app_name": "my-app"})
        names = {p.relative_to(tmp_path).as_posix() for p in written}
        assert names == {"package.json", "README.md", "settings.json", "packages/README.md"}

    def test_package_tree(self, renderer: TemplateRenderer, tmp_path: Path):
        written = renderer.render_tree(
            "package", tmp_path, {"package_name": "blog", "module_names": []}
        )
        names = {p.relative_to(tmp_path).as_posix() for p in written}
        assert names == {
            "package.js",
            "lib/client/main.js",
            "lib/server/main.js",
            "lib/modules/index.js",
        }

    def test_every_module_part_has_a_template(self, renderer: TemplateRenderer):
        for part in MODULE_PARTS:
            assert (renderer.template_dir / "module" / f"{part}.js.j2").is_file()

    def test_missing_prefix(self, renderer: TemplateRenderer, tmp_path: Path):
        assert renderer.render_tree("nope", tmp_path, {}) == []


class TestRendering:
    def test_filters_are_registered(self, tmp_path: Path):
        (tmp_path / "names.txt.j2").write_text(
            "{{ name | dash_case }} {{ name | camel_case }} {{ name | pascal_case }}",
            encoding="utf-8",
        )
        out = TemplateRenderer(tmp_path).render("names.txt.j2", {"name": "Blog Posts"})
        assert out == "blog-posts blogPosts BlogPosts"

    def test_missing_variable_is_an_error(self, tmp_path: Path):
        (tmp_path / "broken.txt.j2").write_text("{{ missing }}", encoding="utf-8")
        with pytest.raises(UndefinedError):
            TemplateRenderer(tmp_path).render("broken.txt.j2", {})

    def test_custom_template_dir(self, tmp_path: Path):
        (tmp_path / "t").mkdir()
        (tmp_path / "t" / "hello.txt.j2").write_text("hi {{ who }}\n", encoding="utf-8")
        renderer = TemplateRenderer(tmp_path)
        written = renderer.render_tree("t", tmp_path / "out", {"who": "there"})
        assert written == [tmp_path / "out" / "hello.txt"]
        assert written[0].read_text(encoding="utf-8") == "hi there\n"


class TestModuleTemplates:
    def test_collection_imports_selected_parts(self, renderer: TemplateRenderer):
        out = renderer.render("module/collection.js.j2", _module_props())
        assert "const BlogComment = createCollection({" in out
        assert "typeName: 'BlogComment'" in out
        assert "import resolvers from './resolvers.js';" in out
        assert "import mutations from './mutations.js';" in out

    def test_collection_without_optional_parts(self, renderer: TemplateRenderer):
        props = _module_props(
            fragments=False, mutations=False, parameters=False,
            permissions=False, resolvers=False, schema=False,
        )
        out = renderer.render("module/collection.js.j2", props)
        assert "resolvers" not in out
        assert "mutations" not in out
        assert "schema: {}," in out

    def test_mutation_and_permission_names(self, renderer: TemplateRenderer):
        out = renderer.render("module/mutations.js.j2", _module_props())
        assert "name: 'blogCommentNew'" in out
        assert "'blogComment.edit.own'" in out
        assert "'blogComment.remove.all'" in out

    def test_resolvers_follow_default_resolver_choice(self, renderer: TemplateRenderer):
        props = build_module_props(
            "blog", "comment", {part: True for part in MODULE_PARTS},
            {"list": True, "single": False, "total": False},
        )
        out = renderer.render("module/resolvers.js.j2", props)
        assert "name: 'commentList'" in out
        assert "commentSingle" not in out
        assert "commentTotal" not in out


class TestPackageTemplates:
    def test_modules_index_lists_modules(self, renderer: TemplateRenderer):
        out = renderer.render(
            "package/lib/modules/index.js.j2",
            {"package_name": "blog", "module_names": ["comment", "post"]},
        )
        assert out == "import './comment/collection.js';\nimport './post/collection.js';\n"

    def test_empty_modules_index(self, renderer: TemplateRenderer):
        out = renderer.render(
            "package/lib/modules/index.js.j2",
            {"package_name": "blog", "module_names": []},
        )
        assert "vulcangen module -p blog" in out

    def test_package_js_names_package(self, renderer: TemplateRenderer):
        out = renderer.render("package/package.js.j2", {"package_name": "blog"})
        assert "name: 'blog'," in out
