"""
===============================================================================
Focusify Template Engine
===============================================================================

Handles:
- Compiling the bundled layouts, pages and (optionally) partials at startup
- Composing a page with the layout that wraps it
- Streaming rendered HTML into an output sink

Bundle layout (relative to the bundle directory):
- layouts/*.html  -> "layouts/<stem>"
- pages/*.html    -> "pages/<stem>"
- partials/*.html -> "partials/<stem>"
- static/*        -> served as-is, never compiled
"""

# ========== IMPORTS ==========

import io
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

import jinja2
from jinja2 import DictLoader, Environment, select_autoescape

from utils.errors import RenderError, TemplateLoadError

# ========== CONSTANTS ==========

DEFAULT_BUNDLE_DIR = Path(__file__).resolve().parent / "templates"

LAYOUTS_DIR = "layouts"
PAGES_DIR = "pages"
PARTIALS_DIR = "partials"
STATIC_DIR = "static"
TEMPLATE_SUFFIX = ".html"

# Name under which a layout receives the compiled page it wraps
CONTENT_KEY = "content_template"

# Global telling layouts whether the partials group was compiled
PARTIALS_FLAG = "partials_enabled"


def _blank_none(value):
    # None prints as an empty string, like a missing key
    return "" if value is None else value

# ========== ENGINE ==========

class TemplateEngine:
    """
    Compiled, read-only template set.

    Every template is parsed once in the constructor. Nothing is mutated after
    that, so a single engine can serve concurrent requests.

    Args:
        bundle_dir (str | Path): Root of the template bundle.
        include_partials (bool): Also compile the partials group.

    Raises:
        TemplateLoadError: A required directory is missing or a template
            does not parse.
    """

    def __init__(self, bundle_dir=DEFAULT_BUNDLE_DIR, include_partials: bool = True):
        self.bundle_dir = Path(bundle_dir)
        self.include_partials = include_partials

        groups = [LAYOUTS_DIR, PAGES_DIR]
        if include_partials:
            groups.append(PARTIALS_DIR)

        # Includes resolve only against these sources, never the filesystem
        sources = {}
        for group in groups:
            sources.update(self._read_group(group))

        self._env = Environment(
            loader=DictLoader(sources),
            autoescape=select_autoescape(["html"]),
            auto_reload=False,
            cache_size=-1,
            finalize=_blank_none,
        )
        self._env.globals[PARTIALS_FLAG] = include_partials

        compiled = {}
        for filename in sorted(sources):
            try:
                compiled[filename[:-len(TEMPLATE_SUFFIX)]] = self._env.get_template(filename)
            except jinja2.TemplateError as e:
                raise TemplateLoadError(f"Failed to parse template {filename}: {e}") from e

        self._templates = MappingProxyType(compiled)

    @property
    def static_dir(self) -> Path:
        return self.bundle_dir / STATIC_DIR

    def _read_group(self, group: str) -> dict:
        group_dir = self.bundle_dir / group
        if not group_dir.is_dir():
            raise TemplateLoadError(f"Template directory not found: {group_dir}")

        sources = {}
        for path in sorted(group_dir.glob(f"*{TEMPLATE_SUFFIX}")):
            try:
                sources[f"{group}/{path.name}"] = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise TemplateLoadError(f"Failed to read template {group}/{path.name}: {e}") from e
        return sources

    def names(self) -> list[str]:
        """Sorted names of every compiled template."""
        return sorted(self._templates)

    def has(self, name: str) -> bool:
        return name in self._templates

    def _lookup(self, name: str) -> jinja2.Template:
        try:
            return self._templates[name]
        except KeyError:
            raise RenderError(f"Template not found: {name}") from None

    def render(
        self,
        out,
        name: str,
        data: Optional[Mapping[str, Any]] = None,
        layout: Optional[str] = None,
    ) -> None:
        """
        Render a template into an output sink.

        With a layout, the layout is executed and receives the compiled page
        under CONTENT_KEY; the layout includes it. Without one, the named
        template is executed directly.

        Args:
            out: Any object with a write(str) method.
            name (str): Qualified template name, e.g. "pages/index".
            data (Mapping): View data. Missing keys render as empty strings.
            layout (str, optional): Qualified layout name, e.g. "layouts/base".

        Raises:
            RenderError: Unknown template or layout, or execution failure.
                Chunks written before the failure stay in `out`.
        """
        content = self._lookup(name)
        context = dict(data or {})

        if layout is not None:
            target = self._lookup(layout)
            context[CONTENT_KEY] = content
        else:
            target = content

        try:
            for chunk in target.generate(context):
                out.write(chunk)
        except Exception as e:
            raise RenderError(f"Failed to render {name}: {e}") from e

    def render_to_string(
        self,
        name: str,
        data: Optional[Mapping[str, Any]] = None,
        layout: Optional[str] = None,
    ) -> str:
        """Render into a fresh buffer and return the HTML."""
        buf = io.StringIO()
        self.render(buf, name, data, layout)
        return buf.getvalue()
