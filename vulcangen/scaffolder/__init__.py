"""vulcangen scaffolder -- renders Jinja2 templates into the project tree.

Template sets live under ``vulcangen/scaffolder/templates/``:

- ``app/``     -- a new application skeleton
- ``package/`` -- a Meteor package under ``packages/<name>/``
- ``module/``  -- one file per module part under ``lib/modules/<module>/``

Quick usage::

    from vulcangen.scaffolder import TemplateRenderer

    renderer = TemplateRenderer()
    renderer.render_tree("package", "packages/blog", {"package_name": "blog", ...})
"""

from vulcangen.scaffolder.templates import TemplateRenderer

__all__ = [
    "TemplateRenderer",
]
