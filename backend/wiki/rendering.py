from flask import render_template
from jinja2 import TemplateError

from wiki.domain.page import Page
from wiki.exceptions import RenderError


class TemplateRenderer:
    """
    Renders a page through the package's Jinja2 templates.

    Needs an application context; the app factory installs one instance
    per application.
    """

    templates = {
        "view": "view.html",
        "edit": "edit.html",
    }

    def render(self, mode: str, page: Page) -> bytes:
        template = self.templates.get(mode)
        if template is None:
            raise RenderError(f"unknown render mode: {mode!r}")

        try:
            html = render_template(
                template,
                page=page,
                body=page.content.decode("utf-8", errors="replace"),
            )
        except TemplateError as exc:
            raise RenderError(f"could not render {template}: {exc}") from exc

        return html.encode("utf-8")
