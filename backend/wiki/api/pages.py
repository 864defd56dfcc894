# wiki/api/pages.py
from flask import Response, abort, current_app, redirect, request
from wiki.domain.paths import Action, validate_path
from wiki.application.pages.results import Redirect
from wiki.application.pages.view_page import view_page
from wiki.application.pages.edit_page import edit_page
from wiki.application.pages.save_page import save_page
from . import wiki_bp

STORE_KEY = "wiki.page_store"
RENDERER_KEY = "wiki.page_renderer"

# Methods each action answers to
ALLOWED_METHODS = {
    Action.VIEW: ("GET", "HEAD"),
    Action.EDIT: ("GET", "HEAD"),
    Action.SAVE: ("POST",),
}


def get_store():
    return current_app.extensions[STORE_KEY]

def get_renderer():
    return current_app.extensions[RENDERER_KEY]


def _to_response(result):
    if isinstance(result, Redirect):
        return redirect(result.location, code=302)
    return Response(result.body, mimetype="text/html")


@wiki_bp.route("/<path:subpath>", methods=["GET", "HEAD", "POST"])
def dispatch(subpath):
    # InvalidPath is turned into a 404 by the error handlers
    route = validate_path(request.path)

    allowed = ALLOWED_METHODS[route.action]
    if request.method not in allowed:
        abort(405, valid_methods=list(allowed))

    if route.action is Action.VIEW:
        result = view_page(store=get_store(), renderer=get_renderer(), title=route.title)
    elif route.action is Action.EDIT:
        result = edit_page(store=get_store(), renderer=get_renderer(), title=route.title)
    else:
        result = save_page(
            store=get_store(),
            title=route.title,
            body=request.form.get("body", ""),
        )

    return _to_response(result)
