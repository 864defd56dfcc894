from flask import Blueprint

# Wiki routes live at the site root: /view/<title>, /edit/<title>, /save/<title>
wiki_bp = Blueprint("wiki", __name__)

# Import route modules so they register with wiki_bp
from . import pages
