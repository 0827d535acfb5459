from typing import Optional

from flask import render_template
from markupsafe import Markup

from ..layout import Layout


class View(Layout):
    """Renders an arbitrary template with the screen data and extra variables."""

    def __init__(self, template: str, variables: Optional[dict] = None):
        super().__init__()
        self.template = template
        self.variables.update(variables or {})

    def build(self, repository):
        if not self.check_permission(self, repository):
            return None

        context = repository.all()
        context.update(self.variables)
        return Markup(render_template(self.template, **context))
