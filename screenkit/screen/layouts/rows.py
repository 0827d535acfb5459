from typing import List, Optional

from flask import render_template
from markupsafe import Markup

from ..fields.builder import Builder
from ..layout import BLANK_TEMPLATE, Layout
from ..repository import Repository


class Rows(Layout):
    """A form layout: subclasses list their fields in ``fields()``.

    ``query`` keeps the repository of the last build so ``fields()`` can
    depend on the data being edited.
    """

    template = 'platform/layouts/row.html'
    title: Optional[str] = None

    def __init__(self, layouts=None):
        super().__init__(layouts)
        self.title = type(self).title
        self.query: Optional[Repository] = None

    def build(self, query):
        self.query = query
        if not self.check_permission(self, query):
            return None

        form = Builder(self.fields(), query).generate_form()

        if self.is_async:
            return Markup(render_template(BLANK_TEMPLATE, many_forms={'form': [form]}))

        return Markup(render_template(
            self.template,
            form=form,
            title=self.title,
            template_slug=self.get_slug(),
            async_enable=1 if self.async_method else 0,
            async_route=self.async_route(),
        ))

    def fields(self) -> List:
        return []
