from ..layout import Layout


class Blank(Layout):
    """Renders its children one after another without any decoration."""

    template = 'platform/layouts/blank.html'

    def build(self, repository):
        return self.build_as_deep(repository)
