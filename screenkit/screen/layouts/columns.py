from ..layout import Layout


class Columns(Layout):
    """Places each key of ``layouts`` in its own column."""

    template = 'platform/layouts/columns.html'

    def build(self, repository):
        return self.build_as_deep(repository)
