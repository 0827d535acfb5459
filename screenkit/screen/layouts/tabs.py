from ..layout import Layout


class Tabs(Layout):
    """Renders ``{title: layouts}`` as a tab strip; only visible tabs are kept."""

    template = 'platform/layouts/tabs.html'

    def build(self, repository):
        return self.build_as_deep(repository)
