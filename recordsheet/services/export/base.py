class BaseExportComponent:
    """A block of rows rendered onto a worksheet; render returns the next free row."""
    def render(self, ws, context, start_row):
        raise NotImplementedError


class BaseExportBoard:
    """One worksheet of the export, composed of components rendered top to bottom."""
    def __init__(self, title, opens_first=False):
        self.title = title
        self.opens_first = opens_first
        self.components = []

    def add_component(self, component):
        self.components.append(component)
        return self

    def render(self, ws, context):
        ws.title = self.title
        next_row = 1
        for component in self.components:
            next_row = component.render(ws, context, next_row)
        return next_row
