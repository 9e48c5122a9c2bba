"""Navigation contract between the workflow and the view router"""

from typing import Protocol

from billed.models.enums import Route


class Navigator(Protocol):
    def on_navigate(self, route: Route) -> None:
        """Swap the rendered view for the one registered under route."""
        ...
