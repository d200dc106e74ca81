"""BaseService: shared foundation for the publish-easier services."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from publish_easier.infrastructure.workspace import Workspace


class BaseService:
    """Base for service-layer classes.

    Subclasses implement one operation each (init, clean, publish) against
    the workspace handed in at construction.

    Usage::

        class CleanService(BaseService):
            def clean(self) -> ServiceResult:
                path = self._workspace.publish_path
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace
