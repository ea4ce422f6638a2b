"""Abstract interfaces for renderers and data sources. Each is independently testable and swappable."""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Protocol, runtime_checkable

from orgs_transform.core.schemas import TransformContext, TransformOptions


@runtime_checkable
class RenderFunction(Protocol):
    """Two-pass render callback invoked by the traversal engine.

    Called once per entry with ``context.state(depth).visit_pass`` set to
    ``VisitPass.OPEN`` and once more with ``VisitPass.CLOSE``.
    """

    def __call__(
        self, category: str, entry: Mapping[str, Any], depth: int, context: TransformContext
    ) -> str:
        ...


class DocumentTransform(ABC):
    """Transforms a whole data node at once, bypassing category traversal."""

    @abstractmethod
    def transform(self, data: Mapping[str, Any], options: TransformOptions) -> Any:
        """
        Transform the data node.

        Returns:
            Any renderable value; built-in transforms return strings
        """
        pass


@runtime_checkable
class InspectOrgsSource(Protocol):
    """Interface for the upstream organization data source.

    Every query returns a mapping holding at least a ``normalized`` data node
    (with a ``categories`` chain) and usually the ``raw`` upstream responses.
    """

    def get_collaborators(self, **options: Any) -> Mapping[str, Any]: ...

    def get_contributors(self, **options: Any) -> Mapping[str, Any]: ...

    def get_members(self, **options: Any) -> Mapping[str, Any]: ...

    def get_org_members(self, **options: Any) -> Mapping[str, Any]: ...

    def get_org_repos(self, **options: Any) -> Mapping[str, Any]: ...

    def get_org_repo_collaborators(self, **options: Any) -> Mapping[str, Any]: ...

    def get_org_repo_contributors(self, **options: Any) -> Mapping[str, Any]: ...

    def get_org_repo_stats(self, **options: Any) -> Mapping[str, Any]: ...

    def get_org_teams(self, **options: Any) -> Mapping[str, Any]: ...

    def get_org_team_members(self, **options: Any) -> Mapping[str, Any]: ...

    def get_orgs(self, **options: Any) -> Mapping[str, Any]: ...

    def get_owner_orgs(self, **options: Any) -> Mapping[str, Any]: ...

    def get_owner_rate_limits(self) -> Mapping[str, Any]: ...

    def get_owners(self) -> Mapping[str, Any]: ...

    def get_user_from_credential(self, **options: Any) -> Mapping[str, Any]: ...
