"""Query pipeline - runs a data source query and transforms its normalized result."""

import logging
from typing import Any, Mapping

from orgs_transform.control import Transform, TransformControl
from orgs_transform.core.config import Config, load_config
from orgs_transform.core.errors import InvalidInputError
from orgs_transform.core.interfaces import InspectOrgsSource
from orgs_transform.core.schemas import QueryResult, TransformOptions

logger = logging.getLogger(__name__)


class InspectOrgsTransform:
    """Mirrors the queries of an organization data source, transforming each result.

    Every query method accepts:

    - ``description``: include descriptions / urls where available
    - ``transform_type``: override the current transform type for this query
    - ``pipe_function``: callable invoked with the transformed result

    Any other keyword (``credential``, stats ``categories``, ...) is forwarded
    to the data source. The source result is returned with the transformed
    output added under ``transformed``.
    """

    def __init__(
        self,
        source: InspectOrgsSource,
        config: Config | None = None,
        transforms: Mapping[str, Transform] | None = None,
    ):
        if not isinstance(source, InspectOrgsSource):
            raise TypeError("source does not implement InspectOrgsSource")

        self.source = source
        self.config = config or load_config()
        self._transform_control = TransformControl(
            transform_type=self.config.transform.transform_type,
            transforms=transforms,
            output=self.config.output,
        )

    def get_transform_control(self) -> TransformControl:
        """Return the transform control, e.g. to change the current transform type."""
        return self._transform_control

    def _run(self, query: str, options: Mapping[str, Any], forward: bool = True) -> QueryResult:
        query_options = dict(options)

        description = query_options.pop("description", None)
        transform_type = query_options.pop("transform_type", None)
        pipe_function = query_options.pop("pipe_function", None)

        if pipe_function is not None and not callable(pipe_function):
            raise TypeError(f"{query}: pipe_function is not callable")

        transform_options = TransformOptions(
            description=self.config.transform.description if description is None else description,
            transform_type=transform_type,
        )

        logger.debug("Running query %s", query)
        method = getattr(self.source, query)
        data = method(**query_options) if forward else method()

        if not isinstance(data, Mapping) or not isinstance(data.get("normalized"), Mapping):
            raise InvalidInputError(f"{query}: source result holds no 'normalized' data")

        result = self._transform_control.transform(data["normalized"], transform_options)

        if pipe_function is not None:
            pipe_function(result)

        return QueryResult(**{**data, "transformed": result})

    def get_collaborators(self, **options: Any) -> QueryResult:
        """Transform collaborators of all repos across organizations (``orgs:repos:collaborators``)."""
        return self._run("get_collaborators", options)

    def get_contributors(self, **options: Any) -> QueryResult:
        """Transform contributors of all repos across organizations (``orgs:repos:contributors``)."""
        return self._run("get_contributors", options)

    def get_members(self, **options: Any) -> QueryResult:
        """Transform members of all organizations (``orgs:members``)."""
        return self._run("get_members", options)

    def get_org_members(self, **options: Any) -> QueryResult:
        return self._run("get_org_members", options)

    def get_org_repos(self, **options: Any) -> QueryResult:
        return self._run("get_org_repos", options)

    def get_org_repo_collaborators(self, **options: Any) -> QueryResult:
        return self._run("get_org_repo_collaborators", options)

    def get_org_repo_contributors(self, **options: Any) -> QueryResult:
        return self._run("get_org_repo_contributors", options)

    def get_org_repo_stats(self, **options: Any) -> QueryResult:
        """
        Transform repo statistics.

        The source requires a ``categories`` list of stats to query, e.g.
        ``codeFrequency``, ``commitActivity``, ``contributors``, ``participation``,
        ``punchCard``, ``stargazers``, ``watchers`` or the ``all`` wildcard.
        """
        return self._run("get_org_repo_stats", options)

    def get_org_teams(self, **options: Any) -> QueryResult:
        return self._run("get_org_teams", options)

    def get_org_team_members(self, **options: Any) -> QueryResult:
        return self._run("get_org_team_members", options)

    def get_orgs(self, **options: Any) -> QueryResult:
        return self._run("get_orgs", options)

    def get_owner_orgs(self, **options: Any) -> QueryResult:
        return self._run("get_owner_orgs", options)

    def get_owner_rate_limits(self, **options: Any) -> QueryResult:
        """Transform rate limits of every owner credential (``owners:ratelimit``)."""
        return self._run("get_owner_rate_limits", options, forward=False)

    def get_owners(self, **options: Any) -> QueryResult:
        return self._run("get_owners", options, forward=False)

    def get_user_from_credential(self, **options: Any) -> QueryResult:
        """Transform the user associated with the ``credential`` option (``users``)."""
        return self._run("get_user_from_credential", options)
