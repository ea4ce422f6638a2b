"""Pytest fixtures for testing."""

import copy
from typing import Any

import pytest

from orgs_transform.core.config import Config
from orgs_transform.core.schemas import TransformContext, VisitPass


class RecordingRenderer:
    """Render callback that records every visit and emits bracket markers."""

    def __init__(self):
        self.calls: list[dict[str, Any]] = []
        self.contexts: list[TransformContext] = []

    def __call__(self, category, entry, depth, context) -> str:
        state = context.state(depth)
        self.calls.append(
            {
                "category": category,
                "name": entry.get("name"),
                "depth": depth,
                "pass": state.visit_pass,
                "first_entry": state.first_entry,
                "last_entry": state.last_entry,
                "is_leaf": state.is_leaf,
            }
        )
        self.contexts.append(context)

        if state.visit_pass == VisitPass.OPEN:
            return f"({entry.get('name')}"
        return ")"

    def opens(self) -> list[dict[str, Any]]:
        return [c for c in self.calls if c["pass"] == VisitPass.OPEN]

    def closes(self) -> list[dict[str, Any]]:
        return [c for c in self.calls if c["pass"] == VisitPass.CLOSE]


class FakeSource:
    """In-memory organization data source for testing without network calls."""

    def __init__(self, results: dict[str, dict[str, Any]]):
        self.results = results
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def _query(self, name: str, options: dict[str, Any]) -> dict[str, Any]:
        self.calls.append((name, options))
        return copy.deepcopy(self.results[name])

    def get_collaborators(self, **options):
        return self._query("get_collaborators", options)

    def get_contributors(self, **options):
        return self._query("get_contributors", options)

    def get_members(self, **options):
        return self._query("get_members", options)

    def get_org_members(self, **options):
        return self._query("get_org_members", options)

    def get_org_repos(self, **options):
        return self._query("get_org_repos", options)

    def get_org_repo_collaborators(self, **options):
        return self._query("get_org_repo_collaborators", options)

    def get_org_repo_contributors(self, **options):
        return self._query("get_org_repo_contributors", options)

    def get_org_repo_stats(self, **options):
        return self._query("get_org_repo_stats", options)

    def get_org_teams(self, **options):
        return self._query("get_org_teams", options)

    def get_org_team_members(self, **options):
        return self._query("get_org_team_members", options)

    def get_orgs(self, **options):
        return self._query("get_orgs", options)

    def get_owner_orgs(self, **options):
        return self._query("get_owner_orgs", options)

    def get_owner_rate_limits(self):
        return self._query("get_owner_rate_limits", {})

    def get_owners(self):
        return self._query("get_owners", {})

    def get_user_from_credential(self, **options):
        return self._query("get_user_from_credential", options)


@pytest.fixture
def recorder() -> RecordingRenderer:
    """Provide a recording render callback."""
    return RecordingRenderer()


@pytest.fixture
def collaborators_data() -> dict[str, Any]:
    """Provide normalized ``orgs:repos:collaborators`` data.

    The second repo has an empty collaborators list and the second org an
    empty repos list, so both leaf conditions appear below the last depth.
    """
    return {
        "categories": "orgs:repos:collaborators",
        "orgs": [
            {
                "name": "test-org-typhonjs",
                "url": "https://github.com/test-org-typhonjs",
                "description": "Test organization",
                "repos": [
                    {
                        "name": "repo-a",
                        "url": "https://github.com/test-org-typhonjs/repo-a",
                        "description": "First repo",
                        "collaborators": [
                            {"name": "alice", "url": "https://github.com/alice"},
                            {"name": "bob", "url": "https://github.com/bob"},
                        ],
                    },
                    {
                        "name": "repo-b",
                        "url": "https://github.com/test-org-typhonjs/repo-b",
                        "description": "",
                        "collaborators": [],
                    },
                ],
            },
            {
                "name": "test-org-typhonjs2",
                "url": "https://github.com/test-org-typhonjs2",
                "description": "",
                "repos": [],
            },
        ],
    }


@pytest.fixture
def single_depth_data() -> dict[str, Any]:
    """Provide a single category chain."""
    return {"categories": "orgs", "orgs": [{"name": "A"}, {"name": "B"}]}


@pytest.fixture
def html_scenario_data() -> dict[str, Any]:
    """Provide one org holding two repos."""
    return {
        "categories": "orgs:repos",
        "orgs": [
            {
                "name": "A",
                "url": "",
                "description": "",
                "repos": [
                    {"name": "r1", "url": "", "description": ""},
                    {"name": "r2", "url": "", "description": ""},
                ],
            }
        ],
    }


@pytest.fixture
def rate_limit_data() -> dict[str, Any]:
    """Provide normalized ``owners:ratelimit`` data."""
    return {
        "categories": "owners:ratelimit",
        "owners": [
            {
                "name": "typhonjs-test",
                "url": "https://github.com/typhonjs-test",
                "ratelimit": [
                    {
                        "core": {"limit": 5000, "remaining": 4999, "reset": 0},
                        "search": {"limit": 30, "remaining": 30, "reset": 60},
                    }
                ],
            }
        ],
    }


@pytest.fixture
def fake_source(collaborators_data, rate_limit_data) -> FakeSource:
    """Provide a data source answering every query."""
    user_data = {
        "categories": "users",
        "users": [{"name": "typhonjs-test", "url": "https://github.com/typhonjs-test"}],
    }
    results = {
        name: {"normalized": collaborators_data, "raw": {"query": name}}
        for name in (
            "get_collaborators",
            "get_contributors",
            "get_members",
            "get_org_members",
            "get_org_repos",
            "get_org_repo_collaborators",
            "get_org_repo_contributors",
            "get_org_repo_stats",
            "get_org_teams",
            "get_org_team_members",
            "get_orgs",
            "get_owner_orgs",
            "get_owners",
        )
    }
    results["get_owner_rate_limits"] = {"normalized": rate_limit_data, "raw": {}}
    results["get_user_from_credential"] = {"normalized": user_data, "raw": {}}
    return FakeSource(results)


@pytest.fixture
def test_config() -> Config:
    """Provide a default configuration independent of the environment."""
    return Config()
