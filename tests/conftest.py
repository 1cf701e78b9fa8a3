import httpx
import pytest
from graphql import build_schema, introspection_from_schema

from core.config import AppSettings

# Keep tests independent of a developer's .env file; env values come from monkeypatch.
AppSettings.model_config["env_file"] = None

ENV_VARS = (
    "API_BASE_URL",
    "APOLLO_SCHEMA_PATH",
    "HASURA_ADMIN_SECRET",
    "CODEGEN_SOURCE_ROOT",
    "CODEGEN_TARGET_FOLDER",
    "CODEGEN_OUTPUT_FOLDER",
    "CODEGEN_SCHEMA_FORMAT",
    "CODEGEN_ASYNC_CLIENT",
    "CODEGEN_LOG_LEVEL",
)

ENDPOINT = "https://api.example.com/v1/graphql"
ADMIN_SECRET = "s3cret-admin"

SDL = """
type Query {
  hello(name: String): String
  user(id: ID!): User
}

type User {
  id: ID!
  email: String
}
"""

OPERATIONS = """
query GetHello($name: String) {
  hello(name: $name)
}
"""


@pytest.fixture
def project_root(tmp_path, monkeypatch):
    """Empty project folder as cwd, with no codegen variables in the environment."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def env(project_root, monkeypatch):
    monkeypatch.setenv("API_BASE_URL", ENDPOINT)
    monkeypatch.setenv("APOLLO_SCHEMA_PATH", "schema")
    monkeypatch.setenv("HASURA_ADMIN_SECRET", ADMIN_SECRET)
    return project_root


@pytest.fixture
def introspection_data():
    return introspection_from_schema(build_schema(SDL))


class IntrospectionTransport(httpx.MockTransport):
    """MockTransport that records requests and answers with a canned body."""

    def __init__(self, status: int = 200, body: object = None):
        self.requests: list[httpx.Request] = []
        self.status = status
        self.body = body
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status, json=self.body, request=request)


@pytest.fixture
def introspection_transport(introspection_data):
    return IntrospectionTransport(body={"data": introspection_data})
