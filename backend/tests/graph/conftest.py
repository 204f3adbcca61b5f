"""Graph fixtures — httpx client over the FastAPI app with a test GraphContext.

Invariants:
    - Every request in a test shares one GraphContext (graph_context fixture), so tests
      can swap repositories or flip surface_faults before issuing requests
    - Hashing uses cheap Argon2 parameters
"""

import pytest
from argon2 import PasswordHasher
from httpx import ASGITransport, AsyncClient

from app.graph.context import GraphContext, get_context
from app.infrastructure.password_hasher import CredentialHasher
from app.main import app


@pytest.fixture
def hasher():
    return CredentialHasher(PasswordHasher(time_cost=1, memory_cost=8, parallelism=1))


@pytest.fixture
def graph_context(user_repo, message_repo, hasher):
    return GraphContext(
        users=user_repo, messages=message_repo, hasher=hasher, surface_faults=False,
    )


@pytest.fixture
async def client(graph_context):
    async def override_context():
        return graph_context

    app.dependency_overrides[get_context] = override_context
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def gql(client):
    """POST a GraphQL document and return the decoded body."""
    async def _execute(query: str, **variables):
        res = await client.post("/graphql", json={"query": query, "variables": variables})
        assert res.status_code == 200, res.text
        return res.json()
    return _execute


CREATE_USER = """
mutation($input: InputUser!) {
  createUser(input: $input) { id displayName username createdAt updatedAt }
}
"""

CREATE_MESSAGE = """
mutation($input: InputMessage!) {
  createMessage(input: $input) { id userId content isReply createdAt updatedAt }
}
"""


@pytest.fixture
def create_user(gql):
    async def _create(username: str = "ada", display_name: str = "Ada", password: str = "pw"):
        body = await gql(CREATE_USER, input={
            "displayName": display_name, "username": username, "password": password,
        })
        return body["data"]["createUser"]
    return _create


@pytest.fixture
def create_message(gql):
    async def _create(user_id: str, content: str = "hello", parent_id: str | None = None):
        payload = {"userId": user_id, "content": content}
        if parent_id is not None:
            payload["parentMessageId"] = parent_id
        body = await gql(CREATE_MESSAGE, input=payload)
        return body["data"]["createMessage"]
    return _create
