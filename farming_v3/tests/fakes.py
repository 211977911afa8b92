"""In-memory stand-ins for the subgraph clients"""

from ..data.graph_client import _unwrap


class FakeClient:
    """Answers queries with the given response bodies in order, repeating the last one"""

    def __init__(self, *bodies, error_policy="none"):
        self.bodies = list(bodies)
        self.error_policy = error_policy
        self.calls = []

    def query(self, query, variables=None):
        self.calls.append((query, variables))
        body = self.bodies.pop(0) if len(self.bodies) > 1 else self.bodies[0]
        return _unwrap(body, self.error_policy)

    @property
    def last_query(self):
        return self.calls[-1][0]

    @property
    def last_variables(self):
        return self.calls[-1][1]


class AsyncFakeClient(FakeClient):

    async def query(self, query, variables=None):
        return FakeClient.query(self, query, variables)
