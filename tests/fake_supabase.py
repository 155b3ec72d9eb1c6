"""
In-memory stand-in for SupabaseGateway and the postgrest query builder.

Every query records its chained calls so tests can assert on the request that
would have been sent; ``execute()`` returns the canned ``data`` or raises the
configured ``error``.
"""

from types import SimpleNamespace


class FakeQuery:
    def __init__(self, gateway, table_name: str):
        self._gateway = gateway
        self.table_name = table_name
        self.calls: list[tuple] = []

    def _record(self, name: str, *args, **kwargs):
        self.calls.append((name, args, kwargs))
        return self

    def select(self, *args, **kwargs):
        return self._record("select", *args, **kwargs)

    def insert(self, *args, **kwargs):
        return self._record("insert", *args, **kwargs)

    def upsert(self, *args, **kwargs):
        return self._record("upsert", *args, **kwargs)

    def delete(self, *args, **kwargs):
        return self._record("delete", *args, **kwargs)

    def eq(self, *args, **kwargs):
        return self._record("eq", *args, **kwargs)

    def limit(self, *args, **kwargs):
        return self._record("limit", *args, **kwargs)

    def execute(self):
        self._gateway.executed.append(self)
        if self._gateway.error is not None:
            raise self._gateway.error
        return SimpleNamespace(data=self._gateway.data)

    def call(self, name: str):
        """Return the (args, kwargs) of the first chained call named ``name``."""
        for call_name, args, kwargs in self.calls:
            if call_name == name:
                return args, kwargs
        raise AssertionError(f"{name}() was not called; calls were {[c[0] for c in self.calls]}")


class FakeSupabaseGateway:
    """Duck-type-compatible stand-in for SupabaseGateway."""

    def __init__(self, user_id: str = "user-1", data=None, error: Exception | None = None):
        self.user_id = user_id
        self.data = data if data is not None else []
        self.error = error
        self.executed: list[FakeQuery] = []

    def current_user_id(self) -> str:
        return self.user_id

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    @property
    def last_query(self) -> FakeQuery:
        return self.executed[-1]
