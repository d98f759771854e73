from trino.dbapi import connect
from trino.auth import BasicAuthentication
from typing import Optional

class TrinoClient:
    def __init__(
        self,
        host: str,
        port: int,
        user: str,
        catalog: str,
        schema: str,
        password: Optional[str] = None,
    ):
        self.host = host
        self.port = port
        self.user = user
        self.catalog = catalog
        self.schema = schema
        self.password = password

    def _connect(self):
        kwargs = {}
        if self.password:
            # Basic auth is only accepted over HTTPS
            kwargs["auth"] = BasicAuthentication(self.user, self.password)
            kwargs["http_scheme"] = "https"
        return connect(
            host=self.host,
            port=self.port,
            user=self.user,
            catalog=self.catalog,
            schema=self.schema,
            **kwargs,
        )

    def execute(self, sql: str) -> list[tuple]:
        conn = self._connect()
        cur = conn.cursor()
        try:
            cur.execute(sql)
            return cur.fetchall()
        finally:
            cur.close()
            conn.close()
